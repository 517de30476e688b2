"""
Command value objects accepted by the tree reducer.

Commands are immutable and carry only ids, names and positions; the
reducer looks everything else up in the current state.
"""

from attrs import field, frozen

from nametree.core.types import DropPosition


@frozen
class SetInputText:
    text: str


@frozen
class ImportData:
    text: str


@frozen
class AddRootNode:
    name: str


@frozen
class AddNode:
    parent_id: str
    name: str


@frozen
class DeleteNode:
    node_id: str


@frozen
class MoveNode:
    source_id: str
    target_id: str
    position: DropPosition = field(converter=DropPosition)


@frozen
class RenameNode:
    node_id: str
    new_name: str


@frozen
class HighlightNode:
    node_id: str | None


@frozen
class ClearTree:
    pass


TreeCommand = (
    SetInputText
    | ImportData
    | AddRootNode
    | AddNode
    | DeleteNode
    | MoveNode
    | RenameNode
    | HighlightNode
    | ClearTree
)
