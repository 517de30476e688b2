"""
Precondition checks for structural edits.

Each check raises a ``TreeEditError`` subclass naming the violated rule.
The reducer runs them defensively on every command and the action layer
runs them first to build friendly messages, so both layers enforce the
same invariants: sibling names are unique after trimming, there is at
most one root, and no node becomes its own descendant.
"""

from attrs import frozen

from nametree.core.tree_node import Forest, TreeNode
from nametree.core.types import DropPosition
from nametree.exceptions import (
    CyclicMoveError,
    DuplicateNameError,
    EmptyImportError,
    EmptyNameError,
    InvalidPositionError,
    NodeNotFoundError,
    RootExistsError,
    RootSiblingError,
    SelfMoveError,
)
from nametree.operations import (
    find_node,
    find_parent_node,
    get_destination_siblings,
    get_siblings,
    has_duplicate_name_in_siblings,
    is_descendant,
)


@frozen
class MovePlan:
    """Resolved participants of a valid move."""

    source: TreeNode
    target: TreeNode
    position: DropPosition


def require_name(name: str) -> str:
    """
    Validate a user-entered node name.

    Params:
        name: Raw name text

    Returns:
        The trimmed name

    Raises:
        EmptyNameError: If the name is blank after trimming
    """
    trimmed = name.strip()
    if not trimmed:
        raise EmptyNameError()
    return trimmed


def require_position(position: DropPosition | str) -> DropPosition:
    """
    Resolve a drop position given as an enum member or its string value.

    Raises:
        InvalidPositionError: If the value is not before, after or inside
    """
    try:
        return DropPosition(position)
    except ValueError as e:
        raise InvalidPositionError(position) from e


def check_import_text(text: str) -> None:
    """Raise EmptyImportError if the import text is blank."""
    if not text.strip():
        raise EmptyImportError()


def check_add_root(forest: Forest, name: str) -> None:
    """
    Validate adding a root node.

    The duplicate check runs against an empty root sequence whenever the
    root-count check passes, so it can never fire; it is kept so that every
    insertion path checks sibling names the same way.

    Raises:
        RootExistsError: If a root node already exists
        DuplicateNameError: If the name collides at the root level
    """
    if forest:
        raise RootExistsError(forest[0].name)
    if has_duplicate_name_in_siblings(forest, name):
        raise DuplicateNameError(name.strip())


def check_add_node(forest: Forest, parent_id: str, name: str) -> TreeNode:
    """
    Validate adding a child node.

    Returns:
        The parent node

    Raises:
        NodeNotFoundError: If the parent does not exist
        DuplicateNameError: If the parent already has a child with that name
    """
    parent = find_node(forest, parent_id)
    if parent is None:
        raise NodeNotFoundError(parent_id, role="parent")
    if has_duplicate_name_in_siblings(parent.children, name):
        raise DuplicateNameError(name.strip(), parent.name)
    return parent


def check_rename(forest: Forest, node_id: str, new_name: str) -> TreeNode:
    """
    Validate renaming a node; the node itself is excluded from the name check.

    Returns:
        The node to rename

    Raises:
        NodeNotFoundError: If the node does not exist
        DuplicateNameError: If a sibling already has the new name
    """
    node = find_node(forest, node_id)
    if node is None:
        raise NodeNotFoundError(node_id)
    siblings = get_siblings(forest, node_id) or ()
    if has_duplicate_name_in_siblings(siblings, new_name, exclude_id=node_id):
        parent = find_parent_node(forest, node_id)
        raise DuplicateNameError(
            new_name.strip(), parent.name if parent is not None else None
        )
    return node


def check_move(
    forest: Forest, source_id: str, target_id: str, position: DropPosition | str
) -> MovePlan:
    """
    Validate moving a subtree next to or into a target node.

    Checks run in this order: unknown position, drop onto self, sibling for
    the root, missing source, move into own subtree, unresolvable
    destination, name clash in the destination sibling set (the source
    itself excluded).

    Params:
        forest: Sequence of root-level nodes
        source_id: Id of the node to move
        target_id: Id of the drop target
        position: Drop position relative to the target

    Returns:
        MovePlan with the resolved source and target nodes

    Raises:
        InvalidPositionError, SelfMoveError, RootSiblingError, NodeNotFoundError,
        CyclicMoveError, DuplicateNameError: When the corresponding rule is
            violated
    """
    position = require_position(position)
    source = find_node(forest, source_id)

    if source_id == target_id:
        raise SelfMoveError(source.name if source is not None else source_id)

    if position is not DropPosition.INSIDE:
        for root in forest:
            if root.id == target_id:
                raise RootSiblingError(root.name)

    if source is None:
        raise NodeNotFoundError(source_id, role="source")

    if is_descendant(source, target_id):
        target = find_node(source.children, target_id)
        raise CyclicMoveError(source.name, target.name)

    target = find_node(forest, target_id)
    destination = get_destination_siblings(forest, target_id, position)
    if target is None or destination is None:
        raise NodeNotFoundError(target_id, role="target")

    if has_duplicate_name_in_siblings(destination, source.name, exclude_id=source_id):
        if position is DropPosition.INSIDE:
            parent_name = target.name
        else:
            parent = find_parent_node(forest, target_id)
            parent_name = parent.name if parent is not None else None
        raise DuplicateNameError(source.name.strip(), parent_name)

    return MovePlan(source=source, target=target, position=position)
