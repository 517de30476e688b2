"""
Tree state and the reducer that applies commands to it.

``reduce(state, command)`` is pure and total: it returns a new TreeState for
an accepted command and the very same state object for a rejected one.
Rejections are logged, never raised. Import, AddRootNode and ClearTree
replace the tree wholesale and therefore reset the change history; Add,
Delete and Move append one entry each.
"""

import logging
from collections.abc import Callable

from pydantic import BaseModel, ConfigDict

from nametree.commands import (
    AddNode,
    AddRootNode,
    ClearTree,
    DeleteNode,
    HighlightNode,
    ImportData,
    MoveNode,
    RenameNode,
    SetInputText,
    TreeCommand,
    check_add_node,
    check_add_root,
    check_move,
    check_rename,
)
from nametree.core.history import ChangeHistoryEntry
from nametree.core.path_utils import join_path
from nametree.core.tree_node import Forest, TreeNode
from nametree.core.types import ChangeActionType
from nametree.exceptions import NodeNotFoundError, ParseError, TreeEditError
from nametree.operations import (
    get_node_path,
    insert_node_recursive,
    remove_node_recursive,
    update_node,
)
from nametree.parsing import parse_data

logger = logging.getLogger(__name__)


class TreeState(BaseModel):
    """
    Complete editor state.

    Params:
        tree_data: Root-level nodes (zero or one)
        input_text: Raw staging buffer for import
        highlighted_node_id: Node to emphasise briefly, not a tree attribute
        change_history: Append-only log of edits to the current tree
    """

    model_config = ConfigDict(frozen=True)

    tree_data: Forest = ()
    input_text: str = ""
    highlighted_node_id: str | None = None
    change_history: tuple[ChangeHistoryEntry, ...] = ()

    def with_entry(self, tree_data: Forest, entry: ChangeHistoryEntry) -> "TreeState":
        """Return a copy with a new tree and one more history entry."""
        return self.model_copy(
            update={
                "tree_data": tree_data,
                "change_history": (*self.change_history, entry),
            }
        )


def _path_text(forest: Forest, node_id: str) -> str | None:
    path = get_node_path(forest, node_id)
    return join_path(path) if path is not None else None


def _set_input_text(state: TreeState, command: SetInputText) -> TreeState:
    return state.model_copy(update={"input_text": command.text})


def _import_data(state: TreeState, command: ImportData) -> TreeState:
    forest = parse_data(command.text)
    if not forest and command.text.strip():
        raise ParseError("no nodes found")
    if len(forest) > 1:
        logger.warning(
            "Import produced %d root nodes; keeping only '%s'",
            len(forest),
            forest[0].name,
        )
        forest = forest[:1]
    return state.model_copy(update={"tree_data": forest, "change_history": ()})


def _add_root_node(state: TreeState, command: AddRootNode) -> TreeState:
    check_add_root(state.tree_data, command.name)
    root = TreeNode(name=command.name)
    return state.model_copy(update={"tree_data": (root,), "change_history": ()})


def _add_node(state: TreeState, command: AddNode) -> TreeState:
    parent = check_add_node(state.tree_data, command.parent_id, command.name)
    child = TreeNode(name=command.name)
    forest, _ = update_node(
        state.tree_data,
        parent.id,
        lambda node: node.with_children((*node.children, child)),
    )
    entry = ChangeHistoryEntry(
        type=ChangeActionType.ADD,
        node_name=command.name,
        parent_name=parent.name,
        to_path=_path_text(forest, child.id),
    )
    return state.with_entry(forest, entry)


def _delete_node(state: TreeState, command: DeleteNode) -> TreeState:
    from_path = _path_text(state.tree_data, command.node_id)
    forest, removed = remove_node_recursive(state.tree_data, command.node_id)
    if removed is None:
        # Attempted deletes stay in the audit trail even when nothing matched
        logger.warning("Delete of unknown node '%s' recorded", command.node_id)
        entry = ChangeHistoryEntry(
            type=ChangeActionType.DELETE,
            details=f"node '{command.node_id}' not found; tree unchanged",
        )
    else:
        entry = ChangeHistoryEntry(
            type=ChangeActionType.DELETE, node_name=removed.name, from_path=from_path
        )
    return state.with_entry(forest, entry)


def _move_node(state: TreeState, command: MoveNode) -> TreeState:
    plan = check_move(
        state.tree_data, command.source_id, command.target_id, command.position
    )
    from_path = _path_text(state.tree_data, plan.source.id)
    detached, _ = remove_node_recursive(state.tree_data, plan.source.id)
    forest, inserted = insert_node_recursive(
        detached, plan.target.id, plan.source, plan.position
    )
    if not inserted:
        raise NodeNotFoundError(plan.target.id, role="target")
    entry = ChangeHistoryEntry(
        type=ChangeActionType.MOVE,
        node_name=plan.source.name,
        from_path=from_path,
        to_path=_path_text(forest, plan.source.id),
        position=plan.position,
        target_node_name=plan.target.name,
    )
    return state.with_entry(forest, entry)


def _rename_node(state: TreeState, command: RenameNode) -> TreeState:
    check_rename(state.tree_data, command.node_id, command.new_name)
    forest, _ = update_node(
        state.tree_data, command.node_id, lambda node: node.with_name(command.new_name)
    )
    return state.model_copy(update={"tree_data": forest})


def _highlight_node(state: TreeState, command: HighlightNode) -> TreeState:
    return state.model_copy(update={"highlighted_node_id": command.node_id})


def _clear_tree(state: TreeState, command: ClearTree) -> TreeState:
    return state.model_copy(
        update={"tree_data": (), "highlighted_node_id": None, "change_history": ()}
    )


_HANDLERS: dict[type, Callable[[TreeState, TreeCommand], TreeState]] = {
    SetInputText: _set_input_text,
    ImportData: _import_data,
    AddRootNode: _add_root_node,
    AddNode: _add_node,
    DeleteNode: _delete_node,
    MoveNode: _move_node,
    RenameNode: _rename_node,
    HighlightNode: _highlight_node,
    ClearTree: _clear_tree,
}


def reduce(state: TreeState, command: TreeCommand) -> TreeState:
    """
    Apply one command to a state.

    Params:
        state: Current state
        command: Command to apply

    Returns:
        The next state, or ``state`` itself if the command was rejected

    Raises:
        TypeError: If the command type is unknown
    """
    handler = _HANDLERS.get(type(command))
    if handler is None:
        raise TypeError(f"Unknown tree command: {command!r}")

    try:
        next_state = handler(state, command)
    except TreeEditError as e:
        logger.warning("Rejected %s: %s", type(command).__name__, e)
        return state

    logger.debug("Applied %r", command)
    return next_state
