"""
Pure structural algorithms over a forest of immutable TreeNodes.

Nothing here mutates its input. Functions that edit the tree return a new
forest in which only the branch leading to the edit is rebuilt; every
other subtree is the very same object as before. When an edit finds
nothing to do, the input forest itself is returned.
"""

from collections.abc import Callable, Iterator
from typing import NamedTuple

from nametree.core.tree_node import Forest, TreeNode
from nametree.core.types import DropPosition


class RemovalResult(NamedTuple):
    """Outcome of ``remove_node_recursive``."""

    forest: Forest
    found_node: TreeNode | None


class InsertionResult(NamedTuple):
    """Outcome of ``insert_node_recursive``."""

    forest: Forest
    inserted: bool


class UpdateResult(NamedTuple):
    """Outcome of ``update_node``."""

    forest: Forest
    updated: bool


def _replace_at(forest: Forest, index: int, node: TreeNode) -> Forest:
    return forest[:index] + (node,) + forest[index + 1 :]


def iter_nodes(forest: Forest) -> Iterator[TreeNode]:
    """Yield every node of the forest, depth-first in pre-order."""
    for node in forest:
        yield node
        yield from iter_nodes(node.children)


def find_node(forest: Forest, node_id: str) -> TreeNode | None:
    """
    Find a node by id.

    Params:
        forest: Sequence of root-level nodes to search
        node_id: Id of the wanted node

    Returns:
        The first matching node in depth-first pre-order, None if absent
    """
    for node in forest:
        if node.id == node_id:
            return node
        found = find_node(node.children, node_id)
        if found is not None:
            return found
    return None


def find_parent_node(forest: Forest, node_id: str) -> TreeNode | None:
    """
    Find the direct parent of a node.

    Params:
        forest: Sequence of root-level nodes to search
        node_id: Id of the child whose parent is wanted

    Returns:
        The parent node, or None when the node is a root or absent
    """
    for node in forest:
        if any(child.id == node_id for child in node.children):
            return node
        found = find_parent_node(node.children, node_id)
        if found is not None:
            return found
    return None


def get_siblings(forest: Forest, node_id: str) -> Forest | None:
    """Return the sibling set holding ``node_id`` (the node included), None if absent."""
    if any(node.id == node_id for node in forest):
        return forest
    parent = find_parent_node(forest, node_id)
    return parent.children if parent is not None else None


def get_node_path(forest: Forest, node_id: str) -> list[str] | None:
    """
    Return the names from the root down to a node.

    Params:
        forest: Sequence of root-level nodes to search
        node_id: Id of the node whose path is wanted

    Returns:
        Ancestor names followed by the node's own name, None if absent
    """
    for node in forest:
        if node.id == node_id:
            return [node.name]
        below = get_node_path(node.children, node_id)
        if below is not None:
            return [node.name, *below]
    return None


def remove_node_recursive(forest: Forest, node_id: str) -> RemovalResult:
    """
    Detach a node and its whole subtree from wherever it occurs.

    Params:
        forest: Sequence of root-level nodes
        node_id: Id of the node to detach

    Returns:
        RemovalResult with the rebuilt forest and the detached node (its
        children intact), or the unchanged forest and None if absent
    """
    for index, node in enumerate(forest):
        if node.id == node_id:
            return RemovalResult(forest[:index] + forest[index + 1 :], node)
        if node.children:
            children, found = remove_node_recursive(node.children, node_id)
            if found is not None:
                return RemovalResult(
                    _replace_at(forest, index, node.with_children(children)), found
                )
    return RemovalResult(forest, None)


def insert_node_recursive(
    forest: Forest,
    target_id: str,
    node: TreeNode,
    position: DropPosition | str,
) -> InsertionResult:
    """
    Insert a node relative to a target node.

    ``inside`` appends the node as the target's last child. ``before`` and
    ``after`` place it as the target's immediate sibling, which may be in
    the root sequence itself.

    Params:
        forest: Sequence of root-level nodes
        target_id: Id of the node the insertion is relative to
        node: Node (with its subtree) to insert
        position: Drop position relative to the target

    Returns:
        InsertionResult with the rebuilt forest and True, or the unchanged
        forest and False when the target is absent
    """
    position = DropPosition(position)
    for index, candidate in enumerate(forest):
        if candidate.id == target_id:
            if position is DropPosition.INSIDE:
                updated = candidate.with_children((*candidate.children, node))
                return InsertionResult(_replace_at(forest, index, updated), True)
            at = index if position is DropPosition.BEFORE else index + 1
            return InsertionResult(forest[:at] + (node,) + forest[at:], True)
        if candidate.children:
            children, inserted = insert_node_recursive(
                candidate.children, target_id, node, position
            )
            if inserted:
                updated = candidate.with_children(children)
                return InsertionResult(_replace_at(forest, index, updated), True)
    return InsertionResult(forest, False)


def update_node(
    forest: Forest, node_id: str, transform: Callable[[TreeNode], TreeNode]
) -> UpdateResult:
    """
    Replace one node with ``transform(node)``, rebuilding its ancestors.

    Returns:
        UpdateResult whose flag tells whether the node was found
    """
    for index, node in enumerate(forest):
        if node.id == node_id:
            return UpdateResult(_replace_at(forest, index, transform(node)), True)
        if node.children:
            children, updated = update_node(node.children, node_id, transform)
            if updated:
                return UpdateResult(
                    _replace_at(forest, index, node.with_children(children)), True
                )
    return UpdateResult(forest, False)


def get_all_descendant_ids(node: TreeNode) -> list[str]:
    """Return the node's own id followed by every descendant id, pre-order."""
    return [descendant.id for descendant in iter_nodes((node,))]


def is_descendant(node: TreeNode, node_id: str) -> bool:
    """Check if ``node_id`` is the node itself or any node below it."""
    if node.id == node_id:
        return True
    return any(is_descendant(child, node_id) for child in node.children)


def has_duplicate_name_in_siblings(
    siblings: Forest, name: str, exclude_id: str | None = None
) -> bool:
    """
    Check if a sibling set already holds a name.

    Names are compared after trimming surrounding whitespace and are
    case-sensitive.

    Params:
        siblings: The sibling set to check
        name: Candidate name
        exclude_id: Sibling to leave out of the comparison (the node itself
            when renaming or moving)

    Returns:
        True if another sibling has the same trimmed name
    """
    trimmed = name.strip()
    return any(
        sibling.id != exclude_id and sibling.name.strip() == trimmed
        for sibling in siblings
    )


def get_destination_siblings(
    forest: Forest, target_id: str, position: DropPosition | str
) -> Forest | None:
    """
    Resolve the sibling set a node would join when dropped at a target.

    Params:
        forest: Sequence of root-level nodes
        target_id: Id of the drop target
        position: Drop position relative to the target

    Returns:
        The target's children for ``inside``; the target's own sibling set
        (the root sequence for a root target) for ``before``/``after``;
        None when the target is absent
    """
    if DropPosition(position) is DropPosition.INSIDE:
        target = find_node(forest, target_id)
        return target.children if target is not None else None
    return get_siblings(forest, target_id)
