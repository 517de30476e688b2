"""
nametree tree operations.

Pure find, insert, remove and invariant-check functions over forests.
"""

from nametree.operations.tree_operations import (
    InsertionResult,
    RemovalResult,
    UpdateResult,
    find_node,
    find_parent_node,
    get_all_descendant_ids,
    get_destination_siblings,
    get_node_path,
    get_siblings,
    has_duplicate_name_in_siblings,
    insert_node_recursive,
    is_descendant,
    iter_nodes,
    remove_node_recursive,
    update_node,
)

__all__ = [
    "InsertionResult",
    "RemovalResult",
    "UpdateResult",
    "find_node",
    "find_parent_node",
    "get_all_descendant_ids",
    "get_destination_siblings",
    "get_node_path",
    "get_siblings",
    "has_duplicate_name_in_siblings",
    "insert_node_recursive",
    "is_descendant",
    "iter_nodes",
    "remove_node_recursive",
    "update_node",
]
