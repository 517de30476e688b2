"""
Core nametree components.

This package provides the tree data model, the change history entry model,
the shared enumerations and the name-path helpers.
"""

from nametree.core.history import ChangeHistoryEntry, utc_timestamp
from nametree.core.path_utils import PATH_DELIMITER, join_path, split_path
from nametree.core.tree_node import Forest, TreeNode, generate_node_id
from nametree.core.types import (
    ChangeActionType,
    DropPosition,
    ExportFormat,
    FeedbackKind,
)

__all__ = [
    "TreeNode",
    "Forest",
    "generate_node_id",
    "ChangeHistoryEntry",
    "utc_timestamp",
    "ChangeActionType",
    "DropPosition",
    "ExportFormat",
    "FeedbackKind",
    "PATH_DELIMITER",
    "join_path",
    "split_path",
]
