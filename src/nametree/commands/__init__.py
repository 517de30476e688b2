"""
nametree command processing.

This package contains the command objects dispatched to the reducer and the
precondition checks shared by the reducer and the action layer.
"""

from nametree.commands.commands import (
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
)
from nametree.commands.validation import (
    MovePlan,
    check_add_node,
    check_add_root,
    check_import_text,
    check_move,
    check_rename,
    require_name,
    require_position,
)

__all__ = [
    "AddNode",
    "AddRootNode",
    "ClearTree",
    "DeleteNode",
    "HighlightNode",
    "ImportData",
    "MoveNode",
    "RenameNode",
    "SetInputText",
    "TreeCommand",
    "MovePlan",
    "check_add_node",
    "check_add_root",
    "check_import_text",
    "check_move",
    "check_rename",
    "require_name",
    "require_position",
]
