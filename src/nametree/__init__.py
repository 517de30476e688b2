"""
nametree - editing engine for an ordered, named, single-root tree

nametree parses ``A > B > C`` path text into a tree, applies structural
edits (add, delete, move, rename) while keeping sibling names unique and
the tree acyclic, records a change history, and exports the result as path
text, JSON or YAML.
"""

from importlib.metadata import version

from nametree.actions import ActionResult, TreeActions
from nametree.core import ChangeHistoryEntry, DropPosition, ExportFormat, TreeNode
from nametree.parsing import (
    convert_to_json,
    convert_to_yaml,
    convert_tree_to_text,
    parse_data,
)
from nametree.session import TreeEditorSession
from nametree.settings import ActionMessages, EditorSettings
from nametree.state import TreeState, TreeStore, reduce

__version__ = version("nametree")

__all__ = [
    "__version__",
    "ActionMessages",
    "ActionResult",
    "ChangeHistoryEntry",
    "DropPosition",
    "EditorSettings",
    "ExportFormat",
    "TreeActions",
    "TreeEditorSession",
    "TreeNode",
    "TreeState",
    "TreeStore",
    "convert_to_json",
    "convert_to_yaml",
    "convert_tree_to_text",
    "parse_data",
    "reduce",
]
