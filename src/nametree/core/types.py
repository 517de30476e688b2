"""
Core enumerations and type aliases for the nametree editor.

StrEnum members compare equal to their plain string values, so callers may
pass ``"inside"`` wherever a DropPosition is expected.
"""

from enum import StrEnum


class DropPosition(StrEnum):
    """Where a moved node lands relative to its target."""

    BEFORE = "before"  # new previous sibling
    AFTER = "after"  # new next sibling
    INSIDE = "inside"  # new last child


class ChangeActionType(StrEnum):
    """Kinds of structural edits recorded in the change history."""

    IMPORT = "import"
    ADD = "add"
    DELETE = "delete"
    MOVE = "move"


class ExportFormat(StrEnum):
    """Output formats supported by the serializer."""

    TEXT = "text"
    JSON = "json"
    YAML = "yaml"


class FeedbackKind(StrEnum):
    """Severity of a user-facing feedback message."""

    SUCCESS = "success"
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"
