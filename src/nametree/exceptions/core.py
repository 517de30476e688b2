"""
Exception classes for nametree tree editing.

This module defines one exception type per violated editing rule. The
validation checks raise them; the reducer and the action layer catch them
at their boundaries, so callers of those layers never see them.

Every exception stores its context as attributes and names a message
template through ``message_key``. ``ActionMessages.render`` uses both to
produce localized user-facing text; ``str(error)`` is the English default.
"""


class TreeEditError(Exception):
    """Base exception for all rejected tree edits."""

    message_key = "unexpected_error"


class EmptyNameError(TreeEditError):
    """Raised when a node name is blank after trimming."""

    message_key = "empty_name"

    def __init__(self):
        super().__init__("Node name must not be blank")


class EmptyImportError(TreeEditError):
    """Raised when import text contains nothing but whitespace."""

    message_key = "empty_import"

    def __init__(self):
        super().__init__("No data to import")


class ParseError(TreeEditError):
    """Raised when non-blank import text yields no nodes."""

    message_key = "parse_failed"

    def __init__(self, reason: str):
        """
        Initialize the exception.

        Params:
            reason: Why the text could not be turned into a tree
        """
        self.reason = reason
        super().__init__(f"Could not parse import data: {reason}")


class RootExistsError(TreeEditError):
    """Raised when a second root node is added."""

    message_key = "root_exists"

    def __init__(self, existing_name: str):
        """
        Initialize the exception.

        Params:
            existing_name: Name of the root that is already present
        """
        self.existing_name = existing_name
        super().__init__(f"Root node '{existing_name}' already exists")


class NodeNotFoundError(TreeEditError):
    """Raised when a referenced node id is not in the tree."""

    def __init__(self, node_id: str, role: str = "node"):
        """
        Initialize the exception.

        Params:
            node_id: The id that could not be found
            role: What the id was used as (node, parent, source or target)
        """
        self.node_id = node_id
        self.role = role
        super().__init__(f"{role.capitalize()} node '{node_id}' not found")

    @property
    def message_key(self) -> str:
        return f"{self.role}_not_found"


class DuplicateNameError(TreeEditError):
    """Raised when a sibling set would contain two equal trimmed names."""

    message_key = "duplicate_name"

    def __init__(self, name: str, parent_name: str | None = None):
        """
        Initialize the exception.

        Params:
            name: The colliding name (trimmed)
            parent_name: Parent of the sibling set, None for the root level
        """
        self.name = name
        self.parent_name = parent_name
        location = f"under '{parent_name}'" if parent_name else "at the root level"
        super().__init__(f"A node named '{name}' already exists {location}")


class SelfMoveError(TreeEditError):
    """Raised when a node is dropped onto itself."""

    message_key = "self_move"

    def __init__(self, node_name: str):
        self.node_name = node_name
        super().__init__(f"Cannot move '{node_name}' onto itself")


class RootSiblingError(TreeEditError):
    """Raised when a move would give the root node a sibling."""

    message_key = "root_sibling"

    def __init__(self, root_name: str):
        self.root_name = root_name
        super().__init__(f"Cannot place a node beside the root node '{root_name}'")


class CyclicMoveError(TreeEditError):
    """Raised when a node is moved into itself or one of its descendants."""

    message_key = "cyclic_move"

    def __init__(self, node_name: str, target_name: str):
        """
        Initialize the exception.

        Params:
            node_name: Name of the node being moved
            target_name: Name of the drop target inside the moved subtree
        """
        self.node_name = node_name
        self.target_name = target_name
        super().__init__(
            f"Cannot move '{node_name}' into its own subtree (target '{target_name}')"
        )


class InvalidPositionError(TreeEditError):
    """Raised when a drop position is not before, after or inside."""

    message_key = "invalid_position"

    def __init__(self, position: object):
        self.position = position
        super().__init__(f"Unknown drop position '{position}'")
