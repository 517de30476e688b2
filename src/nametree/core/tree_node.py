"""
Core TreeNode model for the nametree editor.

A TreeNode is an immutable, named node with an ordered tuple of children.
Structural edits never change a node in place: they rebuild the touched
branch with ``model_copy`` and share every untouched subtree with the
previous tree.
"""

from collections.abc import Iterable
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field


def generate_node_id() -> str:
    """Return a fresh opaque node id."""
    return str(uuid4())


class TreeNode(BaseModel):
    """
    A single named node in the hierarchy.

    Params:
        id: Opaque identifier, assigned once at creation and kept across moves
        name: User text, stored as given; comparisons trim it
        children: Ordered child nodes
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=generate_node_id)
    name: str
    children: tuple["TreeNode", ...] = ()

    @property
    def is_leaf(self) -> bool:
        """Check if this node has no children."""
        return not self.children

    def with_children(self, children: Iterable["TreeNode"]) -> "TreeNode":
        """Return a copy of this node (same id) with a new children sequence."""
        return self.model_copy(update={"children": tuple(children)})

    def with_name(self, name: str) -> "TreeNode":
        """Return a copy of this node (same id and children) renamed to ``name``."""
        return self.model_copy(update={"name": name})


Forest = tuple[TreeNode, ...]
