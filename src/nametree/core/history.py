"""
Change history entries for structural edits.

Entries are serialized with camelCase keys (``nodeName``, ``fromPath``...)
and unset optional fields are left out of exports.
"""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from nametree.core.types import ChangeActionType, DropPosition


def utc_timestamp() -> str:
    """Return the current UTC time as ISO-8601 with milliseconds and a ``Z`` suffix."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class ChangeHistoryEntry(BaseModel):
    """
    One append-only record of an add, delete or move.

    Params:
        timestamp: ISO-8601 time the edit was applied
        type: Kind of edit
        node_name: Name of the node that was added, deleted or moved
        parent_name: Parent the node was added under (add)
        from_path: Path of the node before the edit (delete, move)
        to_path: Path of the node after the edit (add, move)
        position: Drop position (move)
        target_node_name: Name of the drop target (move)
        details: Free-form note
    """

    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )

    timestamp: str = Field(default_factory=utc_timestamp)
    type: ChangeActionType
    node_name: str | None = None
    parent_name: str | None = None
    from_path: str | None = None
    to_path: str | None = None
    position: DropPosition | None = None
    target_node_name: str | None = None
    details: str | None = None

    def to_export_dict(self) -> dict:
        """Return the JSON-ready mapping used by the JSON and YAML exports."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
