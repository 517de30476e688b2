"""
Serializers from a forest (and its change history) to export text.

Three formats are supported:
    - text: one ``A > B > C`` line per leaf, readable back by ``parse_data``
    - json: ``{tree, changeHistory, exportedAt}`` pretty-printed
    - yaml: the same envelope in block style with two-space indents
"""

import re
from collections.abc import Sequence

import yaml
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from nametree.core.history import ChangeHistoryEntry, utc_timestamp
from nametree.core.path_utils import join_path
from nametree.core.tree_node import Forest, TreeNode
from nametree.core.types import ExportFormat

# Characters that force a YAML scalar into double quotes
_YAML_SPECIAL_CHARS = re.compile(r"[:\[\]{}>\"'|&*#?]")


class ExportData(BaseModel):
    """Envelope written by the JSON and YAML exports."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    tree: Forest
    change_history: tuple[ChangeHistoryEntry, ...] = ()
    exported_at: str = Field(default_factory=utc_timestamp)

    def to_export_dict(self) -> dict:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class _ExportDumper(yaml.SafeDumper):
    """SafeDumper that indents block sequences under their parent key."""

    def increase_indent(self, flow=False, indentless=False):
        return super().increase_indent(flow, False)


def _represent_str(dumper: yaml.SafeDumper, value: str) -> yaml.ScalarNode:
    if _YAML_SPECIAL_CHARS.search(value) or "\n" in value:
        return dumper.represent_scalar("tag:yaml.org,2002:str", value, style='"')
    return dumper.represent_str(value)


_ExportDumper.add_representer(str, _represent_str)


def convert_tree_to_text(forest: Forest) -> str:
    """
    Serialize a forest to path text, one line per leaf.

    Internal nodes are never emitted on their own; they appear only as
    segments of their leaves' paths. A lone childless root yields just its
    name.

    Params:
        forest: Sequence of root-level nodes

    Returns:
        Newline-joined leaf paths in depth-first pre-order
    """
    lines: list[str] = []

    def traverse(node: TreeNode, path: list[str]) -> None:
        node_path = [*path, node.name]
        if node.is_leaf:
            lines.append(join_path(node_path))
            return
        for child in node.children:
            traverse(child, node_path)

    for root in forest:
        traverse(root, [])
    return "\n".join(lines)


def _build_export(
    forest: Forest,
    change_history: Sequence[ChangeHistoryEntry],
    exported_at: str | None,
) -> ExportData:
    if exported_at is None:
        return ExportData(tree=forest, change_history=tuple(change_history))
    return ExportData(
        tree=forest, change_history=tuple(change_history), exported_at=exported_at
    )


def convert_to_json(
    forest: Forest,
    change_history: Sequence[ChangeHistoryEntry],
    exported_at: str | None = None,
) -> str:
    """
    Serialize a forest and its change history to pretty-printed JSON.

    Params:
        forest: Sequence of root-level nodes
        change_history: History entries to embed
        exported_at: Timestamp override; defaults to the time of the call

    Returns:
        JSON text with ``tree``, ``changeHistory`` and ``exportedAt`` keys
    """
    export = _build_export(forest, change_history, exported_at)
    return export.model_dump_json(indent=2, by_alias=True, exclude_none=True)


def convert_to_yaml(
    forest: Forest,
    change_history: Sequence[ChangeHistoryEntry],
    exported_at: str | None = None,
) -> str:
    """
    Serialize a forest and its change history to block-style YAML.

    Nested mappings and sequences are indented two spaces per level, empty
    sequences are written as ``[]``, and strings holding YAML-significant
    characters or newlines are double-quoted and escaped.

    Params:
        forest: Sequence of root-level nodes
        change_history: History entries to embed
        exported_at: Timestamp override; defaults to the time of the call

    Returns:
        YAML text with ``tree``, ``changeHistory`` and ``exportedAt`` keys
    """
    export = _build_export(forest, change_history, exported_at)
    text = yaml.dump(
        export.to_export_dict(),
        Dumper=_ExportDumper,
        allow_unicode=True,
        sort_keys=False,
        default_flow_style=False,
        indent=2,
        width=float("inf"),
    )
    return text.rstrip("\n")


def export_tree(
    forest: Forest,
    change_history: Sequence[ChangeHistoryEntry],
    export_format: ExportFormat | str = ExportFormat.TEXT,
) -> str:
    """
    Serialize in the requested format.

    Params:
        forest: Sequence of root-level nodes
        change_history: History entries (ignored by the text format)
        export_format: One of text, json or yaml

    Returns:
        The serialized text

    Raises:
        ValueError: If the format is unknown
    """
    export_format = ExportFormat(export_format)
    if export_format is ExportFormat.JSON:
        return convert_to_json(forest, change_history)
    if export_format is ExportFormat.YAML:
        return convert_to_yaml(forest, change_history)
    return convert_tree_to_text(forest)
