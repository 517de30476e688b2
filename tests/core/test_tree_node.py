"""
Tests for the core data model.

Focus Areas:
1. TreeNode immutability and copy-on-write helpers
2. ChangeHistoryEntry serialization
3. Name-path splitting and joining
"""

import re

import pytest
from pydantic import ValidationError

from nametree.core import (
    ChangeActionType,
    ChangeHistoryEntry,
    DropPosition,
    TreeNode,
    join_path,
    split_path,
    utc_timestamp,
)


class TestTreeNode:
    """Test TreeNode construction and immutability."""

    def test_ids_are_generated_and_unique(self):
        """Each new node gets its own id."""
        first = TreeNode(name="大学")
        second = TreeNode(name="大学")
        assert first.id
        assert first.id != second.id

    def test_name_is_stored_untrimmed(self):
        """Whitespace is only ignored when names are compared."""
        node = TreeNode(name="  文学部  ")
        assert node.name == "  文学部  "

    def test_node_is_frozen(self):
        """Assigning to a field is rejected."""
        node = TreeNode(name="大学")
        with pytest.raises(ValidationError):
            node.name = "企業"

    def test_with_children_keeps_id_and_original(self):
        """with_children returns a new node and leaves the original alone."""
        node = TreeNode(id="root", name="大学")
        child = TreeNode(name="文学部")

        updated = node.with_children([child])

        assert updated.id == "root"
        assert updated.children == (child,)
        assert node.children == ()

    def test_with_name_keeps_id_and_children(self):
        child = TreeNode(name="日本文学科")
        node = TreeNode(id="lit", name="文学部", children=(child,))

        renamed = node.with_name("理学部")

        assert renamed.id == "lit"
        assert renamed.name == "理学部"
        assert renamed.children == (child,)

    def test_model_validate_nested_lists(self):
        """Nested dicts with list children become tuples of TreeNode."""
        node = TreeNode.model_validate(
            {"id": "a", "name": "A", "children": [{"id": "b", "name": "B"}]}
        )
        assert isinstance(node.children, tuple)
        assert node.children[0].name == "B"
        assert node.children[0].is_leaf
        assert not node.is_leaf


class TestChangeHistoryEntry:
    """Test change history entry serialization."""

    def test_timestamp_is_iso_utc_with_milliseconds(self):
        assert re.fullmatch(
            r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z", utc_timestamp()
        )
        entry = ChangeHistoryEntry(type=ChangeActionType.ADD)
        assert entry.timestamp.endswith("Z")

    def test_export_dict_uses_camel_case_and_skips_unset(self):
        """Only fields that were set appear, under camelCase keys."""
        entry = ChangeHistoryEntry(
            timestamp="2024-01-01T00:00:00.000Z",
            type=ChangeActionType.MOVE,
            node_name="日本文学科",
            from_path="大学 > 文学部 > 日本文学科",
            to_path="大学 > 日本文学科",
            position=DropPosition.INSIDE,
            target_node_name="大学",
        )

        assert entry.to_export_dict() == {
            "timestamp": "2024-01-01T00:00:00.000Z",
            "type": "move",
            "nodeName": "日本文学科",
            "fromPath": "大学 > 文学部 > 日本文学科",
            "toPath": "大学 > 日本文学科",
            "position": "inside",
            "targetNodeName": "大学",
        }

    def test_validates_from_aliases(self):
        entry = ChangeHistoryEntry.model_validate(
            {"type": "delete", "nodeName": "文学部", "fromPath": "大学 > 文学部"}
        )
        assert entry.type is ChangeActionType.DELETE
        assert entry.node_name == "文学部"
        assert entry.from_path == "大学 > 文学部"

    def test_rejects_unknown_type(self):
        with pytest.raises(ValidationError):
            ChangeHistoryEntry(type="rename")


class TestPathUtils:
    """Test name-path helpers."""

    def test_split_trims_segments(self):
        assert split_path("  大学 >  文学部  > 日本文学科 ") == [
            "大学",
            "文学部",
            "日本文学科",
        ]

    def test_split_requires_spaced_delimiter(self):
        assert split_path("a>b") == ["a>b"]

    def test_split_resplits_segment_left_ending_in_delimiter_half(self):
        """A tab before the delimiter cannot leave a name that re-splits differently."""
        segments = split_path("x >\t > c")

        assert segments == ["x", "> c"]
        assert split_path(join_path(segments)) == segments

    def test_split_keeps_trailing_marker_on_last_segment(self):
        assert split_path("a > b >") == ["a", "b >"]

    def test_join(self):
        assert join_path(["大学", "文学部"]) == "大学 > 文学部"
        assert join_path([]) == ""

    def test_drop_position_accepts_plain_strings(self):
        assert DropPosition("inside") is DropPosition.INSIDE
        assert DropPosition.BEFORE == "before"
