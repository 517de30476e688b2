"""
Tests for the exception hierarchy.

This module tests that every rejected-edit exception carries its context
as attributes, names a message template, and formats an English default.
"""

from nametree.exceptions import (
    CyclicMoveError,
    DuplicateNameError,
    EmptyImportError,
    EmptyNameError,
    InvalidPositionError,
    NodeNotFoundError,
    ParseError,
    RootExistsError,
    RootSiblingError,
    SelfMoveError,
    TreeEditError,
)


class TestHierarchy:
    def test_all_derive_from_tree_edit_error(self):
        errors = [
            EmptyNameError(),
            EmptyImportError(),
            ParseError("bad"),
            RootExistsError("大学"),
            NodeNotFoundError("x"),
            DuplicateNameError("文学部"),
            SelfMoveError("文学部"),
            RootSiblingError("大学"),
            CyclicMoveError("文学部", "日本文学科"),
            InvalidPositionError("beside"),
        ]
        for error in errors:
            assert isinstance(error, TreeEditError)
            assert isinstance(error.message_key, str)


class TestMessages:
    """Test default English messages and context attributes."""

    def test_root_exists(self):
        error = RootExistsError("大学")
        assert error.existing_name == "大学"
        assert error.message_key == "root_exists"
        assert str(error) == "Root node '大学' already exists"

    def test_node_not_found_roles(self):
        assert NodeNotFoundError("x").message_key == "node_not_found"
        error = NodeNotFoundError("x", role="target")
        assert error.message_key == "target_not_found"
        assert str(error) == "Target node 'x' not found"

    def test_duplicate_name_location(self):
        assert "under '文学部'" in str(DuplicateNameError("英文学科", "文学部"))
        assert "at the root level" in str(DuplicateNameError("大学"))

    def test_cyclic_move(self):
        error = CyclicMoveError("文学部", "日本文学科")
        assert error.node_name == "文学部"
        assert error.target_name == "日本文学科"
        assert "own subtree" in str(error)

    def test_parse_error(self):
        error = ParseError("no nodes found")
        assert error.reason == "no nodes found"
        assert str(error) == "Could not parse import data: no nodes found"
