"""
Tests for the pure tree operations.

All operations are exercised on the fixed-id ``university`` forest:

    大学 (root) -> 文学部 (lit) -> 日本文学科 (jp), 英文学科 (en)
                -> 理学部 (sci) -> 数学科 (math)
"""

from nametree.core import DropPosition, TreeNode
from nametree.operations import (
    find_node,
    find_parent_node,
    get_all_descendant_ids,
    get_destination_siblings,
    get_node_path,
    get_siblings,
    has_duplicate_name_in_siblings,
    insert_node_recursive,
    is_descendant,
    iter_nodes,
    remove_node_recursive,
    update_node,
)


class TestFind:
    """Test node and parent lookup."""

    def test_find_root_and_deep_nodes(self, university):
        assert find_node(university, "root").name == "大学"
        assert find_node(university, "math").name == "数学科"

    def test_find_absent_returns_none(self, university):
        assert find_node(university, "missing") is None
        assert find_node((), "root") is None

    def test_find_parent(self, university):
        assert find_parent_node(university, "jp").id == "lit"
        assert find_parent_node(university, "sci").id == "root"

    def test_find_parent_of_root_or_absent_is_none(self, university):
        assert find_parent_node(university, "root") is None
        assert find_parent_node(university, "missing") is None

    def test_get_siblings(self, university):
        assert [n.id for n in get_siblings(university, "en")] == ["jp", "en"]
        assert get_siblings(university, "root") is university
        assert get_siblings(university, "missing") is None

    def test_iter_nodes_is_preorder(self, university):
        assert [n.id for n in iter_nodes(university)] == [
            "root",
            "lit",
            "jp",
            "en",
            "sci",
            "math",
        ]

    def test_get_node_path(self, university):
        assert get_node_path(university, "en") == ["大学", "文学部", "英文学科"]
        assert get_node_path(university, "root") == ["大学"]
        assert get_node_path(university, "missing") is None


class TestRemoveNodeRecursive:
    """Test subtree detachment."""

    def test_remove_leaf(self, university, shape):
        forest, found = remove_node_recursive(university, "jp")

        assert found.id == "jp"
        assert shape(forest) == [
            ("大学", [("文学部", [("英文学科", [])]), ("理学部", [("数学科", [])])])
        ]

    def test_removed_node_keeps_its_subtree(self, university):
        forest, found = remove_node_recursive(university, "lit")

        assert [child.id for child in found.children] == ["jp", "en"]
        assert find_node(forest, "jp") is None
        assert [child.id for child in forest[0].children] == ["sci"]

    def test_remove_root(self, university):
        forest, found = remove_node_recursive(university, "root")
        assert forest == ()
        assert found.id == "root"

    def test_untouched_branches_are_shared(self, university):
        """Only the path to the removed node is rebuilt."""
        forest, _ = remove_node_recursive(university, "jp")
        assert forest[0].children[1] is university[0].children[1]
        assert university[0].children[0].children[0].id == "jp"

    def test_remove_absent_returns_same_forest(self, university):
        forest, found = remove_node_recursive(university, "missing")
        assert forest is university
        assert found is None


class TestInsertNodeRecursive:
    """Test insertion before, after and inside a target."""

    def test_inside_appends_last_child(self, university):
        node = TreeNode(id="new", name="史学科")
        forest, inserted = insert_node_recursive(university, "lit", node, "inside")

        assert inserted
        lit = find_node(forest, "lit")
        assert [child.id for child in lit.children] == ["jp", "en", "new"]

    def test_inside_leaf(self, university):
        node = TreeNode(id="new", name="代数")
        forest, inserted = insert_node_recursive(
            university, "math", node, DropPosition.INSIDE
        )
        assert inserted
        assert find_node(forest, "math").children == (node,)

    def test_before_and_after(self, university):
        node = TreeNode(id="new", name="史学科")

        before, _ = insert_node_recursive(university, "en", node, "before")
        after, _ = insert_node_recursive(university, "jp", node, "after")

        assert [c.id for c in find_node(before, "lit").children] == ["jp", "new", "en"]
        assert [c.id for c in find_node(after, "lit").children] == ["jp", "new", "en"]

    def test_after_last_sibling(self, university):
        node = TreeNode(id="new", name="工学部")
        forest, _ = insert_node_recursive(university, "sci", node, "after")
        assert [c.id for c in forest[0].children] == ["lit", "sci", "new"]

    def test_root_sequence_is_a_sibling_list(self, university):
        node = TreeNode(id="other", name="企業")
        forest, inserted = insert_node_recursive(university, "root", node, "before")
        assert inserted
        assert [n.id for n in forest] == ["other", "root"]

    def test_absent_target_leaves_forest_unchanged(self, university):
        node = TreeNode(name="史学科")
        for position in DropPosition:
            forest, inserted = insert_node_recursive(
                university, "missing", node, position
            )
            assert not inserted
            assert forest is university


class TestUpdateNode:
    def test_update_rebuilds_ancestors_only(self, university):
        forest, updated = update_node(university, "en", lambda n: n.with_name("英語"))

        assert updated
        assert find_node(forest, "en").name == "英語"
        assert forest[0].children[1] is university[0].children[1]
        assert find_node(university, "en").name == "英文学科"

    def test_update_absent(self, university):
        forest, updated = update_node(university, "missing", lambda n: n)
        assert not updated
        assert forest is university


class TestDescendants:
    """Test descendant enumeration and the reflexive descendant check."""

    def test_all_descendant_ids(self, university):
        assert get_all_descendant_ids(university[0]) == [
            "root",
            "lit",
            "jp",
            "en",
            "sci",
            "math",
        ]
        assert get_all_descendant_ids(find_node(university, "jp")) == ["jp"]

    def test_is_descendant_is_reflexive(self, university):
        lit = find_node(university, "lit")
        assert is_descendant(lit, "lit")
        assert is_descendant(lit, "en")
        assert not is_descendant(lit, "sci")
        assert not is_descendant(lit, "root")


class TestDuplicateNames:
    """Test sibling name collision detection."""

    def test_trimmed_comparison(self, university):
        siblings = university[0].children
        assert has_duplicate_name_in_siblings(siblings, "文学部")
        assert has_duplicate_name_in_siblings(siblings, "  文学部 ")

    def test_stored_names_are_trimmed_too(self):
        siblings = (TreeNode(name=" 文学部 "),)
        assert has_duplicate_name_in_siblings(siblings, "文学部")

    def test_case_sensitive(self):
        siblings = (TreeNode(name="Science"),)
        assert not has_duplicate_name_in_siblings(siblings, "science")

    def test_exclude_id(self, university):
        siblings = university[0].children
        assert not has_duplicate_name_in_siblings(siblings, "文学部", exclude_id="lit")
        assert has_duplicate_name_in_siblings(siblings, "理学部", exclude_id="lit")

    def test_empty_siblings(self):
        assert not has_duplicate_name_in_siblings((), "大学")


class TestDestinationSiblings:
    """Test destination sibling resolution for moves."""

    def test_inside_returns_target_children(self, university):
        siblings = get_destination_siblings(university, "lit", "inside")
        assert [n.id for n in siblings] == ["jp", "en"]

    def test_inside_leaf_is_empty(self, university):
        assert get_destination_siblings(university, "jp", "inside") == ()

    def test_before_after_return_target_siblings(self, university):
        for position in ("before", "after"):
            siblings = get_destination_siblings(university, "sci", position)
            assert [n.id for n in siblings] == ["lit", "sci"]

    def test_root_target_returns_root_sequence(self, university):
        assert get_destination_siblings(university, "root", "after") is university

    def test_absent_target(self, university):
        for position in DropPosition:
            assert get_destination_siblings(university, "missing", position) is None
