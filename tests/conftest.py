"""
Shared test fixtures and utilities for the nametree test suite.
"""

import pytest

from nametree.core.tree_node import Forest, TreeNode
from nametree.scheduling import ManualClock, TaskScheduler


def tree_shape(forest: Forest) -> list:
    """Reduce a forest to nested ``(name, children)`` pairs, ignoring ids."""
    return [(node.name, tree_shape(node.children)) for node in forest]


@pytest.fixture(scope="session")
def shape():
    """Expose ``tree_shape`` to tests.

    Usage:
        def test_something(shape):
            assert shape(forest) == [("a", [])]
    """
    return tree_shape


@pytest.fixture
def clock():
    return ManualClock()


@pytest.fixture
def scheduler(clock):
    return TaskScheduler(clock)


@pytest.fixture
def university() -> Forest:
    """Fixed-id tree used across the suite.

    大学 (root)
    ├── 文学部 (lit)
    │   ├── 日本文学科 (jp)
    │   └── 英文学科 (en)
    └── 理学部 (sci)
        └── 数学科 (math)
    """
    return (
        TreeNode(
            id="root",
            name="大学",
            children=(
                TreeNode(
                    id="lit",
                    name="文学部",
                    children=(
                        TreeNode(id="jp", name="日本文学科"),
                        TreeNode(id="en", name="英文学科"),
                    ),
                ),
                TreeNode(
                    id="sci",
                    name="理学部",
                    children=(TreeNode(id="math", name="数学科"),),
                ),
            ),
        ),
    )
