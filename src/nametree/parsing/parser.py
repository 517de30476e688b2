"""
Parser for line-oriented path text.

Each non-blank line is a path such as ``大学 > 文学部 > 日本文学科``. Lines
that share a prefix extend the same branch, so several lines build one
tree incrementally:

    大学 > 文学部 > 日本文学科
    大学 > 文学部 > 英文学科

yields a single root 大学 with one child 文学部 holding two children.
"""

import logging

from nametree.core.path_utils import split_path
from nametree.core.tree_node import Forest, TreeNode, generate_node_id

logger = logging.getLogger(__name__)


def parse_data(text: str) -> Forest:
    """
    Parse path text into a forest.

    Segments are trimmed. A node is reused when the same trimmed path was
    already seen in this call; otherwise a new node with a fresh id is
    appended to its parent in first-seen order.

    Params:
        text: Newline-separated path lines

    Returns:
        The distinct first-segment nodes in first-seen order; empty for
        empty or all-blank input
    """
    roots: list[dict] = []
    drafts_by_path: dict[tuple[str, ...], dict] = {}

    for line in text.split("\n"):
        if not line.strip():
            continue
        siblings = roots
        path: tuple[str, ...] = ()
        for name in split_path(line):
            path = (*path, name)
            draft = drafts_by_path.get(path)
            if draft is None:
                draft = {"id": generate_node_id(), "name": name, "children": []}
                siblings.append(draft)
                drafts_by_path[path] = draft
            siblings = draft["children"]

    forest = tuple(TreeNode.model_validate(draft) for draft in roots)
    logger.debug(
        "Parsed %d node(s) under %d root(s)", len(drafts_by_path), len(forest)
    )
    return forest
