"""
Name-path helpers shared by the parser, serializer and change history.

A name path is the sequence of node names from the root down to a node,
written as ``Root > Child > Grandchild``.
"""

from collections.abc import Iterable

PATH_DELIMITER = " > "


def split_path(line: str) -> list[str]:
    """
    Split one line of path text into trimmed segments.

    Trimming can leave a segment ending in " >" (when a tab or other
    non-space whitespace stood before the delimiter), and joining such
    segments back would split differently. The trimmed segments are
    therefore re-joined and re-split until the result is stable, so that
    ``split_path(join_path(split_path(line))) == split_path(line)``.

    Params:
        line: Path text such as "大学 > 文学部 > 日本文学科"

    Returns:
        Segments with surrounding whitespace removed, in order

    Examples:
        "a > b > c" -> ["a", "b", "c"]
        "  a  >  b " -> ["a", "b"]
        "a>b" -> ["a>b"]
        "x >\\t > c" -> ["x", "> c"]
    """
    segments = [segment.strip() for segment in line.split(PATH_DELIMITER)]
    canonical = join_path(segments)
    # Each pass either leaves the text unchanged or shortens it
    while canonical != line:
        line = canonical
        segments = [segment.strip() for segment in line.split(PATH_DELIMITER)]
        canonical = join_path(segments)
    return segments


def join_path(names: Iterable[str]) -> str:
    """Join node names into path text."""
    return PATH_DELIMITER.join(names)
