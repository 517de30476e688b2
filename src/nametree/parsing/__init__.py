"""
nametree parsing and serialization.

This package turns path text into a forest and serializes a forest back to
path text, JSON or YAML.
"""

from nametree.parsing.parser import parse_data
from nametree.parsing.serializer import (
    ExportData,
    convert_to_json,
    convert_to_yaml,
    convert_tree_to_text,
    export_tree,
)

__all__ = [
    "ExportData",
    "convert_to_json",
    "convert_to_yaml",
    "convert_tree_to_text",
    "export_tree",
    "parse_data",
]
