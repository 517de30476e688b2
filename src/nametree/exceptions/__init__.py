"""
nametree exception classes.

This package provides all exception types raised by the validation checks
for consistent error handling and reporting.
"""

from nametree.exceptions.core import (
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

__all__ = [
    "TreeEditError",
    "CyclicMoveError",
    "DuplicateNameError",
    "EmptyImportError",
    "EmptyNameError",
    "InvalidPositionError",
    "NodeNotFoundError",
    "ParseError",
    "RootExistsError",
    "RootSiblingError",
    "SelfMoveError",
]
