"""
nametree action layer.

Validating wrappers that report every tree edit as an ActionResult.
"""

from nametree.actions.tree_actions import (
    HIGHLIGHT_CLEAR_KEY,
    ActionResult,
    FeedbackCallback,
    TreeActions,
)

__all__ = ["ActionResult", "FeedbackCallback", "HIGHLIGHT_CLEAR_KEY", "TreeActions"]
