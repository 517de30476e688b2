"""
nametree state management.

The reducer, the state model and the store that sequences commands.
"""

from nametree.state.reducer import TreeState, reduce
from nametree.state.store import StateListener, TreeStore

__all__ = ["TreeState", "TreeStore", "StateListener", "reduce"]
