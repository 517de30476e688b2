"""
Holder of the canonical TreeState.

The store is the single place the state changes: ``dispatch`` runs the
reducer and swaps in its result as a whole value. Listeners are told about
every state that differs from the previous one.
"""

from collections.abc import Callable

from nametree.commands import TreeCommand
from nametree.state.reducer import TreeState, reduce

StateListener = Callable[[TreeState], None]


class TreeStore:
    """Single-threaded container for the editor state."""

    def __init__(self, initial_input_text: str = "", state: TreeState | None = None):
        if state is None:
            state = TreeState(input_text=initial_input_text)
        self._state = state
        self._listeners: list[StateListener] = []

    @property
    def state(self) -> TreeState:
        return self._state

    def dispatch(self, command: TreeCommand) -> TreeState:
        """
        Apply a command and notify listeners if the state changed.

        Params:
            command: Command to apply

        Returns:
            The state after the command
        """
        previous = self._state
        self._state = reduce(previous, command)
        if self._state is not previous:
            for listener in list(self._listeners):
                listener(self._state)
        return self._state

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """
        Register a listener for state changes.

        Returns:
            A callable that removes the listener again
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe
