"""
Drag-and-drop state for moving subtrees.

The controller owns one mutable drag slot updated on discrete gesture
events. The host resolves pointer geometry itself and only reports the
final ``(target_id, position)``. A session-scoped ``Signal`` announces that
a drag ended anywhere; the controller resets on it even when no drop
reached a valid target.
"""

import logging
from collections.abc import Callable
from enum import StrEnum

from attrs import evolve, field, frozen

from nametree.actions import ActionResult, TreeActions
from nametree.core.tree_node import TreeNode
from nametree.core.types import DropPosition
from nametree.operations import find_node

logger = logging.getLogger(__name__)


class Signal:
    """Minimal broadcast channel: connected callbacks run on every emit."""

    def __init__(self):
        self._receivers: list[Callable[[], None]] = []

    def connect(self, receiver: Callable[[], None]) -> Callable[[], None]:
        """Connect a receiver; return a callable that disconnects it."""
        self._receivers.append(receiver)
        return lambda: self.disconnect(receiver)

    def disconnect(self, receiver: Callable[[], None]) -> None:
        if receiver in self._receivers:
            self._receivers.remove(receiver)

    def emit(self) -> None:
        for receiver in list(self._receivers):
            receiver()

    @property
    def receiver_count(self) -> int:
        return len(self._receivers)


class DragPhase(StrEnum):
    IDLE = "idle"
    DRAGGING = "dragging"
    DROPPING = "dropping"


@frozen
class DropTarget:
    target_id: str
    position: DropPosition = field(converter=DropPosition)


@frozen
class DragState:
    dragging_node_id: str | None = None
    dragging_node: TreeNode | None = None
    preview_target: DropTarget | None = None
    phase: DragPhase = DragPhase.IDLE


class DragController:
    """Tracks one drag gesture and turns its drop into a move."""

    def __init__(self, actions: TreeActions, drag_ended: Signal):
        self._actions = actions
        self._state = DragState()
        self._disconnect = drag_ended.connect(self.end_drag)

    @property
    def state(self) -> DragState:
        return self._state

    def start_drag(self, node_id: str) -> None:
        """Begin dragging ``node_id``; the node is looked up once, at drag start."""
        node = find_node(self._actions.store.state.tree_data, node_id)
        logger.debug("Drag start: %s (%s)", node_id, node.name if node else "not found")
        self._state = DragState(
            dragging_node_id=node_id, dragging_node=node, phase=DragPhase.DRAGGING
        )

    def update_preview(
        self, target_id: str | None, position: DropPosition | str | None = None
    ) -> None:
        """Set (or clear, with ``None``) the hovered drop target."""
        preview = None
        if target_id is not None and position is not None:
            preview = DropTarget(target_id, position)
        self._state = evolve(self._state, preview_target=preview)

    def start_drop(self) -> None:
        self._state = evolve(self._state, phase=DragPhase.DROPPING)

    def drop(self, target_id: str, position: DropPosition | str) -> ActionResult | None:
        """
        Finish the drag by moving the dragged node to the target.

        Returns:
            The move result, or None when no drag was in progress
        """
        source_id = self._state.dragging_node_id
        if source_id is None:
            logger.debug("Drop on %s ignored: nothing is being dragged", target_id)
            return None
        self.start_drop()
        try:
            return self._actions.move_node(source_id, target_id, position)
        finally:
            self.end_drag()

    def end_drag(self) -> None:
        """Reset the drag slot unconditionally."""
        if self._state.phase is not DragPhase.IDLE:
            logger.debug("Drag end")
        self._state = DragState()

    def close(self) -> None:
        """Stop listening to the drag-ended signal."""
        self._disconnect()
