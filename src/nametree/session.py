"""
Editor session: the interface a UI layer talks to.

A session wires one store, one scheduler and the action layer together with
the transient collaborators (feedback messages, drag state, copy label).
Closing the session cancels every deferred update and disconnects the drag
controller, so nothing acts on a torn-down session.
"""

import logging

from nametree.actions import ActionResult, FeedbackCallback, TreeActions
from nametree.core.history import ChangeHistoryEntry
from nametree.core.tree_node import Forest
from nametree.core.types import DropPosition, ExportFormat
from nametree.drag import DragController, Signal
from nametree.feedback import CopyLabel, FeedbackCenter
from nametree.parsing import export_tree
from nametree.scheduling import Clock, TaskScheduler
from nametree.settings import ActionMessages, EditorSettings
from nametree.state import TreeState, TreeStore

logger = logging.getLogger(__name__)


class TreeEditorSession:
    """One editing session over a single tree.

    Params:
        settings: Timing settings, defaults apply when omitted
        messages: Message catalogue, English when omitted
        clock: Time source for deferred updates (``ManualClock`` in tests)
        initial_input_text: Initial content of the import buffer
        on_feedback: Feedback callback; defaults to the session's own
            ``FeedbackCenter``
    """

    def __init__(
        self,
        settings: EditorSettings | None = None,
        messages: ActionMessages | None = None,
        clock: Clock | None = None,
        initial_input_text: str = "",
        on_feedback: FeedbackCallback | None = None,
    ):
        self.settings = settings if settings is not None else EditorSettings()
        self.scheduler = TaskScheduler(clock)
        self.store = TreeStore(initial_input_text)
        self.feedback = FeedbackCenter(self.scheduler, self.settings.feedback_duration)
        self.actions = TreeActions(
            self.store,
            scheduler=self.scheduler,
            on_feedback=on_feedback if on_feedback is not None else self.feedback,
            messages=messages,
            settings=self.settings,
        )
        self.drag_ended = Signal()
        self.drag = DragController(self.actions, self.drag_ended)
        self.copy_label = CopyLabel(
            self.scheduler, self.settings.copy_label_reset_duration
        )
        self._closed = False

    def __enter__(self) -> "TreeEditorSession":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def state(self) -> TreeState:
        return self.store.state

    @property
    def tree_data(self) -> Forest:
        return self.store.state.tree_data

    @property
    def input_text(self) -> str:
        return self.store.state.input_text

    @property
    def highlighted_node_id(self) -> str | None:
        return self.store.state.highlighted_node_id

    @property
    def change_history(self) -> tuple[ChangeHistoryEntry, ...]:
        return self.store.state.change_history

    def set_input_text(self, text: str) -> None:
        self.actions.set_input_text(text)

    def import_data(self, text: str | None = None) -> ActionResult:
        """Import ``text``, or the staged input buffer when omitted."""
        return self.actions.import_data(self.input_text if text is None else text)

    def add_root_node(self, name: str) -> ActionResult:
        return self.actions.add_root_node(name)

    def add_node(self, parent_id: str, name: str) -> ActionResult:
        return self.actions.add_node(parent_id, name)

    def delete_node(self, node_id: str) -> ActionResult:
        return self.actions.delete_node(node_id)

    def move_node(
        self, source_id: str, target_id: str, position: DropPosition | str
    ) -> ActionResult:
        return self.actions.move_node(source_id, target_id, position)

    def rename_node(self, node_id: str, new_name: str) -> ActionResult:
        return self.actions.rename_node(node_id, new_name)

    def highlight_node(self, node_id: str | None) -> None:
        self.actions.highlight_node(node_id)

    def clear_tree(self) -> ActionResult:
        return self.actions.clear_tree()

    def export(self, export_format: ExportFormat | str = ExportFormat.TEXT) -> str:
        """Serialize the current tree (and history, for JSON/YAML)."""
        return export_tree(self.tree_data, self.change_history, export_format)

    def copy_export(self, export_format: ExportFormat | str = ExportFormat.TEXT) -> str:
        """Return the export text for the clipboard and flip the copy label."""
        text = self.export(export_format)
        self.copy_label.mark_copied()
        return text

    def tick(self) -> int:
        """Run the deferred updates that are due; a closed session runs none."""
        if self._closed:
            return 0
        return self.scheduler.run_due()

    def close(self) -> None:
        """Cancel pending deferred updates and detach the drag controller."""
        if self._closed:
            return
        cancelled = self.scheduler.cancel_all()
        self.drag.close()
        self._closed = True
        logger.debug("Session closed (%d pending task(s) cancelled)", cancelled)
