"""
User-facing tree actions.

``TreeActions`` sits in front of the reducer. It validates each request
with the same checks the reducer runs, so a failure is reported with a
precise message before anything is dispatched, and it turns every outcome
into an ``ActionResult``. No method raises for invalid input.
"""

import logging
from collections.abc import Callable

from attrs import frozen

from nametree.commands import (
    AddNode,
    AddRootNode,
    ClearTree,
    DeleteNode,
    HighlightNode,
    ImportData,
    MoveNode,
    RenameNode,
    SetInputText,
    check_add_node,
    check_add_root,
    check_import_text,
    check_move,
    check_rename,
    require_name,
    require_position,
)
from nametree.core.types import DropPosition, FeedbackKind
from nametree.exceptions import EmptyImportError, ParseError, TreeEditError
from nametree.scheduling import TaskScheduler
from nametree.settings import ActionMessages, EditorSettings
from nametree.state import TreeStore

logger = logging.getLogger(__name__)

FeedbackCallback = Callable[[FeedbackKind, str], object]

HIGHLIGHT_CLEAR_KEY = "highlight-clear"


@frozen
class ActionResult:
    """Outcome of a user action: a success message or an error message."""

    success: bool
    message: str | None = None
    error: str | None = None


class TreeActions:
    """Validating, message-producing wrapper around a TreeStore.

    Params:
        store: Store holding the canonical state
        scheduler: Runs the deferred highlight clear after a move
        on_feedback: Optional callback receiving ``(kind, message)`` for
            every outcome
        messages: Message catalogue, English by default
        settings: Timing settings
    """

    def __init__(
        self,
        store: TreeStore,
        scheduler: TaskScheduler | None = None,
        on_feedback: FeedbackCallback | None = None,
        messages: ActionMessages | None = None,
        settings: EditorSettings | None = None,
    ):
        self.store = store
        self.scheduler = scheduler if scheduler is not None else TaskScheduler()
        self.on_feedback = on_feedback
        self.messages = messages if messages is not None else ActionMessages()
        self.settings = settings if settings is not None else EditorSettings()

    def _succeed(self, key: str, **values) -> ActionResult:
        message = self.messages.format(key, **values)
        if self.on_feedback is not None:
            self.on_feedback(FeedbackKind.SUCCESS, message)
        return ActionResult(success=True, message=message)

    def _fail(self, error: TreeEditError) -> ActionResult:
        message = self.messages.render(error)
        kind = (
            FeedbackKind.WARNING
            if isinstance(error, EmptyImportError)
            else FeedbackKind.ERROR
        )
        logger.info("Action rejected: %s", error)
        if self.on_feedback is not None:
            self.on_feedback(kind, message)
        return ActionResult(success=False, error=message)

    def set_input_text(self, text: str) -> None:
        self.store.dispatch(SetInputText(text))

    def import_data(self, text: str) -> ActionResult:
        """
        Replace the tree with the one parsed from ``text``.

        A pending highlight clear refers to the replaced tree, so it is
        cancelled and any highlight is dropped at once.
        """
        try:
            check_import_text(text)
        except TreeEditError as e:
            return self._fail(e)
        previous = self.store.state
        if self.store.dispatch(ImportData(text)) is previous:
            return self._fail(ParseError("no nodes found"))
        self.cancel_pending()
        if self.store.state.highlighted_node_id is not None:
            self.highlight_node(None)
        return self._succeed("import_success")

    def add_root_node(self, name: str) -> ActionResult:
        """Create the root node; fails if the name is blank or a root exists."""
        try:
            trimmed = require_name(name)
            check_add_root(self.store.state.tree_data, trimmed)
        except TreeEditError as e:
            return self._fail(e)
        self.store.dispatch(AddRootNode(trimmed))
        return self._succeed("add_root_success", name=trimmed)

    def add_node(self, parent_id: str, name: str) -> ActionResult:
        """Append a child named ``name`` (trimmed) under ``parent_id``."""
        try:
            trimmed = require_name(name)
            check_add_node(self.store.state.tree_data, parent_id, trimmed)
        except TreeEditError as e:
            return self._fail(e)
        self.store.dispatch(AddNode(parent_id, trimmed))
        return self._succeed("add_success", name=trimmed)

    def delete_node(self, node_id: str) -> ActionResult:
        """Delete a node and its subtree; an unknown id is a silent no-op."""
        self.store.dispatch(DeleteNode(node_id))
        return self._succeed("delete_success")

    def move_node(
        self, source_id: str, target_id: str, position: DropPosition | str
    ) -> ActionResult:
        """
        Move a subtree and briefly highlight it.

        On success the moved node is highlighted at once and the highlight
        is cleared ``settings.highlight_duration`` seconds later. A newer
        move replaces the pending clear of an older one.

        Params:
            source_id: Id of the node to move
            target_id: Id of the drop target
            position: before, after or inside the target

        Returns:
            ActionResult describing the outcome
        """
        try:
            position = require_position(position)
            check_move(self.store.state.tree_data, source_id, target_id, position)
        except TreeEditError as e:
            return self._fail(e)

        self.store.dispatch(MoveNode(source_id, target_id, position))
        self.highlight_node(source_id)
        self.scheduler.schedule(
            HIGHLIGHT_CLEAR_KEY,
            self.settings.highlight_duration,
            lambda: self.store.dispatch(HighlightNode(None)),
        )
        return self._succeed("move_success")

    def rename_node(self, node_id: str, new_name: str) -> ActionResult:
        """Rename a node to ``new_name`` (trimmed), keeping its id and children."""
        try:
            trimmed = require_name(new_name)
            check_rename(self.store.state.tree_data, node_id, trimmed)
        except TreeEditError as e:
            return self._fail(e)
        self.store.dispatch(RenameNode(node_id, trimmed))
        return self._succeed("rename_success", name=trimmed)

    def highlight_node(self, node_id: str | None) -> None:
        self.store.dispatch(HighlightNode(node_id))

    def clear_tree(self) -> ActionResult:
        self.cancel_pending()
        self.store.dispatch(ClearTree())
        return self._succeed("clear_success")

    def cancel_pending(self) -> None:
        """Drop the deferred highlight clear, if any."""
        self.scheduler.cancel(HIGHLIGHT_CLEAR_KEY)
