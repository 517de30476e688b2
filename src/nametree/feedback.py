"""
Transient user feedback: toast messages and the copy button label.

Both are plain state slots updated by deferred tasks on a TaskScheduler;
rendering them is left to the host UI.
"""

import logging
from functools import partial
from uuid import uuid4

from attrs import frozen

from nametree.core.types import FeedbackKind
from nametree.scheduling import TaskScheduler

logger = logging.getLogger(__name__)


@frozen
class FeedbackMessage:
    id: str
    kind: FeedbackKind
    message: str


class FeedbackCenter:
    """Queue of feedback messages, each expiring on its own timer.

    An instance is callable with ``(kind, message)`` so it can be handed to
    ``TreeActions`` as the feedback callback.
    """

    def __init__(self, scheduler: TaskScheduler, duration: float = 3.0):
        self._scheduler = scheduler
        self._duration = duration
        self._messages: tuple[FeedbackMessage, ...] = ()

    @property
    def messages(self) -> tuple[FeedbackMessage, ...]:
        return self._messages

    def show(self, kind: FeedbackKind | str, message: str) -> FeedbackMessage:
        """
        Add a message and schedule its expiry.

        Params:
            kind: Severity (success, error, warning or info)
            message: Text to show

        Returns:
            The queued message
        """
        entry = FeedbackMessage(
            id=uuid4().hex, kind=FeedbackKind(kind), message=message
        )
        self._messages = (*self._messages, entry)
        self._scheduler.schedule(
            self._task_key(entry.id), self._duration, partial(self._expire, entry.id)
        )
        logger.debug("[%s] %s", entry.kind, message)
        return entry

    __call__ = show

    def remove(self, message_id: str) -> bool:
        """Dismiss a message early; return whether it was still shown."""
        self._scheduler.cancel(self._task_key(message_id))
        return self._expire(message_id)

    def clear(self) -> None:
        for entry in self._messages:
            self._scheduler.cancel(self._task_key(entry.id))
        self._messages = ()

    def _expire(self, message_id: str) -> bool:
        remaining = tuple(m for m in self._messages if m.id != message_id)
        removed = len(remaining) != len(self._messages)
        self._messages = remaining
        return removed

    @staticmethod
    def _task_key(message_id: str) -> str:
        return f"feedback:{message_id}"


class CopyLabel:
    """Copy button label that reverts to its idle text after a delay."""

    TASK_KEY = "copy-label-reset"

    def __init__(
        self,
        scheduler: TaskScheduler,
        duration: float = 2.0,
        idle_text: str = "Copy",
        copied_text: str = "Copied!",
    ):
        self._scheduler = scheduler
        self._duration = duration
        self.idle_text = idle_text
        self.copied_text = copied_text
        self._text = idle_text

    @property
    def text(self) -> str:
        return self._text

    def mark_copied(self) -> None:
        """Show the copied text and schedule the revert, restarting any pending one."""
        self._text = self.copied_text
        self._scheduler.schedule(self.TASK_KEY, self._duration, self.reset)

    def reset(self) -> None:
        self._scheduler.cancel(self.TASK_KEY)
        self._text = self.idle_text
