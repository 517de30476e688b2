"""
Cancelable deferred tasks driven by an injectable clock.

The editor is single-threaded: nothing fires on its own. The host calls
``TaskScheduler.run_due()`` from its event loop (or a test advances a
``ManualClock`` and calls it), and every task whose deadline has passed
runs to completion in deadline order. Tasks are keyed, so scheduling a
key again supersedes the pending task with that key.
"""

import itertools
import logging
import time
from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)


class Clock(ABC):
    """Abstract time source for dependency injection."""

    @abstractmethod
    def now(self) -> float:
        """Return the current time in seconds."""
        ...


class RealClock(Clock):
    """Production clock backed by ``time.monotonic()``."""

    def now(self) -> float:
        return time.monotonic()


class ManualClock(Clock):
    """Clock that only moves when told to, for tests."""

    def __init__(self, start: float = 0.0):
        self._now = start

    def now(self) -> float:
        return self._now

    def advance(self, seconds: float) -> None:
        """Move the clock forward by ``seconds``."""
        self._now += seconds


@dataclass(order=True)
class ScheduledTask:
    """A callback waiting for its deadline."""

    deadline: float
    sequence: int
    key: str = field(compare=False)
    callback: Callable[[], None] = field(compare=False, repr=False)


class TaskScheduler:
    """Keyed, cancelable, cooperatively-run deferred callbacks."""

    def __init__(self, clock: Clock | None = None):
        self._clock = clock if clock is not None else RealClock()
        self._tasks: dict[str, ScheduledTask] = {}
        self._sequence = itertools.count()

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def pending(self) -> list[str]:
        """Keys of pending tasks in the order they will fire."""
        return [task.key for task in sorted(self._tasks.values())]

    def schedule(
        self, key: str, delay: float, callback: Callable[[], None]
    ) -> ScheduledTask:
        """
        Run ``callback`` once ``delay`` seconds have passed.

        Params:
            key: Task identity; a pending task with the same key is replaced
            delay: Seconds from now
            callback: Zero-argument callable

        Returns:
            The scheduled task
        """
        task = ScheduledTask(
            deadline=self._clock.now() + delay,
            sequence=next(self._sequence),
            key=key,
            callback=callback,
        )
        if key in self._tasks:
            logger.debug("Superseding pending task '%s'", key)
        self._tasks[key] = task
        return task

    def cancel(self, key: str) -> bool:
        """Cancel the pending task with ``key``; return whether one existed."""
        return self._tasks.pop(key, None) is not None

    def cancel_all(self) -> int:
        """Cancel every pending task and return how many there were."""
        count = len(self._tasks)
        self._tasks.clear()
        if count:
            logger.debug("Cancelled %d pending task(s)", count)
        return count

    def run_due(self) -> int:
        """
        Fire every task whose deadline has passed.

        Tasks scheduled by a callback wait for a later call even if they
        are already due.

        Returns:
            Number of callbacks run
        """
        now = self._clock.now()
        due = sorted(task for task in self._tasks.values() if task.deadline <= now)
        ran = 0
        for task in due:
            # An earlier callback may have cancelled or replaced this task
            if self._tasks.get(task.key) is not task:
                continue
            del self._tasks[task.key]
            task.callback()
            ran += 1
        return ran
