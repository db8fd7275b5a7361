"""
Rest countdown engine.

Each exercise index moves through two states:

    idle      timer == 0, timer_active False
    counting  timer  > 0, timer_active True

`start()` puts an index into counting immediately and installs a recurring
one-second tick for it. Each tick decrements the timer; the tick that sees
1 (or less) remaining returns the index to idle and releases its tick source.

At most one tick source exists per index. Installing a new one always
cancels the previous one first.
"""

import logging
from typing import Callable, Dict, Optional, Protocol

from domain.execution.progress import ExerciseProgress, ProgressMap

logger = logging.getLogger(__name__)

TICK_INTERVAL_SECONDS = 1.0


class TickHandle(Protocol):
    """A cancellable recurring callback."""

    def cancel(self) -> None:
        """Stop further callbacks. Must be idempotent."""
        ...


class TickScheduler(Protocol):
    """Source of recurring ticks (event loop in production, manual clock in tests)."""

    def call_every(self, interval: float, callback: Callable[[], None]) -> TickHandle:
        """Invoke `callback` every `interval` seconds until the handle is cancelled."""
        ...


class TimerEngine:
    """
    Drives the rest countdowns of one workout execution.

    The engine mutates the shared progress map in place. `on_change` is
    called with the index after every visible state change.

    Usage:
        >>> engine = TimerEngine(progress, scheduler)
        >>> engine.start(0, 30)
        >>> progress[0].timer_active
        True
    """

    def __init__(
        self,
        progress: ProgressMap,
        scheduler: TickScheduler,
        *,
        interval: float = TICK_INTERVAL_SECONDS,
        on_change: Optional[Callable[[int], None]] = None,
    ) -> None:
        self._progress = progress
        self._scheduler = scheduler
        self._interval = interval
        self._on_change = on_change
        self._handles: Dict[int, TickHandle] = {}

    @property
    def active_indices(self) -> list[int]:
        """Indices that currently own a live tick source."""
        return sorted(self._handles)

    def is_counting(self, index: int) -> bool:
        return index in self._handles

    def start(self, index: int, duration_seconds: int) -> None:
        """
        Start (or restart) the countdown for `index`.

        The new remaining time is visible as soon as this returns. A
        non-positive duration leaves the index idle.
        """
        progress = self._progress.get(index)
        if progress is None:
            logger.debug("Ignoring countdown for unknown exercise index %s", index)
            return

        self._release(index)

        if duration_seconds <= 0:
            self._set_idle(progress)
            self._notify(index)
            return

        progress.timer = duration_seconds
        progress.timer_active = True
        self._handles[index] = self._scheduler.call_every(
            self._interval, lambda: self._tick(index)
        )
        logger.debug("Rest countdown started for exercise %s: %ss", index, duration_seconds)
        self._notify(index)

    def cancel(self, index: int) -> None:
        """Stop the countdown for `index` and return it to idle."""
        released = self._release(index)
        progress = self._progress.get(index)
        if progress is not None and (released or progress.timer_active):
            self._set_idle(progress)
            self._notify(index)

    def cancel_all(self) -> None:
        """Release every tick source. Used when the execution view goes away."""
        for index in list(self._handles):
            self.cancel(index)

    def _tick(self, index: int) -> None:
        progress = self._progress.get(index)
        if progress is None or index not in self._handles:
            return

        if progress.timer <= 1:
            self._release(index)
            self._set_idle(progress)
            logger.debug("Rest countdown finished for exercise %s", index)
        else:
            progress.timer -= 1
        self._notify(index)

    def _release(self, index: int) -> bool:
        handle = self._handles.pop(index, None)
        if handle is None:
            return False
        handle.cancel()
        return True

    @staticmethod
    def _set_idle(progress: ExerciseProgress) -> None:
        progress.timer = 0
        progress.timer_active = False

    def _notify(self, index: int) -> None:
        if self._on_change is not None:
            self._on_change(index)
