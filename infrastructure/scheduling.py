"""
asyncio-backed tick scheduler for rest countdowns.

Ticks are scheduled on the running event loop with `call_at`, re-armed
after every callback. When the loop falls behind (a blocked loop, a
suspended host), missed ticks are skipped rather than fired in a burst.
"""

import asyncio
import logging
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class AsyncioTickHandle:
    """Recurring callback on an event loop. Cancel is idempotent."""

    def __init__(
        self,
        loop: asyncio.AbstractEventLoop,
        interval: float,
        callback: Callable[[], None],
    ) -> None:
        self._loop = loop
        self._interval = interval
        self._callback = callback
        self._cancelled = False
        self._timer: Optional[asyncio.TimerHandle] = None
        self._deadline = loop.time() + interval
        self._arm()

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        self._cancelled = True
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _arm(self) -> None:
        self._timer = self._loop.call_at(self._deadline, self._fire)

    def _fire(self) -> None:
        self._timer = None
        if self._cancelled:
            return

        try:
            self._callback()
        except Exception:
            logger.exception("Tick callback failed")

        if self._cancelled:
            return

        now = self._loop.time()
        self._deadline += self._interval
        if self._deadline <= now:
            skipped = int((now - self._deadline) // self._interval) + 1
            logger.debug(f"Tick source fell behind, skipping {skipped} tick(s)")
            self._deadline += skipped * self._interval
        self._arm()


class AsyncioTickScheduler:
    """
    TickScheduler implementation for code running inside an event loop.

    Args:
        loop: Loop to schedule on. Defaults to the loop running at call time.
    """

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None) -> None:
        self._loop = loop

    def call_every(self, interval: float, callback: Callable[[], None]) -> AsyncioTickHandle:
        if interval <= 0:
            raise ValueError(f"Tick interval must be positive, got {interval}")
        loop = self._loop or asyncio.get_running_loop()
        return AsyncioTickHandle(loop, interval, callback)
