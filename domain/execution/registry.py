"""
In-memory registry of open workout executions.
"""

import logging
import time
from typing import Callable, Dict, Optional, Tuple

from domain.execution.session import WorkoutExecution

logger = logging.getLogger(__name__)

SessionKey = Tuple[str, str]


class ExecutionRegistry:
    """
    Holds the open WorkoutExecution per (owner, routine id).

    Opening an execution for a key that already has one closes the old
    one first, so its countdowns never outlive it.

    When `idle_timeout` is set, executions nobody has read or opened for
    that many seconds are closed on the next `open`. Executions with a
    connected stream or a finalize in flight are never evicted.
    """

    def __init__(
        self,
        *,
        idle_timeout: Optional[float] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._sessions: Dict[SessionKey, WorkoutExecution] = {}
        self._last_seen: Dict[SessionKey, float] = {}
        self._idle_timeout = idle_timeout
        self._clock = clock

    def __len__(self) -> int:
        return len(self._sessions)

    def open(self, execution: WorkoutExecution) -> WorkoutExecution:
        self.evict_idle()
        key = (execution.owner, execution.routine_id)
        previous = self._sessions.pop(key, None)
        if previous is not None:
            logger.info(f"Replacing open execution of routine {execution.routine_id}")
            previous.close()
        self._sessions[key] = execution
        self._last_seen[key] = self._clock()
        return execution

    def get(self, owner: str, routine_id: str) -> Optional[WorkoutExecution]:
        key = (owner, routine_id)
        execution = self._sessions.get(key)
        if execution is not None:
            self._last_seen[key] = self._clock()
        return execution

    def close(self, owner: str, routine_id: str) -> bool:
        key = (owner, routine_id)
        execution = self._sessions.pop(key, None)
        self._last_seen.pop(key, None)
        if execution is None:
            return False
        execution.close()
        return True

    def close_if(self, execution: WorkoutExecution) -> bool:
        """
        Close `execution` only if it is still the one registered for its key.

        A routine reopened in the meantime keeps its new execution.
        """
        key = (execution.owner, execution.routine_id)
        if self._sessions.get(key) is not execution:
            execution.close()
            return False
        return self.close(*key)

    def evict_idle(self) -> int:
        """Close executions idle for longer than `idle_timeout`. Returns how many."""
        if self._idle_timeout is None:
            return 0
        cutoff = self._clock() - self._idle_timeout
        stale = [
            key
            for key, execution in self._sessions.items()
            if self._last_seen.get(key, 0.0) < cutoff
            and not execution.has_listeners
            and not execution.finalizing
        ]
        for key in stale:
            self.close(*key)
        if stale:
            logger.info(f"Evicted {len(stale)} idle workout execution(s)")
        return len(stale)

    def close_all(self) -> int:
        """Close every open execution. Returns how many were closed."""
        count = len(self._sessions)
        for execution in self._sessions.values():
            execution.close()
        self._sessions.clear()
        self._last_seen.clear()
        if count:
            logger.info(f"Closed {count} open workout execution(s)")
        return count
