"""
Workout execution session.

A WorkoutExecution is the state behind one open execution view of a
routine: per-exercise progress, the rest countdowns and the derived
"workout completed" flag that gates finalization. It is created fresh each
time a routine enters execution and discarded when the view closes or the
routine is finalized. Nothing here is persisted.
"""

import logging
from typing import Any, Callable, Dict, List, Optional

from domain.execution.aggregator import is_workout_completed, remaining_sets
from domain.execution.progress import ExerciseProgress, ProgressMap
from domain.execution.timer import TICK_INTERVAL_SECONDS, TickScheduler, TimerEngine
from domain.execution.tracker import SetCompletionTracker
from domain.models import Routine, RoutineStatus, utc_now_iso

logger = logging.getLogger(__name__)

ChangeListener = Callable[[], None]


class WorkoutExecution:
    """
    Execution state machine for one routine.

    The owner identity is passed in explicitly; nothing is looked up from
    ambient state.

    Usage:
        >>> execution = WorkoutExecution(routine, owner="ana@example.com", scheduler=scheduler)
        >>> execution.complete_set(0)
        True
        >>> execution.workout_completed
        False
    """

    def __init__(
        self,
        routine: Routine,
        *,
        owner: str,
        scheduler: TickScheduler,
        tick_interval: float = TICK_INTERVAL_SECONDS,
        started_at: Optional[str] = None,
    ) -> None:
        self._routine = routine
        self.owner = owner
        self.started_at = started_at or utc_now_iso()
        self._progress: ProgressMap = {
            index: ExerciseProgress() for index in range(len(routine.exercises))
        }
        self._listeners: List[ChangeListener] = []
        self._timer = TimerEngine(
            self._progress,
            scheduler,
            interval=tick_interval,
            on_change=self._handle_change,
        )
        self._tracker = SetCompletionTracker(
            routine.exercises,
            self._progress,
            self._timer,
            on_change=self._handle_change,
        )
        self._finalizing = False
        self._closed = False

    # -------------------------------------------------------------------------
    # Read model
    # -------------------------------------------------------------------------

    @property
    def routine(self) -> Routine:
        return self._routine

    @property
    def routine_id(self) -> Optional[str]:
        return self._routine.id

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def finalizing(self) -> bool:
        return self._finalizing

    @property
    def has_listeners(self) -> bool:
        return bool(self._listeners)

    @property
    def workout_completed(self) -> bool:
        """Derived on every read, never stored."""
        return is_workout_completed(self._routine.exercises, self._progress)

    def progress(self, index: int) -> Optional[ExerciseProgress]:
        """Copy of the progress for one exercise, or None for an unknown index."""
        current = self._progress.get(index)
        if current is None:
            return None
        return ExerciseProgress(**current.to_dict())

    def snapshot(self) -> Dict[str, Any]:
        """Plain-dict view of the execution for rendering."""
        exercises = []
        for index, exercise in enumerate(self._routine.exercises):
            current = self._progress[index]
            exercises.append({
                "index": index,
                "name": exercise.name,
                "category": exercise.category,
                "sets": exercise.sets,
                "reps": exercise.reps,
                "weight": exercise.weight,
                "rest_seconds": exercise.rest_seconds,
                "completed_sets": current.completed_sets,
                "timer": current.timer,
                "timer_active": current.timer_active,
                "done": current.completed_sets >= exercise.sets,
            })
        return {
            "routine_id": self._routine.id,
            "day_of_week": self._routine.day_of_week.value,
            "status": self._routine.status.value,
            "started_at": self.started_at,
            "exercises": exercises,
            "total_sets": self._routine.total_sets,
            "remaining_sets": remaining_sets(self._routine.exercises, self._progress),
            "workout_completed": self.workout_completed,
            "finalizing": self._finalizing,
            "closed": self._closed,
        }

    # -------------------------------------------------------------------------
    # User intents
    # -------------------------------------------------------------------------

    def complete_set(self, index: int) -> bool:
        """Record one set for the exercise at `index`. Silent no-op when not allowed."""
        if self._closed or self._routine.is_completed:
            logger.debug("complete_set on closed or finalized execution %s", self.routine_id)
            return False
        return self._tracker.complete_set(index)

    # -------------------------------------------------------------------------
    # Finalize support
    # -------------------------------------------------------------------------

    def begin_finalize(self) -> bool:
        """
        Claim the finalize slot.

        Returns False when a finalize call for this execution is already in flight.
        """
        if self._finalizing:
            return False
        self._finalizing = True
        self._notify()
        return True

    def end_finalize(self) -> None:
        self._finalizing = False
        self._notify()

    def mark_finalized(self) -> None:
        """Advance the in-memory routine to completed and stop all countdowns."""
        self._routine = self._routine.with_status(RoutineStatus.COMPLETED)
        self._timer.cancel_all()
        self._notify()

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    def add_listener(self, listener: ChangeListener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: ChangeListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def close(self) -> None:
        """Tear down the view: release every outstanding tick source."""
        if self._closed:
            return
        self._timer.cancel_all()
        self._closed = True
        self._notify()
        self._listeners.clear()
        logger.debug("Execution of routine %s closed", self.routine_id)

    def _handle_change(self, index: int) -> None:
        self._notify()

    def _notify(self) -> None:
        for listener in list(self._listeners):
            try:
                listener()
            except Exception as e:
                logger.error(f"Execution listener failed: {e}")
