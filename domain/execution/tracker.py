"""
Set-completion tracking.

Counts completed sets per exercise and starts the rest countdown between
sets. Rejected calls are silent no-ops: completing a set while resting,
completing past the required sets, or naming an unknown exercise.
"""

import logging
from typing import Callable, Optional, Sequence

from domain.execution.progress import ProgressMap
from domain.execution.timer import TimerEngine
from domain.models import ExerciseDefinition

logger = logging.getLogger(__name__)


class SetCompletionTracker:
    """
    Advances completed sets for the exercises of one routine.

    Args:
        exercises: The routine's exercise definitions, in order
        progress: Shared progress map keyed by exercise index
        timer: Countdown engine for rest periods
        on_change: Called with the index after a set is recorded
    """

    def __init__(
        self,
        exercises: Sequence[ExerciseDefinition],
        progress: ProgressMap,
        timer: TimerEngine,
        *,
        on_change: Optional[Callable[[int], None]] = None,
    ) -> None:
        self._exercises = exercises
        self._progress = progress
        self._timer = timer
        self._on_change = on_change

    def can_complete(self, index: int) -> bool:
        """Whether `complete_set(index)` would record a set right now."""
        if not 0 <= index < len(self._exercises):
            return False
        progress = self._progress.get(index)
        if progress is None or progress.timer_active:
            return False
        return progress.completed_sets < self._exercises[index].sets

    def complete_set(self, index: int) -> bool:
        """
        Record one completed set for the exercise at `index`.

        Starts the rest countdown when sets remain and rest is configured.

        Returns:
            True if a set was recorded, False if the call was a no-op
        """
        if not self.can_complete(index):
            logger.debug("complete_set(%s) rejected", index)
            return False

        exercise = self._exercises[index]
        progress = self._progress[index]
        progress.completed_sets += 1
        if self._on_change is not None:
            self._on_change(index)

        # Final set never triggers rest
        if progress.completed_sets < exercise.sets and exercise.has_rest:
            self._timer.start(index, exercise.rest_seconds)

        return True
