"""
Workout execution core.

- progress: ExerciseProgress, the per-exercise ephemeral state
- timer: TimerEngine and the TickScheduler protocol it runs on
- tracker: SetCompletionTracker
- aggregator: the derived "workout completed" flag
- session: WorkoutExecution, which composes the above for one routine
- registry: ExecutionRegistry of open executions
"""

from domain.execution.aggregator import is_workout_completed, remaining_sets
from domain.execution.progress import ExerciseProgress, ProgressMap
from domain.execution.registry import ExecutionRegistry
from domain.execution.session import WorkoutExecution
from domain.execution.timer import (
    TICK_INTERVAL_SECONDS,
    TickHandle,
    TickScheduler,
    TimerEngine,
)
from domain.execution.tracker import SetCompletionTracker

__all__ = [
    "ExerciseProgress",
    "ProgressMap",
    "TimerEngine",
    "TickHandle",
    "TickScheduler",
    "TICK_INTERVAL_SECONDS",
    "SetCompletionTracker",
    "is_workout_completed",
    "remaining_sets",
    "WorkoutExecution",
    "ExecutionRegistry",
]
