"""
Workout completion aggregate.
"""

from typing import Sequence

from domain.execution.progress import ProgressMap
from domain.models import ExerciseDefinition


def is_exercise_completed(exercise: ExerciseDefinition, progress: ProgressMap, index: int) -> bool:
    current = progress.get(index)
    return current is not None and current.completed_sets >= exercise.sets


def is_workout_completed(exercises: Sequence[ExerciseDefinition], progress: ProgressMap) -> bool:
    """
    True iff every exercise has all of its sets completed.

    Vacuously True for a routine without exercises.
    """
    return all(
        is_exercise_completed(exercise, progress, index)
        for index, exercise in enumerate(exercises)
    )


def remaining_sets(exercises: Sequence[ExerciseDefinition], progress: ProgressMap) -> int:
    """Number of sets still to be done across the whole routine."""
    total = 0
    for index, exercise in enumerate(exercises):
        current = progress.get(index)
        done = current.completed_sets if current is not None else 0
        total += max(exercise.sets - done, 0)
    return total
