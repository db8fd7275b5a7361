"""
Fake Repository Implementations for Testing.

This package provides in-memory fake implementations of repository interfaces
for fast, isolated testing. No database or external dependencies required.

Features:
- All fakes implement the same Protocol interfaces as real implementations
- Supports seeding with test data
- Supports reset() for test isolation
- Failure flags to simulate database errors
- A manual-clock tick scheduler for rest countdowns

Usage:
    from tests.fakes import FakeRoutineRepository, make_routine

    repo = FakeRoutineRepository()
    repo.seed([make_routine(routine_id="r-1")])
"""
from typing import List, Optional

from domain.models import DayOfWeek, ExerciseDefinition, Routine, RoutineStatus

from tests.fakes.routine_repository import FakeRoutineRepository
from tests.fakes.completion_repository import FakeCompletionRepository
from tests.fakes.meal_plan_repository import FakeMealPlanRepository
from tests.fakes.tick_scheduler import FakeTickHandle, FakeTickScheduler

TEST_OWNER = "ana@example.com"


def make_exercise(
    name: str = "Supino reto",
    sets: int = 3,
    reps: int = 10,
    rest: str = "60",
    weight: Optional[float] = None,
    category: str = "upper",
) -> ExerciseDefinition:
    """Build an exercise definition with sensible defaults."""
    return ExerciseDefinition(
        name=name,
        category=category,
        sets=sets,
        reps=reps,
        weight=weight,
        rest=rest,
    )


def make_routine(
    routine_id: Optional[str] = "routine-1",
    owner: str = TEST_OWNER,
    day: DayOfWeek = DayOfWeek.MONDAY,
    exercises: Optional[List[ExerciseDefinition]] = None,
    status: RoutineStatus = RoutineStatus.PENDING,
) -> Routine:
    """Build a routine; defaults to a single 3x10 exercise with 60s rest."""
    return Routine(
        id=routine_id,
        user_email=owner,
        day_of_week=day,
        exercises=exercises if exercises is not None else [make_exercise()],
        status=status,
    )


__all__ = [
    "FakeRoutineRepository",
    "FakeCompletionRepository",
    "FakeMealPlanRepository",
    "FakeTickScheduler",
    "FakeTickHandle",
    "TEST_OWNER",
    "make_exercise",
    "make_routine",
]
