"""
Domain layer for the Treino API.

This package contains pure domain models and the workout execution core,
independent of infrastructure concerns (database, API, external services).

- models/: Routine, ExerciseDefinition, CompletionRecord, MealPlan
- execution/: set tracking, rest countdowns and completion aggregate
"""

from domain.models import (
    CompletionRecord,
    DayOfWeek,
    ExerciseDefinition,
    MealPlan,
    MealSlot,
    Routine,
    RoutineStatus,
)

__all__ = [
    "CompletionRecord",
    "DayOfWeek",
    "ExerciseDefinition",
    "MealPlan",
    "MealSlot",
    "Routine",
    "RoutineStatus",
]
