"""
Domain models for the Treino API.

This package contains pure domain models that are independent of
infrastructure concerns (database, API, external services).

These models represent the core business concepts:
- Routine: The aggregate holding one weekday's exercises and lifecycle status
- ExerciseDefinition: A single exercise with sets, reps, weight and rest
- CompletionRecord: A history entry written when a routine is finalized
- MealPlan: Planned meals for one weekday with eaten flags

Usage:
    >>> from domain.models import Routine, ExerciseDefinition, DayOfWeek

    >>> routine = Routine(
    ...     user_email="ana@example.com",
    ...     day_of_week=DayOfWeek.MONDAY,
    ...     exercises=[
    ...         ExerciseDefinition(name="Supino", sets=3, reps=10, rest="60"),
    ...     ],
    ... )

    >>> # Serialize to JSON
    >>> json_str = routine.model_dump_json(indent=2)
"""

from domain.models.completion import CompletionRecord, utc_now_iso
from domain.models.exercise import (
    DEFAULT_REST,
    ExerciseDefinition,
    parse_rest_seconds,
)
from domain.models.meal_plan import MealPlan, MealSlot, split_food_items
from domain.models.routine import DayOfWeek, Routine, RoutineStatus

__all__ = [
    # Main entities
    "Routine",
    "ExerciseDefinition",
    "CompletionRecord",
    "MealPlan",
    # Enums
    "DayOfWeek",
    "RoutineStatus",
    "MealSlot",
    # Helpers
    "DEFAULT_REST",
    "parse_rest_seconds",
    "split_food_items",
    "utc_now_iso",
]
