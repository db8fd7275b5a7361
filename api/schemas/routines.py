"""
Request models for routine endpoints.

Field-level rules (name length, sets/reps minimums, weekday labels) are
enforced by SaveRoutineUseCase so every problem is reported together.
"""

from typing import Any, Dict, List

from pydantic import BaseModel, Field


class RoutineRequest(BaseModel):
    """Body for creating or editing a routine."""

    day_of_week: str = Field(..., description="Weekday label, e.g. 'Segunda-feira'")
    exercises: List[Dict[str, Any]] = Field(
        default_factory=list,
        description="Exercises: name, category, sets, reps, weight, rest",
    )
