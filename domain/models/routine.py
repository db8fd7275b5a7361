"""
Routine aggregate - a user's exercises for one weekday.
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field

from domain.models.exercise import ExerciseDefinition


class DayOfWeek(str, Enum):
    """
    The seven weekday labels routines and meal plans are keyed by.

    Values are stored verbatim in the database.
    """

    MONDAY = "Segunda-feira"
    TUESDAY = "Terça-feira"
    WEDNESDAY = "Quarta-feira"
    THURSDAY = "Quinta-feira"
    FRIDAY = "Sexta-feira"
    SATURDAY = "Sábado"
    SUNDAY = "Domingo"


class RoutineStatus(str, Enum):
    """Lifecycle status of a routine."""

    PENDING = "pending"
    COMPLETED = "completed"


class Routine(BaseModel):
    """
    Aggregate representing a weekly workout routine for one day.

    Routines are created and edited through the CRUD path and are read-only
    input to workout execution.

    Examples:
        >>> routine = Routine(
        ...     id="r-1",
        ...     user_email="ana@example.com",
        ...     day_of_week=DayOfWeek.MONDAY,
        ...     exercises=[ExerciseDefinition(name="Agachamento", sets=4, reps=8)],
        ... )
        >>> routine.is_completed
        False
    """

    id: Optional[str] = Field(default=None, description="Routine UUID")
    user_email: str = Field(..., min_length=1, description="Owner identifier")
    day_of_week: DayOfWeek
    exercises: List[ExerciseDefinition] = Field(default_factory=list)
    status: RoutineStatus = Field(default=RoutineStatus.PENDING)
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @property
    def is_completed(self) -> bool:
        return self.status == RoutineStatus.COMPLETED

    @property
    def total_sets(self) -> int:
        """Total number of sets across all exercises."""
        return sum(exercise.sets for exercise in self.exercises)

    def with_status(self, status: RoutineStatus) -> "Routine":
        """Return a copy of this routine with a different status."""
        return self.model_copy(update={"status": status})

    @classmethod
    def from_row(cls, row: dict) -> "Routine":
        """
        Build a Routine from a `workouts` table row.

        Rows created before status tracking have a null status; those are pending.
        """
        data = dict(row)
        data["status"] = data.get("status") or RoutineStatus.PENDING.value
        data["exercises"] = data.get("exercises") or []
        return cls.model_validate(data)

    def to_row(self) -> dict:
        """Serialize to the `workouts` table shape."""
        row = self.model_dump(mode="json", exclude_none=True)
        row.pop("created_at", None)
        row.pop("updated_at", None)
        return row
