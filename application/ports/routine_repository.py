"""
Routine Repository Interface (Port).

This module defines the abstract interface for routine persistence.
Routines are stored one row per (owner, weekday) with their exercises
embedded as JSON.
"""
from typing import List, Optional, Protocol

from domain.models import DayOfWeek, ExerciseDefinition, Routine, RoutineStatus


class RoutineRepository(Protocol):
    """
    Abstract interface for routine persistence operations.

    Every method is scoped by owner so one user can never read or modify
    another user's routines. Failures are reported as None / False / [].
    """

    def get(
        self,
        routine_id: str,
        owner: str,
    ) -> Optional[Routine]:
        """
        Get a single routine by ID.

        Args:
            routine_id: Routine UUID
            owner: Owner identifier (for authorization)

        Returns:
            Routine or None if not found/unauthorized/failed
        """
        ...

    def list_for_owner(
        self,
        owner: str,
        *,
        day: Optional[DayOfWeek] = None,
    ) -> List[Routine]:
        """
        List an owner's routines, optionally for a single weekday.

        Returns:
            Routines ordered by creation time, newest first
        """
        ...

    def create(self, routine: Routine) -> Optional[Routine]:
        """
        Insert a new routine.

        Returns:
            The stored routine with its generated id, or None on failure
        """
        ...

    def update(
        self,
        routine_id: str,
        owner: str,
        *,
        day_of_week: DayOfWeek,
        exercises: List[ExerciseDefinition],
    ) -> Optional[Routine]:
        """
        Replace a routine's weekday and exercises.

        Returns:
            The updated routine, or None if not found or on failure
        """
        ...

    def update_status(
        self,
        routine_id: str,
        owner: str,
        status: RoutineStatus,
    ) -> bool:
        """
        Set the lifecycle status of a routine.

        Returns:
            True if a row was updated
        """
        ...

    def delete(
        self,
        routine_id: str,
        owner: str,
    ) -> bool:
        """
        Delete a routine.

        Returns:
            True if a row was deleted
        """
        ...
