"""
Supabase implementation of RoutineRepository.

This module provides the concrete Supabase implementation for routine persistence.
Routines live in the `workouts` table, one row per routine, with the
exercise list stored in a JSON column.
"""
import logging
from datetime import datetime, timezone
from typing import List, Optional

from pydantic import ValidationError
from supabase import Client

from domain.models import DayOfWeek, ExerciseDefinition, Routine, RoutineStatus

logger = logging.getLogger(__name__)

ROUTINES_TABLE = "workouts"


def _log_supabase_error(action: str, e: Exception) -> None:
    error_msg = str(e)
    logger.error(f"Failed to {action}: {e}")
    if "PGRST" in error_msg or "permission" in error_msg.lower() or "row-level security" in error_msg.lower():
        logger.error("RLS/Permissions error: Consider using SUPABASE_SERVICE_ROLE_KEY instead of SUPABASE_ANON_KEY for backend API")


def _to_routine(row: dict) -> Optional[Routine]:
    try:
        return Routine.from_row(row)
    except ValidationError as e:
        logger.warning(f"Skipping malformed routine row {row.get('id')}: {e}")
        return None


class SupabaseRoutineRepository:
    """
    Supabase implementation of RoutineRepository protocol.

    All Supabase query logic for routines is encapsulated here.
    The client is injected via constructor for testability.
    """

    def __init__(self, client: Client):
        """
        Initialize with Supabase client.

        Args:
            client: Supabase client instance (injected, not global)
        """
        self._client = client

    def get(
        self,
        routine_id: str,
        owner: str,
    ) -> Optional[Routine]:
        """Get a single routine by ID."""
        try:
            result = self._client.table(ROUTINES_TABLE).select("*").eq("id", routine_id).eq("user_email", owner).limit(1).execute()
            if not result.data:
                return None
            return _to_routine(result.data[0])
        except Exception as e:
            _log_supabase_error(f"get routine {routine_id}", e)
            return None

    def list_for_owner(
        self,
        owner: str,
        *,
        day: Optional[DayOfWeek] = None,
    ) -> List[Routine]:
        """List an owner's routines, newest first."""
        try:
            query = self._client.table(ROUTINES_TABLE).select("*").eq("user_email", owner)
            if day is not None:
                query = query.eq("day_of_week", day.value)
            result = query.order("created_at", desc=True).execute()
            routines = [_to_routine(row) for row in (result.data or [])]
            return [routine for routine in routines if routine is not None]
        except Exception as e:
            _log_supabase_error("list routines", e)
            return []

    def create(self, routine: Routine) -> Optional[Routine]:
        """Insert a new routine."""
        try:
            data = routine.to_row()
            data.pop("id", None)
            result = self._client.table(ROUTINES_TABLE).insert(data).execute()
            if result.data:
                logger.info(f"Routine saved for {routine.user_email}")
                return _to_routine(result.data[0])
            return None
        except Exception as e:
            _log_supabase_error("save routine", e)
            return None

    def update(
        self,
        routine_id: str,
        owner: str,
        *,
        day_of_week: DayOfWeek,
        exercises: List[ExerciseDefinition],
    ) -> Optional[Routine]:
        """Replace a routine's weekday and exercises."""
        try:
            data = {
                "day_of_week": day_of_week.value,
                "exercises": [exercise.model_dump(mode="json", exclude_none=True) for exercise in exercises],
                "updated_at": datetime.now(timezone.utc).isoformat(),
            }
            result = self._client.table(ROUTINES_TABLE).update(data).eq("id", routine_id).eq("user_email", owner).execute()
            if result.data:
                return _to_routine(result.data[0])
            logger.warning(f"No routine {routine_id} for {owner} to update")
            return None
        except Exception as e:
            _log_supabase_error(f"update routine {routine_id}", e)
            return None

    def update_status(
        self,
        routine_id: str,
        owner: str,
        status: RoutineStatus,
    ) -> bool:
        """Set the lifecycle status of a routine."""
        try:
            result = self._client.table(ROUTINES_TABLE).update({"status": status.value}).eq("id", routine_id).eq("user_email", owner).execute()
            updated = bool(result.data)
            if not updated:
                logger.warning(f"Status update matched no routine {routine_id} for {owner}")
            return updated
        except Exception as e:
            _log_supabase_error(f"update status of routine {routine_id}", e)
            return False

    def delete(
        self,
        routine_id: str,
        owner: str,
    ) -> bool:
        """Delete a routine."""
        try:
            result = self._client.table(ROUTINES_TABLE).delete().eq("id", routine_id).eq("user_email", owner).execute()
            deleted_count = len(result.data) if result.data else 0
            if deleted_count > 0:
                logger.info(f"Routine {routine_id} deleted ({deleted_count} row(s))")
                return True
            logger.warning(f"No routine found with id {routine_id} for {owner} (0 rows deleted)")
            return False
        except Exception as e:
            _log_supabase_error(f"delete routine {routine_id}", e)
            return False
