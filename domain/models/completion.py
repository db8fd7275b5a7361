"""
Completion record - one entry in a user's workout history.
"""

import uuid
from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field

from domain.models.routine import DayOfWeek, Routine


def utc_now_iso() -> str:
    """Current UTC time as an ISO-8601 string."""
    return datetime.now(timezone.utc).isoformat()


class CompletionRecord(BaseModel):
    """
    Record written to the history collection when a routine is finalized.
    """

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    user_email: str
    day_of_week: DayOfWeek
    completed: bool = True
    started_at: str
    finished_at: str
    workout_id: Optional[str] = Field(
        default=None, description="Routine this completion belongs to"
    )

    @classmethod
    def for_routine(
        cls,
        routine: Routine,
        *,
        started_at: str,
        finished_at: Optional[str] = None,
        record_id: Optional[str] = None,
    ) -> "CompletionRecord":
        """Build a completion record for a finished routine."""
        data = {
            "user_email": routine.user_email,
            "day_of_week": routine.day_of_week,
            "started_at": started_at,
            "finished_at": finished_at or utc_now_iso(),
            "workout_id": routine.id,
        }
        if record_id:
            data["id"] = record_id
        return cls(**data)

    @property
    def duration_seconds(self) -> int:
        start = datetime.fromisoformat(self.started_at.replace("Z", "+00:00"))
        end = datetime.fromisoformat(self.finished_at.replace("Z", "+00:00"))
        return max(int((end - start).total_seconds()), 0)

    def to_row(self) -> dict:
        """
        Serialize to the history table shape.

        The history table has no routine column, so `workout_id` stays on
        the model only.
        """
        return self.model_dump(mode="json", exclude={"workout_id"}, exclude_none=True)
