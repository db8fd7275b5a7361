"""
Supabase implementation of MealPlanRepository.

Meal plans live in the `workout_diet` table, one row per (owner, day).
"""
import logging
import uuid
from typing import Dict, List, Optional

from pydantic import ValidationError
from supabase import Client

from domain.models import DayOfWeek, MealPlan

logger = logging.getLogger(__name__)

MEAL_PLANS_TABLE = "workout_diet"

_DAY_ORDER = {day.value: position for position, day in enumerate(DayOfWeek)}


def _to_plan(row: dict) -> Optional[MealPlan]:
    try:
        return MealPlan.model_validate(row)
    except ValidationError as e:
        logger.warning(f"Skipping malformed meal plan row {row.get('id')}: {e}")
        return None


class SupabaseMealPlanRepository:
    """
    Supabase implementation of MealPlanRepository protocol.
    """

    def __init__(self, client: Client):
        """
        Initialize with Supabase client.

        Args:
            client: Supabase client instance (injected, not global)
        """
        self._client = client

    def get(self, owner: str, day: DayOfWeek) -> Optional[MealPlan]:
        """Get the owner's plan for a weekday."""
        try:
            result = self._client.table(MEAL_PLANS_TABLE).select("*").eq("user_email", owner).eq("day", day.value).limit(1).execute()
            if not result.data:
                return None
            return _to_plan(result.data[0])
        except Exception as e:
            logger.error(f"Failed to get meal plan for {owner} ({day.value}): {e}")
            return None

    def list_for_owner(self, owner: str) -> List[MealPlan]:
        """List every plan the owner has, in weekday order."""
        try:
            result = self._client.table(MEAL_PLANS_TABLE).select("*").eq("user_email", owner).execute()
            plans = [_to_plan(row) for row in (result.data or [])]
            plans = [plan for plan in plans if plan is not None]
            return sorted(plans, key=lambda plan: _DAY_ORDER[plan.day.value])
        except Exception as e:
            logger.error(f"Failed to list meal plans for {owner}: {e}")
            return []

    def insert(self, plan: MealPlan) -> Optional[MealPlan]:
        """Insert a new plan with a client-generated id."""
        try:
            data = plan.to_row()
            data.setdefault("id", str(uuid.uuid4()))
            result = self._client.table(MEAL_PLANS_TABLE).insert(data).execute()
            if result.data:
                return _to_plan(result.data[0])
            return None
        except Exception as e:
            logger.error(f"Failed to save meal plan for {plan.user_email}: {e}")
            return None

    def update(
        self,
        plan_id: str,
        owner: str,
        *,
        meals: Dict[str, List[str]],
        status: Dict[str, bool],
    ) -> Optional[MealPlan]:
        """Replace the meals and eaten flags of an existing plan."""
        try:
            result = (
                self._client.table(MEAL_PLANS_TABLE)
                .update({"meals": meals, "status": status})
                .eq("id", plan_id)
                .eq("user_email", owner)
                .execute()
            )
            if result.data:
                return _to_plan(result.data[0])
            logger.warning(f"No meal plan {plan_id} for {owner} to update")
            return None
        except Exception as e:
            logger.error(f"Failed to update meal plan {plan_id}: {e}")
            return None
