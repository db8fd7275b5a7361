"""
SaveMealPlan Use Case.

Upserts the meal plan for one (owner, weekday). Saving always resets the
eaten flags, since the meals they referred to may have changed. Individual
flags are toggled separately with `set_eaten`.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Union

from application.ports import MealPlanRepository
from domain.models import DayOfWeek, MealPlan, MealSlot, split_food_items
from domain.models.meal_plan import unchecked_status

logger = logging.getLogger(__name__)

MealsInput = Dict[str, Union[str, List[str], None]]


@dataclass
class SaveMealPlanResult:
    """Result of a meal plan operation."""

    success: bool
    plan: Optional[MealPlan] = None
    created: bool = False
    not_found: bool = False
    error: Optional[str] = None


class SaveMealPlanUseCase:
    """
    Use case for saving meal plans and ticking off meals.

    Usage:
        >>> use_case = SaveMealPlanUseCase(meal_plan_repo=repo)
        >>> result = use_case.execute(
        ...     owner="ana@example.com",
        ...     day=DayOfWeek.MONDAY,
        ...     meals={"almoco": "Arroz, feijão, carne"},
        ... )
    """

    def __init__(self, meal_plan_repo: MealPlanRepository) -> None:
        self._meal_plan_repo = meal_plan_repo

    def execute(self, owner: str, day: DayOfWeek, meals: MealsInput) -> SaveMealPlanResult:
        """Insert or replace the owner's plan for `day`."""
        normalized = {slot.value: split_food_items(meals.get(slot.value)) for slot in MealSlot}

        existing = self._meal_plan_repo.get(owner, day)
        if existing is not None:
            saved = self._meal_plan_repo.update(
                existing.id,
                owner,
                meals=normalized,
                status=unchecked_status(),
            )
            if saved is None:
                return SaveMealPlanResult(success=False, error="Failed to save meal plan")
            logger.info(f"Meal plan {existing.id} updated for {owner} ({day.value})")
            return SaveMealPlanResult(success=True, plan=saved)

        saved = self._meal_plan_repo.insert(
            MealPlan(user_email=owner, day=day, meals=normalized)
        )
        if saved is None:
            return SaveMealPlanResult(success=False, error="Failed to save meal plan")
        logger.info(f"Meal plan created for {owner} ({day.value})")
        return SaveMealPlanResult(success=True, plan=saved, created=True)

    def set_eaten(
        self,
        owner: str,
        day: DayOfWeek,
        slot: MealSlot,
        eaten: bool,
    ) -> SaveMealPlanResult:
        """Set the eaten flag of one meal."""
        existing = self._meal_plan_repo.get(owner, day)
        if existing is None:
            return SaveMealPlanResult(success=False, not_found=True, error="Meal plan not found")

        status = {key.value: value for key, value in existing.status.items()}
        status[slot.value] = eaten
        saved = self._meal_plan_repo.update(
            existing.id,
            owner,
            meals={key.value: value for key, value in existing.meals.items()},
            status=status,
        )
        if saved is None:
            return SaveMealPlanResult(success=False, error="Failed to update meal status")
        return SaveMealPlanResult(success=True, plan=saved)
