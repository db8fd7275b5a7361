"""
Meal Plan Repository Interface (Port).

This module defines the abstract interface for daily meal plans.
There is at most one plan per (owner, weekday).
"""
from typing import Dict, List, Optional, Protocol

from domain.models import DayOfWeek, MealPlan


class MealPlanRepository(Protocol):
    """
    Abstract interface for meal plan persistence operations.
    """

    def get(self, owner: str, day: DayOfWeek) -> Optional[MealPlan]:
        """
        Get the owner's plan for a weekday.

        Returns:
            MealPlan or None if none exists
        """
        ...

    def list_for_owner(self, owner: str) -> List[MealPlan]:
        """List every plan the owner has, in weekday order."""
        ...

    def insert(self, plan: MealPlan) -> Optional[MealPlan]:
        """
        Insert a new plan.

        Returns:
            The stored plan, or None on failure
        """
        ...

    def update(
        self,
        plan_id: str,
        owner: str,
        *,
        meals: Dict[str, List[str]],
        status: Dict[str, bool],
    ) -> Optional[MealPlan]:
        """
        Replace the meals and eaten flags of an existing plan.

        Returns:
            The updated plan, or None if not found or on failure
        """
        ...
