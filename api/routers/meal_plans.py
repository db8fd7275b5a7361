"""
Meal plans router for the daily diet log.

This router contains endpoints for:
- /meal-plans - List the week's meal plans
- /meal-plans/{day} - Get/save one day's meals
- /meal-plans/{day}/status/{slot} - Tick a meal off
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from api.deps import get_current_user, get_meal_plan_repo, get_save_meal_plan_use_case
from api.schemas import MealPlanRequest, MealStatusRequest
from application.ports import MealPlanRepository
from application.use_cases import SaveMealPlanUseCase
from domain.models import DayOfWeek, MealSlot

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["Meal Plans"],
)


@router.get("/meal-plans")
def list_meal_plans_endpoint(
    owner: str = Depends(get_current_user),
    meal_plan_repo: MealPlanRepository = Depends(get_meal_plan_repo),
):
    """List the user's meal plans ordered Monday to Sunday."""
    plans = meal_plan_repo.list_for_owner(owner)
    return {
        "success": True,
        "meal_plans": [plan.model_dump(mode="json") for plan in plans],
    }


@router.get("/meal-plans/{day}")
def get_meal_plan_endpoint(
    day: DayOfWeek,
    owner: str = Depends(get_current_user),
    meal_plan_repo: MealPlanRepository = Depends(get_meal_plan_repo),
):
    """Get the meal plan for one weekday."""
    plan = meal_plan_repo.get(owner, day)
    if plan is None:
        raise HTTPException(status_code=404, detail="Meal plan not found")
    return {
        "success": True,
        "meal_plan": plan.model_dump(mode="json"),
        "eaten_count": plan.eaten_count,
    }


@router.put("/meal-plans/{day}")
def save_meal_plan_endpoint(
    day: DayOfWeek,
    request: MealPlanRequest,
    owner: str = Depends(get_current_user),
    use_case: SaveMealPlanUseCase = Depends(get_save_meal_plan_use_case),
):
    """
    Save the meals for one weekday.

    Creates the plan if the day has none. Saving clears every eaten flag.
    """
    result = use_case.execute(owner, day, request.model_dump())
    if not result.success:
        raise HTTPException(status_code=502, detail=result.error)
    return {
        "success": True,
        "created": result.created,
        "meal_plan": result.plan.model_dump(mode="json"),
    }


@router.patch("/meal-plans/{day}/status/{slot}")
def set_meal_status_endpoint(
    day: DayOfWeek,
    slot: MealSlot,
    request: MealStatusRequest,
    owner: str = Depends(get_current_user),
    use_case: SaveMealPlanUseCase = Depends(get_save_meal_plan_use_case),
):
    """Mark one meal of the day as eaten or not eaten."""
    result = use_case.set_eaten(owner, day, slot, request.eaten)
    if not result.success:
        status_code = 404 if result.not_found else 502
        raise HTTPException(status_code=status_code, detail=result.error)
    return {
        "success": True,
        "meal_plan": result.plan.model_dump(mode="json"),
        "eaten_count": result.plan.eaten_count,
    }
