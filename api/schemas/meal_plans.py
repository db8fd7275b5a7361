"""
Request models for meal plan endpoints.
"""

from typing import List, Optional, Union

from pydantic import BaseModel, Field

MealEntry = Optional[Union[str, List[str]]]


class MealPlanRequest(BaseModel):
    """
    Body for saving a day's meals.

    Each meal accepts a list of items or a comma-separated string.
    """

    cafe_da_manha: MealEntry = None
    lanche_da_manha: MealEntry = None
    almoco: MealEntry = None
    lanche_da_tarde: MealEntry = None
    jantar: MealEntry = None


class MealStatusRequest(BaseModel):
    """Body for ticking a meal off (or back on)."""

    eaten: bool = Field(default=True)
