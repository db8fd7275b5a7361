"""
Meal plan value objects for daily diet logging.
"""

from enum import Enum
from typing import Dict, List, Optional, Union

from pydantic import BaseModel, Field, field_validator

from domain.models.routine import DayOfWeek


class MealSlot(str, Enum):
    """The five meals of a day, in order."""

    BREAKFAST = "cafe_da_manha"
    MORNING_SNACK = "lanche_da_manha"
    LUNCH = "almoco"
    AFTERNOON_SNACK = "lanche_da_tarde"
    DINNER = "jantar"


def split_food_items(value: Optional[Union[str, List[str]]]) -> List[str]:
    """
    Normalize a meal entry into a list of food items.

    Accepts either a list or a comma-separated string. Items are trimmed
    and blanks dropped.

    Examples:
        >>> split_food_items("Café, ovos , , pão")
        ['Café', 'ovos', 'pão']
    """
    if not value:
        return []
    if isinstance(value, str):
        value = value.split(",")
    return [item.strip() for item in value if item and item.strip()]


def empty_meals() -> Dict[str, List[str]]:
    return {slot.value: [] for slot in MealSlot}


def unchecked_status() -> Dict[str, bool]:
    return {slot.value: False for slot in MealSlot}


class MealPlan(BaseModel):
    """
    A user's planned meals for one weekday, with an eaten flag per meal.
    """

    id: Optional[str] = None
    user_email: str
    day: DayOfWeek
    meals: Dict[MealSlot, List[str]] = Field(default_factory=empty_meals)
    status: Dict[MealSlot, bool] = Field(default_factory=unchecked_status)

    @field_validator("meals", mode="before")
    @classmethod
    def normalize_meals(cls, v):
        v = v or {}
        return {slot.value: split_food_items(v.get(slot.value)) for slot in MealSlot}

    @field_validator("status", mode="before")
    @classmethod
    def normalize_status(cls, v):
        v = v or {}
        return {slot.value: bool(v.get(slot.value, False)) for slot in MealSlot}

    @property
    def eaten_count(self) -> int:
        return sum(1 for eaten in self.status.values() if eaten)

    def to_row(self) -> dict:
        """Serialize to the `workout_diet` table shape."""
        return self.model_dump(mode="json", exclude_none=True)
