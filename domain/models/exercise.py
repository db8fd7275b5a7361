"""
Exercise definition value object.

An exercise definition is one line of a routine: what to do, how many sets
and reps, optional load, and how long to rest between sets. Definitions are
immutable while a routine is being executed.
"""

import re
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Leading integer in the same shape the rest input field produces ("60", " 45s", "+30")
_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")

DEFAULT_REST = "60"


def parse_rest_seconds(rest: Optional[Union[str, int]]) -> int:
    """
    Parse a rest duration into whole, non-negative seconds.

    Only the leading integer counts, so "45s" is 45 and "1.5" is 1.
    Empty, missing, non-numeric and negative values parse to 0.

    Examples:
        >>> parse_rest_seconds("30")
        30
        >>> parse_rest_seconds("")
        0
        >>> parse_rest_seconds("abc")
        0
    """
    if rest is None or isinstance(rest, bool):
        return 0
    if isinstance(rest, int):
        return max(rest, 0)
    match = _LEADING_INT.match(str(rest))
    if not match:
        return 0
    return max(int(match.group(1)), 0)


class ExerciseDefinition(BaseModel):
    """
    Value object representing a single exercise in a routine.

    `rest` is kept as the string the user typed; use `rest_seconds` for the
    parsed value.

    Examples:
        >>> exercise = ExerciseDefinition(name="Supino", sets=3, reps=10, rest="90")
        >>> exercise.rest_seconds
        90
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=2, description="Exercise name")
    category: str = Field(default="", description="Category (upper, lower, cardio, core)")
    sets: int = Field(..., ge=1, description="Number of sets")
    reps: int = Field(..., ge=1, description="Reps per set")
    weight: Optional[float] = Field(default=None, ge=0, description="Load in kg")
    rest: str = Field(default=DEFAULT_REST, description="Rest between sets in seconds")

    @field_validator("category", mode="before")
    @classmethod
    def coerce_category(cls, v):
        """Rows written by older clients may carry a null category."""
        return v or ""

    @field_validator("rest", mode="before")
    @classmethod
    def coerce_rest(cls, v):
        """Accept numeric rest values from JSON and store them as strings."""
        if v is None:
            return ""
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(int(v))
        return v

    @property
    def rest_seconds(self) -> int:
        """Rest duration parsed to whole seconds (0 when unparseable)."""
        return parse_rest_seconds(self.rest)

    @property
    def has_rest(self) -> bool:
        return self.rest_seconds > 0
