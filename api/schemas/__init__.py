"""
Pydantic schemas for API requests and responses.

Organized by feature/domain:
- routines: Routine create/edit bodies
- meal_plans: Meal plan bodies
- execution: SSE formatting for execution streams
"""

from api.schemas.execution import SSE_KEEPALIVE, format_sse_event
from api.schemas.meal_plans import MealPlanRequest, MealStatusRequest
from api.schemas.routines import RoutineRequest

__all__ = [
    "RoutineRequest",
    "MealPlanRequest",
    "MealStatusRequest",
    "format_sse_event",
    "SSE_KEEPALIVE",
]
