"""
Router package for the Treino API.

This package contains all API routers organized by domain:
- health: Health check endpoint
- routines: Weekly routine CRUD
- execution: Live workout execution (sets, rest countdowns, finalize, SSE)
- history: Finalized workout history
- meal_plans: Daily meal plans and eaten flags
"""

from api.routers.health import router as health_router
from api.routers.routines import router as routines_router
from api.routers.execution import router as execution_router
from api.routers.history import router as history_router
from api.routers.meal_plans import router as meal_plans_router

__all__ = [
    "health_router",
    "routines_router",
    "execution_router",
    "history_router",
    "meal_plans_router",
]
