"""
Infrastructure Database Layer.

This package provides Supabase-backed implementations of the repository interfaces
defined in application.ports. These implementations can be injected into services
and routers for clean separation of concerns and testability.

Usage:
    from supabase import create_client
    from infrastructure.db import (
        SupabaseRoutineRepository,
        SupabaseCompletionRepository,
        SupabaseMealPlanRepository,
    )

    # Create Supabase client
    client = create_client(SUPABASE_URL, SUPABASE_KEY)

    # Instantiate repositories with injected client
    routine_repo = SupabaseRoutineRepository(client)
    completion_repo = SupabaseCompletionRepository(client)
    meal_plan_repo = SupabaseMealPlanRepository(client)
"""

from infrastructure.db.routine_repository import SupabaseRoutineRepository
from infrastructure.db.completion_repository import SupabaseCompletionRepository
from infrastructure.db.meal_plan_repository import SupabaseMealPlanRepository

__all__ = [
    # Routines
    "SupabaseRoutineRepository",

    # Completion history
    "SupabaseCompletionRepository",

    # Meal plans
    "SupabaseMealPlanRepository",
]
