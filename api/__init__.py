"""
API package for the Treino API.

This package contains:
- deps.py: FastAPI dependency providers for DI
- routers/: API route handlers
- schemas/: Request/response models
"""

# Re-export dependency providers for convenient access
from api.deps import (
    get_settings,
    get_supabase_client,
    get_supabase_client_required,
    get_routine_repo,
    get_completion_repo,
    get_meal_plan_repo,
    get_execution_registry,
    get_tick_scheduler,
    get_finalize_use_case,
    get_save_routine_use_case,
    get_save_meal_plan_use_case,
    get_current_user,
)

__all__ = [
    # Settings
    "get_settings",
    # Database
    "get_supabase_client",
    "get_supabase_client_required",
    # Repositories
    "get_routine_repo",
    "get_completion_repo",
    "get_meal_plan_repo",
    # Workout execution
    "get_execution_registry",
    "get_tick_scheduler",
    # Use cases
    "get_finalize_use_case",
    "get_save_routine_use_case",
    "get_save_meal_plan_use_case",
    # Authentication
    "get_current_user",
]
