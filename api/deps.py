"""
FastAPI Dependency Providers for the Treino API.

This module provides FastAPI dependency injection functions that return
interface types (Protocols) rather than concrete implementations. This
enables clean separation of concerns and easy testing with mock implementations.

Architecture:
- Settings, Supabase client and the execution registry are cached per-process (lru_cache)
- Repository and use case providers create new instances per-request
- Auth providers wrap the Supabase session token logic

Usage in routers:
    from api.deps import get_routine_repo, get_current_user
    from application.ports import RoutineRepository

    @router.get("/routines")
    def list_routines(
        owner: str = Depends(get_current_user),
        routine_repo: RoutineRepository = Depends(get_routine_repo),
    ):
        return routine_repo.list_for_owner(owner)

Testing:
    # Override dependencies in tests
    app.dependency_overrides[get_routine_repo] = lambda: FakeRoutineRepository()
"""

from functools import lru_cache
from typing import Optional

from fastapi import Depends, Header, HTTPException
from supabase import Client, create_client

# Protocol types (interfaces)
from application.ports import (
    CompletionRepository,
    MealPlanRepository,
    RoutineRepository,
)
from application.use_cases import (
    FinalizeWorkoutUseCase,
    SaveMealPlanUseCase,
    SaveRoutineUseCase,
)
from domain.execution import ExecutionRegistry, TickScheduler

# Concrete implementations
from infrastructure import (
    AsyncioTickScheduler,
    SupabaseCompletionRepository,
    SupabaseMealPlanRepository,
    SupabaseRoutineRepository,
)

from backend.settings import Settings, get_settings as _get_settings

# Auth from existing module (wrap to maintain single source of truth)
from backend.auth import get_current_user as _get_current_user


# =============================================================================
# Settings Provider
# =============================================================================


def get_settings() -> Settings:
    """
    Get application settings.

    Returns cached Settings instance from backend.settings.
    Use this as a FastAPI dependency for settings access.

    Returns:
        Settings: Application settings instance
    """
    return _get_settings()


# =============================================================================
# Supabase Client Provider
# =============================================================================


@lru_cache
def get_supabase_client() -> Optional[Client]:
    """
    Get Supabase client instance (cached).

    Creates a Supabase client using credentials from settings.
    Returns None if credentials are not configured.

    Returns:
        Client: Supabase client instance, or None if not configured
    """
    settings = _get_settings()

    if not settings.supabase_url or not settings.supabase_key:
        return None

    return create_client(settings.supabase_url, settings.supabase_key)


def get_supabase_client_required() -> Client:
    """
    Get Supabase client instance, raising if not configured.

    Use this dependency when the endpoint requires database access.

    Returns:
        Client: Supabase client instance

    Raises:
        HTTPException: 503 if Supabase is not configured
    """
    client = get_supabase_client()
    if client is None:
        raise HTTPException(
            status_code=503,
            detail="Database not available. Supabase credentials not configured.",
        )
    return client


# =============================================================================
# Repository Providers
# =============================================================================


def get_routine_repo(
    client: Client = Depends(get_supabase_client_required),
) -> RoutineRepository:
    """
    Get RoutineRepository implementation.

    Returns a SupabaseRoutineRepository instance with injected client.
    The return type is the Protocol to enable easy mocking.

    Args:
        client: Supabase client (injected)

    Returns:
        RoutineRepository: Repository for routine persistence
    """
    return SupabaseRoutineRepository(client)


def get_completion_repo(
    client: Client = Depends(get_supabase_client_required),
) -> CompletionRepository:
    """
    Get CompletionRepository implementation.

    Args:
        client: Supabase client (injected)

    Returns:
        CompletionRepository: Repository for the workout history
    """
    return SupabaseCompletionRepository(client)


def get_meal_plan_repo(
    client: Client = Depends(get_supabase_client_required),
) -> MealPlanRepository:
    """
    Get MealPlanRepository implementation.

    Args:
        client: Supabase client (injected)

    Returns:
        MealPlanRepository: Repository for daily meal plans
    """
    return SupabaseMealPlanRepository(client)


# =============================================================================
# Workout Execution Providers
# =============================================================================


@lru_cache
def get_execution_registry() -> ExecutionRegistry:
    """
    Get the process-wide registry of open workout executions.

    Executions are in-memory only. Idle ones are evicted after
    `execution_idle_timeout_seconds`; the rest are closed at shutdown.
    """
    return ExecutionRegistry(idle_timeout=get_settings().execution_idle_timeout_seconds)


def get_tick_scheduler() -> TickScheduler:
    """Get the scheduler that drives rest countdowns (the running event loop)."""
    return AsyncioTickScheduler()


# =============================================================================
# Use Case Providers
# =============================================================================


def get_finalize_use_case(
    routine_repo: RoutineRepository = Depends(get_routine_repo),
    completion_repo: CompletionRepository = Depends(get_completion_repo),
) -> FinalizeWorkoutUseCase:
    return FinalizeWorkoutUseCase(
        routine_repo=routine_repo,
        completion_repo=completion_repo,
    )


def get_save_routine_use_case(
    routine_repo: RoutineRepository = Depends(get_routine_repo),
) -> SaveRoutineUseCase:
    return SaveRoutineUseCase(routine_repo=routine_repo)


def get_save_meal_plan_use_case(
    meal_plan_repo: MealPlanRepository = Depends(get_meal_plan_repo),
) -> SaveMealPlanUseCase:
    return SaveMealPlanUseCase(meal_plan_repo=meal_plan_repo)


# =============================================================================
# Authentication Providers
# =============================================================================


async def get_current_user(
    authorization: Optional[str] = Header(None),
    x_api_key: Optional[str] = Header(None, alias="X-API-Key"),
) -> str:
    """
    Get the current authenticated owner identifier.

    Wraps backend.auth.get_current_user for dependency injection.
    Supports:
    - Supabase session access tokens (HS256)
    - API key authentication

    Args:
        authorization: Bearer token header
        x_api_key: API key header

    Returns:
        str: Owner identifier from authentication

    Raises:
        HTTPException: 401 if authentication fails
    """
    return await _get_current_user(
        authorization=authorization,
        x_api_key=x_api_key,
    )


# =============================================================================
# Exports
# =============================================================================

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
