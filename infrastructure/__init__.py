"""
Infrastructure Layer for the Treino API.

This package contains concrete implementations of repository interfaces
and runtime services:
- db/: Supabase database implementations
- scheduling.py: asyncio tick scheduler for rest countdowns
"""

# Re-export database repositories for convenient access
from infrastructure.db import (
    SupabaseRoutineRepository,
    SupabaseCompletionRepository,
    SupabaseMealPlanRepository,
)
from infrastructure.scheduling import AsyncioTickScheduler

__all__ = [
    "SupabaseRoutineRepository",
    "SupabaseCompletionRepository",
    "SupabaseMealPlanRepository",
    "AsyncioTickScheduler",
]
