"""
Application Use Cases for the Treino API.

This package contains application-level use cases that orchestrate domain logic
and coordinate between ports/adapters. Use cases are the entry points for
business operations and contain the application's workflow logic.

Architecture follows Clean Architecture / Hexagonal pattern:
- Use cases orchestrate domain objects and repository ports
- Dependencies are injected via constructors for testability
- Use cases return result objects, not API responses

Usage:
    from application.use_cases import (
        FinalizeWorkoutUseCase,
        SaveRoutineUseCase,
        SaveMealPlanUseCase,
    )

    # Finalize an executed routine
    finalize = FinalizeWorkoutUseCase(
        routine_repo=routine_repo,
        completion_repo=completion_repo,
    )
    result = await finalize.execute(execution)

    # Create a routine
    save = SaveRoutineUseCase(routine_repo=routine_repo)
    result = save.execute(owner, "Segunda-feira", exercises)
"""

from application.exceptions import RoutineValidationError
from application.use_cases.finalize_workout import (
    FinalizeErrorCode,
    FinalizeWorkoutResult,
    FinalizeWorkoutUseCase,
)
from application.use_cases.save_meal_plan import (
    SaveMealPlanResult,
    SaveMealPlanUseCase,
)
from application.use_cases.save_routine import (
    SaveRoutineResult,
    SaveRoutineUseCase,
)

__all__ = [
    # FinalizeWorkout
    "FinalizeWorkoutUseCase",
    "FinalizeWorkoutResult",
    "FinalizeErrorCode",
    # SaveRoutine
    "SaveRoutineUseCase",
    "SaveRoutineResult",
    "RoutineValidationError",
    # SaveMealPlan
    "SaveMealPlanUseCase",
    "SaveMealPlanResult",
]
