"""
Repository Interfaces (Ports) for the Treino API.

This package defines abstract interfaces that decouple domain logic from
infrastructure (database, external services). Implementations are provided
in the infrastructure layer.

Architecture follows the Ports & Adapters (Hexagonal) pattern:
- Ports: Abstract interfaces defined here (what the domain needs)
- Adapters: Concrete implementations in infrastructure/ (how it's provided)

Usage:
    from application.ports import RoutineRepository, CompletionRepository

    class FinalizeWorkoutUseCase:
        def __init__(self, routine_repo: RoutineRepository, ...):
            self._routine_repo = routine_repo
"""

# Routine persistence
from application.ports.routine_repository import RoutineRepository

# Completion history
from application.ports.completion_repository import CompletionRepository

# Meal plans
from application.ports.meal_plan_repository import MealPlanRepository

__all__ = [
    "RoutineRepository",
    "CompletionRepository",
    "MealPlanRepository",
]
