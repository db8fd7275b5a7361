"""
SaveRoutine Use Case.

Creates a new routine or edits an existing one (weekday + exercises),
applying the same rules as the routine form: a weekday from the fixed
list, at least one exercise, and valid sets/reps/weight per exercise.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

from pydantic import ValidationError

from application.exceptions import RoutineValidationError
from application.ports import RoutineRepository
from domain.models import DayOfWeek, ExerciseDefinition, Routine

logger = logging.getLogger(__name__)

ExerciseInput = Union[ExerciseDefinition, Dict[str, Any]]


@dataclass
class SaveRoutineResult:
    """Result of the SaveRoutine use case execution."""

    success: bool
    routine: Optional[Routine] = None
    is_update: bool = False
    not_found: bool = False
    error: Optional[str] = None
    validation_errors: List[str] = field(default_factory=list)


class SaveRoutineUseCase:
    """
    Use case for saving routines with validation.

    Usage:
        >>> use_case = SaveRoutineUseCase(routine_repo=routine_repo)
        >>> result = use_case.execute(
        ...     owner="ana@example.com",
        ...     day_of_week="Segunda-feira",
        ...     exercises=[{"name": "Supino", "sets": 3, "reps": 10, "rest": "60"}],
        ... )
    """

    def __init__(self, routine_repo: RoutineRepository) -> None:
        self._routine_repo = routine_repo

    def execute(
        self,
        owner: str,
        day_of_week: Union[DayOfWeek, str],
        exercises: Sequence[ExerciseInput],
        *,
        routine_id: Optional[str] = None,
    ) -> SaveRoutineResult:
        """
        Execute the save routine workflow.

        Args:
            owner: Owner identifier of the routine
            day_of_week: Weekday label
            exercises: Exercise definitions (models or raw dicts)
            routine_id: Existing routine to edit; None creates a new one

        Returns:
            SaveRoutineResult with the stored routine
        """
        is_update = routine_id is not None
        try:
            day, definitions = self._validate(day_of_week, exercises)
        except RoutineValidationError as e:
            logger.warning(f"Routine validation failed: {e.errors}")
            return SaveRoutineResult(
                success=False,
                is_update=is_update,
                error=e.message,
                validation_errors=e.errors,
            )

        if is_update:
            saved = self._routine_repo.update(
                routine_id,
                owner,
                day_of_week=day,
                exercises=definitions,
            )
            if saved is None:
                return SaveRoutineResult(
                    success=False,
                    is_update=True,
                    not_found=self._routine_repo.get(routine_id, owner) is None,
                    error="Failed to update routine",
                )
            logger.info(f"Routine {routine_id} updated for {owner}")
            return SaveRoutineResult(success=True, routine=saved, is_update=True)

        saved = self._routine_repo.create(
            Routine(user_email=owner, day_of_week=day, exercises=definitions)
        )
        if saved is None:
            return SaveRoutineResult(success=False, error="Failed to save routine")

        logger.info(f"Routine {saved.id} created for {owner} ({day.value})")
        return SaveRoutineResult(success=True, routine=saved)

    def _validate(
        self,
        day_of_week: Union[DayOfWeek, str],
        exercises: Sequence[ExerciseInput],
    ) -> Tuple[DayOfWeek, List[ExerciseDefinition]]:
        errors: List[str] = []

        day: Optional[DayOfWeek] = None
        try:
            day = DayOfWeek(day_of_week)
        except ValueError:
            errors.append(f"Invalid day of week: {day_of_week}")

        if not exercises:
            errors.append("Add at least one exercise")

        definitions: List[ExerciseDefinition] = []
        for index, item in enumerate(exercises or []):
            if isinstance(item, ExerciseDefinition):
                definitions.append(item)
                continue
            try:
                definitions.append(ExerciseDefinition.model_validate(item))
            except ValidationError as e:
                for err in e.errors():
                    location = ".".join(str(part) for part in err["loc"])
                    errors.append(f"exercises[{index}].{location}: {err['msg']}")

        if errors:
            raise RoutineValidationError("Routine validation failed", errors)
        return day, definitions
