"""
FinalizeWorkout Use Case.

Marks a fully executed routine as done for the day. Two writes go to the
persistence collaborator, in order:

1. Append a completion record to the history collection
2. Move the routine's status to "completed"

The in-memory routine only advances once both writes succeed. Failures are
reported, never retried. If the history write succeeds and the status write
fails, the completion record is left in place and the routine stays
pending; that inconsistency is logged and surfaced as a partial failure.
"""

import asyncio
import logging
from dataclasses import dataclass
from functools import partial
from typing import Callable, Optional

from application.ports import CompletionRepository, RoutineRepository
from domain.execution import WorkoutExecution
from domain.models import CompletionRecord, RoutineStatus, utc_now_iso

logger = logging.getLogger(__name__)


class FinalizeErrorCode:
    """Error codes returned by FinalizeWorkoutUseCase."""

    WORKOUT_INCOMPLETE = "WORKOUT_INCOMPLETE"
    ALREADY_COMPLETED = "ALREADY_COMPLETED"
    FINALIZE_IN_PROGRESS = "FINALIZE_IN_PROGRESS"
    HISTORY_WRITE_FAILED = "HISTORY_WRITE_FAILED"
    STATUS_UPDATE_FAILED = "STATUS_UPDATE_FAILED"


PRECONDITION_ERRORS = frozenset({
    FinalizeErrorCode.WORKOUT_INCOMPLETE,
    FinalizeErrorCode.ALREADY_COMPLETED,
    FinalizeErrorCode.FINALIZE_IN_PROGRESS,
})


@dataclass
class FinalizeWorkoutResult:
    """Result of the FinalizeWorkout use case execution."""

    success: bool
    record: Optional[CompletionRecord] = None
    error: Optional[str] = None
    error_code: Optional[str] = None
    partial: bool = False

    @property
    def is_precondition_failure(self) -> bool:
        return self.error_code in PRECONDITION_ERRORS


class FinalizeWorkoutUseCase:
    """
    Use case for finalizing an executed routine.

    Repository calls are blocking, so each one runs in the event loop's
    executor. Those two awaits are the only suspension points.

    Usage:
        >>> use_case = FinalizeWorkoutUseCase(
        ...     routine_repo=routine_repo,
        ...     completion_repo=completion_repo,
        ... )
        >>> result = await use_case.execute(execution)
        >>> if result.success:
        ...     print(f"Finalized: {result.record.id}")
    """

    def __init__(
        self,
        routine_repo: RoutineRepository,
        completion_repo: CompletionRepository,
        *,
        clock: Callable[[], str] = utc_now_iso,
        executor=None,
    ) -> None:
        """
        Initialize the use case with required dependencies.

        Args:
            routine_repo: Repository for routine status updates
            completion_repo: Repository for the completion history
            clock: Returns the current time as an ISO-8601 string
            executor: Executor for blocking repository calls (loop default if None)
        """
        self._routine_repo = routine_repo
        self._completion_repo = completion_repo
        self._clock = clock
        self._executor = executor

    async def execute(self, execution: WorkoutExecution) -> FinalizeWorkoutResult:
        """
        Execute the finalize workflow for an open execution.

        Args:
            execution: The execution whose routine should be finalized

        Returns:
            FinalizeWorkoutResult with the stored record on success
        """
        routine = execution.routine

        if routine.is_completed:
            return FinalizeWorkoutResult(
                success=False,
                error="Workout already finalized",
                error_code=FinalizeErrorCode.ALREADY_COMPLETED,
            )

        if not execution.workout_completed:
            return FinalizeWorkoutResult(
                success=False,
                error="All sets must be completed before finalizing",
                error_code=FinalizeErrorCode.WORKOUT_INCOMPLETE,
            )

        if not execution.begin_finalize():
            logger.info(f"Finalize already in flight for routine {routine.id}")
            return FinalizeWorkoutResult(
                success=False,
                error="Workout is already being finalized",
                error_code=FinalizeErrorCode.FINALIZE_IN_PROGRESS,
            )

        stored: Optional[CompletionRecord] = None
        try:
            record = CompletionRecord.for_routine(
                routine,
                started_at=execution.started_at,
                finished_at=self._clock(),
            )

            # Step 1: Append to history
            stored = await self._run(self._completion_repo.insert, record)
            if stored is None:
                logger.error(f"Failed to write completion record for routine {routine.id}")
                return FinalizeWorkoutResult(
                    success=False,
                    error="Failed to finalize workout",
                    error_code=FinalizeErrorCode.HISTORY_WRITE_FAILED,
                )

            # Step 2: Advance routine status
            updated = await self._run(
                partial(
                    self._routine_repo.update_status,
                    routine.id,
                    execution.owner,
                    RoutineStatus.COMPLETED,
                )
            )
            if not updated:
                # TODO: reconcile orphaned completion records once the product
                # decides between rollback and status repair
                logger.error(
                    f"Completion record {stored.id} written but routine {routine.id} "
                    f"is still pending"
                )
                return FinalizeWorkoutResult(
                    success=False,
                    record=stored,
                    error="Failed to finalize workout",
                    error_code=FinalizeErrorCode.STATUS_UPDATE_FAILED,
                    partial=True,
                )

            execution.mark_finalized()
            logger.info(f"Routine {routine.id} finalized ({routine.day_of_week.value})")
            return FinalizeWorkoutResult(success=True, record=stored)

        except Exception as e:
            logger.exception(f"Finalize failed for routine {routine.id}: {e}")
            if stored is not None:
                return FinalizeWorkoutResult(
                    success=False,
                    record=stored,
                    error="Failed to finalize workout",
                    error_code=FinalizeErrorCode.STATUS_UPDATE_FAILED,
                    partial=True,
                )
            return FinalizeWorkoutResult(
                success=False,
                error="Failed to finalize workout",
                error_code=FinalizeErrorCode.HISTORY_WRITE_FAILED,
            )

        finally:
            execution.end_finalize()

    async def _run(self, func, *args):
        return await asyncio.get_event_loop().run_in_executor(self._executor, func, *args)
