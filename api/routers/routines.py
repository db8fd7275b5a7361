"""
Routines router for weekly workout routine management.

This router contains endpoints for:
- /routines - List/create routines
- /routines/{routine_id} - Get/edit/delete a routine
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from api.deps import (
    get_current_user,
    get_routine_repo,
    get_save_routine_use_case,
)
from api.schemas import RoutineRequest
from application.ports import RoutineRepository
from application.use_cases import SaveRoutineResult, SaveRoutineUseCase
from domain.models import DayOfWeek

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["Routines"],
)


def _raise_for_failed_save(result: SaveRoutineResult) -> None:
    if result.validation_errors:
        raise HTTPException(
            status_code=422,
            detail={"message": result.error, "errors": result.validation_errors},
        )
    if result.not_found:
        raise HTTPException(status_code=404, detail="Routine not found")
    raise HTTPException(status_code=502, detail=result.error or "Failed to save routine")


@router.post("/routines", status_code=201)
def create_routine_endpoint(
    request: RoutineRequest,
    owner: str = Depends(get_current_user),
    use_case: SaveRoutineUseCase = Depends(get_save_routine_use_case),
):
    """
    Create a routine for one weekday.

    Args:
        request: Weekday and exercises
        owner: Authenticated owner identifier

    Returns:
        The stored routine with its id
    """
    result = use_case.execute(owner, request.day_of_week, request.exercises)
    if not result.success:
        _raise_for_failed_save(result)
    return {
        "success": True,
        "routine": result.routine.model_dump(mode="json"),
    }


@router.get("/routines")
def list_routines_endpoint(
    day: Optional[DayOfWeek] = Query(default=None),
    owner: str = Depends(get_current_user),
    routine_repo: RoutineRepository = Depends(get_routine_repo),
):
    """
    List the authenticated user's routines, newest first.

    Args:
        day: Only return routines for this weekday
        owner: Authenticated owner identifier
    """
    routines = routine_repo.list_for_owner(owner, day=day)
    return {
        "success": True,
        "routines": [routine.model_dump(mode="json") for routine in routines],
        "total": len(routines),
    }


@router.get("/routines/{routine_id}")
def get_routine_endpoint(
    routine_id: str,
    owner: str = Depends(get_current_user),
    routine_repo: RoutineRepository = Depends(get_routine_repo),
):
    """Get a single routine."""
    routine = routine_repo.get(routine_id, owner)
    if routine is None:
        raise HTTPException(status_code=404, detail="Routine not found")
    return {
        "success": True,
        "routine": routine.model_dump(mode="json"),
    }


@router.put("/routines/{routine_id}")
def update_routine_endpoint(
    routine_id: str,
    request: RoutineRequest,
    owner: str = Depends(get_current_user),
    use_case: SaveRoutineUseCase = Depends(get_save_routine_use_case),
):
    """
    Edit a routine's weekday and exercises.

    Any open execution of the routine keeps the definition it was opened
    with; the edit applies to the next execution.
    """
    result = use_case.execute(
        owner,
        request.day_of_week,
        request.exercises,
        routine_id=routine_id,
    )
    if not result.success:
        _raise_for_failed_save(result)
    return {
        "success": True,
        "routine": result.routine.model_dump(mode="json"),
    }


@router.delete("/routines/{routine_id}")
def delete_routine_endpoint(
    routine_id: str,
    owner: str = Depends(get_current_user),
    routine_repo: RoutineRepository = Depends(get_routine_repo),
):
    """Delete a routine."""
    if not routine_repo.delete(routine_id, owner):
        raise HTTPException(status_code=404, detail="Routine not found")
    return {"success": True, "deleted": routine_id}
