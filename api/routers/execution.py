"""
Workout execution router.

This router is the presentation boundary of the execution core. It contains
endpoints for:
- /routines/{routine_id}/execution - Open / read / close an execution
- /routines/{routine_id}/execution/exercises/{index}/complete-set - Record a set
- /routines/{routine_id}/execution/finalize - Finalize the routine
- /routines/{routine_id}/execution/stream - SSE stream of execution snapshots

Every endpoint here is `async def` so that it runs on the event loop, the
same thread the rest countdown ticks run on. Blocking Supabase calls are
pushed to the executor.
"""

import asyncio
import logging
from functools import partial
from typing import AsyncIterator, Awaitable, Callable

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import StreamingResponse

from api.deps import (
    get_current_user,
    get_execution_registry,
    get_finalize_use_case,
    get_routine_repo,
    get_settings,
    get_tick_scheduler,
)
from api.schemas import SSE_KEEPALIVE, format_sse_event
from application.ports import RoutineRepository
from application.use_cases import FinalizeWorkoutUseCase
from backend.settings import Settings
from domain.execution import ExecutionRegistry, TickScheduler, WorkoutExecution

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["Execution"],
)

KEEPALIVE_SECONDS = 15.0


def _require_execution(
    registry: ExecutionRegistry,
    owner: str,
    routine_id: str,
) -> WorkoutExecution:
    execution = registry.get(owner, routine_id)
    if execution is None:
        raise HTTPException(status_code=404, detail="No open execution for this routine")
    return execution


@router.post("/routines/{routine_id}/execution")
async def open_execution_endpoint(
    routine_id: str,
    owner: str = Depends(get_current_user),
    routine_repo: RoutineRepository = Depends(get_routine_repo),
    registry: ExecutionRegistry = Depends(get_execution_registry),
    scheduler: TickScheduler = Depends(get_tick_scheduler),
    settings: Settings = Depends(get_settings),
):
    """
    Start executing a routine.

    Progress starts from zero every time. Opening a routine that already has
    an open execution replaces it.

    Returns:
        Snapshot of the new execution
    """
    routine = await asyncio.get_event_loop().run_in_executor(
        None, partial(routine_repo.get, routine_id, owner)
    )
    if routine is None:
        raise HTTPException(status_code=404, detail="Routine not found")

    execution = registry.open(
        WorkoutExecution(
            routine,
            owner=owner,
            scheduler=scheduler,
            tick_interval=settings.rest_tick_seconds,
        )
    )
    logger.info(f"Execution opened for routine {routine_id} ({len(routine.exercises)} exercises)")
    return {"success": True, "execution": execution.snapshot()}


@router.get("/routines/{routine_id}/execution")
async def get_execution_endpoint(
    routine_id: str,
    owner: str = Depends(get_current_user),
    registry: ExecutionRegistry = Depends(get_execution_registry),
):
    """Current snapshot of an open execution."""
    execution = _require_execution(registry, owner, routine_id)
    return {"success": True, "execution": execution.snapshot()}


@router.post("/routines/{routine_id}/execution/exercises/{index}/complete-set")
async def complete_set_endpoint(
    routine_id: str,
    index: int,
    owner: str = Depends(get_current_user),
    registry: ExecutionRegistry = Depends(get_execution_registry),
):
    """
    Mark one set of an exercise as done.

    Rejected calls (resting, already complete, unknown exercise) are not
    errors: `recorded` is False and the snapshot is unchanged.
    """
    execution = _require_execution(registry, owner, routine_id)
    recorded = execution.complete_set(index)
    return {
        "success": True,
        "recorded": recorded,
        "execution": execution.snapshot(),
    }


@router.post("/routines/{routine_id}/execution/finalize")
async def finalize_execution_endpoint(
    routine_id: str,
    owner: str = Depends(get_current_user),
    registry: ExecutionRegistry = Depends(get_execution_registry),
    use_case: FinalizeWorkoutUseCase = Depends(get_finalize_use_case),
):
    """
    Finalize a fully executed routine.

    Writes the completion record and marks the routine completed. On
    success the execution is closed.

    Raises:
        HTTPException: 409 when the routine cannot be finalized yet,
            502 when a write to the database failed
    """
    execution = _require_execution(registry, owner, routine_id)
    result = await use_case.execute(execution)

    if not result.success:
        detail = {"message": result.error, "error_code": result.error_code}
        if result.is_precondition_failure:
            raise HTTPException(status_code=409, detail=detail)
        detail["partial"] = result.partial
        raise HTTPException(status_code=502, detail=detail)

    snapshot = execution.snapshot()
    registry.close_if(execution)
    return {
        "success": True,
        "completion": result.record.model_dump(mode="json"),
        "execution": snapshot,
    }


@router.delete("/routines/{routine_id}/execution")
async def close_execution_endpoint(
    routine_id: str,
    owner: str = Depends(get_current_user),
    registry: ExecutionRegistry = Depends(get_execution_registry),
):
    """Close the execution view and stop its countdowns. Progress is discarded."""
    closed = registry.close(owner, routine_id)
    return {"success": True, "closed": closed}


async def execution_events(
    execution: WorkoutExecution,
    is_disconnected: Callable[[], Awaitable[bool]],
    *,
    keepalive: float = KEEPALIVE_SECONDS,
) -> AsyncIterator[str]:
    """
    Yield an SSE snapshot now and after every change of the execution.

    Changes that land while a snapshot is being sent are coalesced into the
    next one. Ends with a `closed` event once the execution is closed.
    """
    changed = asyncio.Event()
    execution.add_listener(changed.set)
    try:
        yield format_sse_event("snapshot", execution.snapshot())
        while not execution.closed:
            try:
                await asyncio.wait_for(changed.wait(), timeout=keepalive)
            except asyncio.TimeoutError:
                if await is_disconnected():
                    return
                yield SSE_KEEPALIVE
                continue
            changed.clear()
            if execution.closed:
                break
            yield format_sse_event("snapshot", execution.snapshot())
        yield format_sse_event("closed", execution.snapshot())
    finally:
        execution.remove_listener(changed.set)


@router.get("/routines/{routine_id}/execution/stream")
async def stream_execution_endpoint(
    routine_id: str,
    http_request: Request,
    owner: str = Depends(get_current_user),
    registry: ExecutionRegistry = Depends(get_execution_registry),
) -> StreamingResponse:
    """
    Stream execution snapshots as server-sent events.

    SSE Events:
        - snapshot: full execution snapshot, on open and after every change
          (set completed, countdown tick, finalize state)
        - closed: final snapshot once the execution is closed or finalized
    """
    execution = _require_execution(registry, owner, routine_id)
    return StreamingResponse(
        execution_events(execution, http_request.is_disconnected),
        media_type="text/event-stream",
        headers={
            "Cache-Control": "no-cache",
            "Connection": "keep-alive",
            "X-Accel-Buffering": "no",  # Disable nginx buffering
        },
    )
