"""
History router for finalized workouts.

This router contains endpoints for:
- /history - List the user's completion records, newest first
"""

import logging

from fastapi import APIRouter, Depends, Query

from api.deps import get_completion_repo, get_current_user
from application.ports import CompletionRepository
from infrastructure.db.completion_repository import MAX_PAGE_SIZE

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["History"],
)


@router.get("/history")
def list_history_endpoint(
    limit: int = Query(default=50, ge=1, le=MAX_PAGE_SIZE),
    offset: int = Query(default=0, ge=0),
    owner: str = Depends(get_current_user),
    completion_repo: CompletionRepository = Depends(get_completion_repo),
):
    """
    Get the authenticated user's workout history.

    Args:
        limit: Maximum records to return
        offset: Records to skip for pagination
        owner: Authenticated owner identifier

    Returns:
        Completion records with their durations in seconds
    """
    records = completion_repo.list_for_owner(owner, limit=limit, offset=offset)
    return {
        "success": True,
        "completions": [
            {**record.model_dump(mode="json"), "duration_seconds": record.duration_seconds}
            for record in records
        ],
        "limit": limit,
        "offset": offset,
    }
