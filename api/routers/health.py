"""
Health check router.

This router provides health check endpoints for monitoring and load balancers.
"""

import logging

from fastapi import APIRouter, Depends

from api.deps import get_execution_registry
from domain.execution import ExecutionRegistry

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["Health"],
)


@router.get("/health")
def health(registry: ExecutionRegistry = Depends(get_execution_registry)):
    """
    Simple liveness endpoint for treino-api.

    Returns:
        dict: Status indicator and the number of open workout executions
    """
    return {"status": "ok", "open_executions": len(registry)}
