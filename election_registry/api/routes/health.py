"""Health & Readiness Probes — liveness and readiness endpoints.

Invariants:
    - GET /health always returns 200 if the process is up (liveness)
    - GET /health/ready returns 503 if the repository cannot reach its store

Design Decisions:
    - Separate liveness/readiness: liveness restarts, readiness removes from rotation
"""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from election_registry import __version__
from election_registry.api.dependencies import get_repository
from election_registry.core.repository_protocols import ElectionRepository

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/health", tags=["health"])


@router.get("", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe."""
    return {
        "status": "healthy",
        "service": "election-registry",
        "version": __version__,
    }


@router.get("/ready")
async def readiness_check(
    repository: ElectionRepository = Depends(get_repository),
):
    """Readiness probe — includes storage connectivity."""
    if not await repository.health_check():
        logger.warning("Readiness check failed: storage unavailable")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "storage_unavailable",
            },
        )
    return {"status": "ready", "checks": {"storage": "healthy"}}
