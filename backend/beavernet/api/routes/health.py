"""Health & Readiness Probes - unauthenticated liveness and readiness endpoints.

Invariants:
    - GET /health/ always returns 200 if the process is up (liveness)
    - GET /health/ready returns 503 if the storage backend is unhealthy

Design Decisions:
    - Outside /api so probes never need credentials
"""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from beavernet import __version__
from beavernet.api.dependencies import get_storage
from beavernet.storage.base import Storage

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "beavernet-api",
        "version": __version__,
    }


@router.get("/ready")
async def readiness_check(storage: Storage = Depends(get_storage)):
    """Readiness probe: includes the storage backend."""
    if not await storage.health_check():
        logger.warning("Readiness check failed", extra={"path": "/health/ready"})
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "storage_unavailable",
            },
        )
    return {"status": "ready", "checks": {"storage": storage.backend.value}}


routers = [router]
