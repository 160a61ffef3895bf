"""Health & Readiness Probes: liveness and readiness endpoints.

Invariants:
    - GET /health always returns 200 plain text if the process is up (liveness)
    - GET /health/ready returns 503 if the database is unreachable (readiness)
"""

import logging

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse, PlainTextResponse

from mediahub.infrastructure import database

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_class=PlainTextResponse)
async def health_check():
    """Basic liveness probe."""
    return "I’m okay!"


@router.get("/ready")
async def readiness_check():
    """Readiness probe: checks database connectivity."""
    manager = database.db_manager
    if manager is None or not await manager.health_check():
        logger.warning("Readiness check failed: database unavailable")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "not_ready"},
        )
    return {"status": "ready"}
