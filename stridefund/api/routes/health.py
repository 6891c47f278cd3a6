"""Health Routes: liveness and database readiness for the StrideFund API.

Invariants:
    - GET /api/v1/health/ answers 200 whenever the app is serving requests
    - GET /api/v1/health/ready answers 503 until the database answers SELECT 1
    - The session manager is looked up per call, so one set by init_db after
      import (or swapped in tests) is the one checked
"""

import logging
from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from stridefund.infrastructure import database

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Liveness: no dependencies are touched."""
    return {
        "status": "healthy",
        "service": "stridefund-api",
        "version": "1.0.0",
    }


@router.get("/ready")
async def readiness_check():
    """Ready once the database answers."""
    manager = database.db_manager
    db_ok = await manager.health_check() if manager else False
    if not db_ok:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "database_unavailable",
            },
        )
    return {"status": "ready", "checks": {"database": "healthy"}}
