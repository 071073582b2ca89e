"""Health Routes — liveness and readiness of the Folio API process.

Invariants:
    - GET /api/v1/health/ returns 200 whenever the process serves requests
    - GET /api/v1/health/ready returns 503 until the database answers AND the
      invariant lock registry exists; the body names every failing check

Design Decisions:
    - Module singletons read at call time: the lifespan assigns them after import
    - The lock registry is a readiness check because main-portfolio and personal
      information writes cannot run without it
"""

import logging

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

import app.infrastructure.database as database
import app.infrastructure.invariant_locks as invariant_locks
from app.config import SERVICE_NAME, SERVICE_VERSION

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    return {"status": "healthy", "service": SERVICE_NAME, "version": SERVICE_VERSION}


@router.get("/ready")
async def readiness_check():
    manager = database.db_manager
    checks = {
        "database": "healthy" if manager and await manager.health_check() else "unavailable",
        "invariant_locks": "healthy" if invariant_locks.invariant_locks else "uninitialized",
    }
    failing = sorted(name for name, state in checks.items() if state != "healthy")
    if failing:
        logger.warning(f"Readiness check failed: {', '.join(failing)}")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "not_ready", "failing": failing, "checks": checks},
        )
    return {"status": "ready", "checks": checks}
