"""Health & Readiness: liveness and readiness endpoints.

Invariants:
    - GET /health/ always returns 200 if process is up (liveness)
    - GET /health/ready returns 503 if MongoDB does not answer ping (readiness)
"""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from lotus_ledger import __version__
from lotus_ledger.infrastructure.database import MongoClientManager, get_db_manager

router = APIRouter(prefix="/health", tags=["health"])

SERVICE_NAME = "lotus-ledger"


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness check. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": SERVICE_NAME,
        "version": __version__,
    }


@router.get("/ready")
async def readiness_check(
    manager: MongoClientManager = Depends(get_db_manager),
):
    """Readiness check: includes database connectivity."""
    if not await manager.health_check():
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "database_unavailable",
            },
        )
    return {"status": "ready", "checks": {"database": "healthy"}}
