"""Service Probes — liveness plus a readiness check that touches the schema.

Invariants:
    - GET /health/ answers 200 while the process runs, without touching the DB
    - GET /health/ready resolves the session manager per request, never at import
    - Readiness is 503 until init_db ran, the DB answers and the productions table exists

Design Decisions:
    - Readiness reads the productions table instead of SELECT 1: a reachable but
      unmigrated database cannot serve the running order either
"""

import logging

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse
from sqlalchemy import func, select

from app.core.errors import DatabaseError
from app.infrastructure import database
from app.models.production import Production

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])

SERVICE_NAME = "korfbal-stream-api"
SERVICE_VERSION = "1.0.0"


def _not_ready(reason: str) -> JSONResponse:
    logger.warning(f"Readiness failed: {reason}")
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"status": "not_ready", "reason": reason},
    )


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    return {"status": "healthy", "service": SERVICE_NAME, "version": SERVICE_VERSION}


@router.get("/ready")
async def readiness_check():
    """Ready when the database answers and holds the production schema."""
    manager = database.db_manager
    if manager is None:
        return _not_ready("database_not_initialized")
    if not await manager.health_check():
        return _not_ready("database_unavailable")
    try:
        async with manager.session() as db:
            active = (await db.execute(
                select(func.count(Production.id)).where(Production.is_active.is_(True)),
            )).scalar_one()
    except DatabaseError:
        return _not_ready("schema_missing")
    return {
        "status": "ready",
        "checks": {"database": "healthy", "schema": "present"},
        "active_productions": active,
    }
