"""
Health check endpoints for monitoring and orchestration.

- /health: liveness, always 200
- /health/live: alias for /health
- /health/db: database connectivity
- /health/ready: readiness (all dependencies healthy)

In in-memory mode there is no database to probe; the checks report the
mode instead.
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from booking_engine.api.dependencies import get_session
from booking_engine.config import Settings, get_settings

logger = logging.getLogger(__name__)

router = APIRouter()

SERVICE_NAME = "booking-engine"


async def _database_healthy(session: AsyncSession | None, settings: Settings) -> bool:
    if settings.use_in_memory:
        return True
    try:
        result = await session.execute(text("SELECT 1"))
        result.scalar()
        return True
    except Exception as e:
        logger.error("Database health check failed", exc_info=e)
        return False


@router.get("/health")
async def health_check():
    return {"status": "ok", "service": SERVICE_NAME}


@router.get("/health/live")
async def health_check_live():
    return {"status": "ok", "service": SERVICE_NAME}


@router.get("/health/db")
async def health_check_db(
    settings: Settings = Depends(get_settings),
    session: AsyncSession | None = Depends(get_session),
):
    """Returns 503 when the database does not answer."""
    mode = "in_memory" if settings.use_in_memory else "sql"
    if await _database_healthy(session, settings):
        return {"status": "healthy", "component": "database", "mode": mode}
    return JSONResponse(
        status_code=503,
        content={
            "status": "unhealthy",
            "component": "database",
            "error": "Database connection failed",
        },
    )


@router.get("/health/ready")
async def health_check_ready(
    settings: Settings = Depends(get_settings),
    session: AsyncSession | None = Depends(get_session),
):
    if await _database_healthy(session, settings):
        return {"status": "ready", "checks": {"database": "healthy"}}
    return JSONResponse(
        status_code=503,
        content={"status": "not_ready", "checks": {"database": "unhealthy"}},
    )
