"""
Health check endpoints.
"""

import time

from fastapi import APIRouter, Depends

from aqualedger.api.dependencies import get_app_settings
from aqualedger.application.dto.responses import HealthResponse
from aqualedger.config import Settings, get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/api/health", tags=["health"])

# Track startup time
_start_time = time.time()


@router.get("", response_model=HealthResponse)
async def health_check(settings: Settings = Depends(get_app_settings)) -> HealthResponse:
    """Basic health check with service uptime."""
    return HealthResponse(
        status="healthy",
        version=settings.app_version,
        uptime_seconds=time.time() - _start_time,
    )


@router.get("/db", response_model=HealthResponse)
async def db_health(settings: Settings = Depends(get_app_settings)) -> HealthResponse:
    """Ledger database connectivity check."""
    from aqualedger.infrastructure.storage.sqlite import get_connection

    try:
        async with get_connection() as conn:
            cursor = await conn.execute("SELECT COUNT(*) FROM ledger_records")
            row = await cursor.fetchone()
        database = f"ok ({row[0]} records)"
        health = "healthy"
    except Exception as e:
        logger.warning("db_health_failed", error=str(e))
        database = f"error: {e}"
        health = "degraded"

    return HealthResponse(
        status=health,
        version=settings.app_version,
        uptime_seconds=time.time() - _start_time,
        database=database,
    )
