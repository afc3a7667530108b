"""Health check endpoint."""

from __future__ import annotations

import logging
import time
from datetime import datetime, timezone
from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from catalogadmin import __version__
from catalogadmin.api.deps import get_db
from catalogadmin.api.routers.responses import HEALTH_ERRORS
from catalogadmin.api.schemas.responses import ApiResponse

logger = logging.getLogger(__name__)

# Above this the database counts as unhealthy even if it answered
SLOW_DATABASE_MS = 5000


class HealthChecks(BaseModel):
    """Individual health check results."""

    model_config = ConfigDict(strict=True)

    database_latency_ms: Optional[int] = None


class HealthStatus(BaseModel):
    """Application health status."""

    model_config = ConfigDict(strict=True)

    status: str  # "healthy", "unhealthy"
    version: str  # catalogadmin version
    database: str  # "connected", "disconnected"
    timestamp: datetime
    checks: Optional[HealthChecks] = None


class HealthResponse(ApiResponse[HealthStatus]):
    """Response for health check endpoint."""

    pass


router = APIRouter()


@router.get("/health", response_model=HealthResponse, responses=HEALTH_ERRORS)
async def health_check(session: AsyncSession = Depends(get_db)) -> HealthResponse:
    """
    Health check endpoint.

    Returns application health status including:
    - Database connectivity and latency
    - Application version
    """
    db_status = "disconnected"
    db_latency_ms: Optional[int] = None
    try:
        start = time.monotonic()
        await session.execute(text("SELECT 1"))
        db_latency_ms = int((time.monotonic() - start) * 1000)
        db_status = "connected"
    except SQLAlchemyError as e:
        logger.warning("Database health check failed: %s", e)

    if db_status == "disconnected" or (
        db_latency_ms is not None and db_latency_ms > SLOW_DATABASE_MS
    ):
        status = "unhealthy"
    else:
        status = "healthy"

    health_data = HealthStatus(
        status=status,
        version=__version__,
        database=db_status,
        timestamp=datetime.now(timezone.utc),
        checks=HealthChecks(database_latency_ms=db_latency_ms),
    )

    return HealthResponse(data=health_data)
