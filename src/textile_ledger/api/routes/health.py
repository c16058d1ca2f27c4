"""
Health check endpoints.
"""

import time

from fastapi import APIRouter, Depends

from textile_ledger.api.dependencies import get_app_settings
from textile_ledger.application.dto.responses import HealthResponse
from textile_ledger.config import Settings

router = APIRouter(prefix="/api/health", tags=["health"])

# Track startup time
_start_time = time.time()


def uptime_seconds() -> float:
    return time.time() - _start_time


@router.get("", response_model=HealthResponse)
async def health_check(settings: Settings = Depends(get_app_settings)) -> HealthResponse:
    """
    Basic health check.

    Returns service status and uptime.
    """
    return HealthResponse(
        status="healthy",
        version=settings.app_version,
        uptime_seconds=uptime_seconds(),
    )
