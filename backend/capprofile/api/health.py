"""Health check endpoint."""

import time
from fastapi import APIRouter

from capprofile.config import get_settings
from capprofile.models.responses import HealthResponse
from capprofile.profiles import get_check_engine

router = APIRouter()

_start_time = time.time()


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Service health. The checker has no external dependencies to probe."""
    return HealthResponse(
        status="healthy",
        version=get_settings().VERSION,
        uptime_seconds=round(time.time() - _start_time, 2),
        profile=get_check_engine().profile.code,
    )
