"""
Health check endpoints for monitoring.
"""

import time
from typing import Dict

from fastapi import APIRouter

from ...models.api_models import HealthResponse
from ...version import API_VERSION

router = APIRouter()

# Track start time for uptime calculation
_start_time = time.time()


@router.get("/")
async def root() -> Dict[str, str]:
    """Welcome message."""
    return {"message": "Welcome to the Task Triage API", "status": "running"}


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """
    Health check endpoint for monitoring.

    Returns:
        Health status and uptime
    """
    return HealthResponse(
        status="healthy",
        version=API_VERSION,
        uptime_seconds=time.time() - _start_time,
    )
