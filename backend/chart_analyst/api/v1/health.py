"""Health check endpoint for monitoring application status.
"""
from datetime import UTC, datetime
from typing import Any

from fastapi import APIRouter, Depends

from chart_analyst.core.config import Settings, get_settings

router = APIRouter()

API_VERSION = "1.0.0"


@router.get(
    "/health",
    response_model=dict[str, Any],
    summary="Health Check",
    description="Returns application status, version and environment.",
    operation_id="get_health_status",
    responses={200: {"description": "Service is healthy"}},
)
async def health_check(settings: Settings = Depends(get_settings)) -> dict[str, Any]:
    """Health check endpoint.

    Returns:
        Dict[str, Any]: Health status information
    """
    return {
        "status": "healthy",
        "timestamp": datetime.now(UTC).isoformat(),
        "version": API_VERSION,
        "environment": settings.environment,
    }
