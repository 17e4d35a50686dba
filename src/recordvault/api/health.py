"""Health check API endpoints."""

from typing import Any, Dict

from fastapi import APIRouter, Depends

from ..core.schemas.common import HealthCheckResponse
from ..core.services import HealthService
from .dependencies import get_health_service

router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthCheckResponse)
async def health_check(health_service: HealthService = Depends(get_health_service)):
    """Get overall system health status."""
    return await health_service.get_health_status()


@router.get("/database", response_model=Dict[str, Any])
async def database_health(health_service: HealthService = Depends(get_health_service)):
    """Check database connectivity."""
    return await health_service.check_database_health()
