"""Health check endpoints."""
from fastapi import APIRouter, Depends, Response, status
from typing import Dict, Any

from neekihub.core.dependencies import get_health_service
from neekihub.services.health_service import HealthCheckService, HealthStatus

router = APIRouter()


@router.get("/health", tags=["health"])
async def simple_health_check() -> Dict[str, str]:
    """
    Simple health check for load balancer - no dependency checks.

    Returns HTTP 200 OK if the application is running.
    """
    return {"status": "ok"}


@router.get("/health/detailed", tags=["health"])
async def detailed_health_check(
    response: Response,
    health_service: HealthCheckService = Depends(get_health_service),
) -> Dict[str, Any]:
    """
    Detailed health check with all dependency checks.

    Returns HTTP 200 if the system is healthy or degraded.
    Returns HTTP 503 if any component is unhealthy.

    Response includes:
    - Overall system status
    - Individual component statuses (datasets, answer cache, AI providers)
    """
    health_data = await health_service.get_overall_health()

    # Set HTTP status code based on health
    if health_data["status"] == HealthStatus.UNHEALTHY:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    else:
        response.status_code = status.HTTP_200_OK

    return health_data
