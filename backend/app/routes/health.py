"""
Bills Demo Backend: Health Check Route
======================================

What:  GET /health for container and load balancer probes.
How:   The service has no dependencies to probe, so it reports healthy with
       the version and process uptime.
"""

import time

from fastapi import APIRouter

from app import __version__
from app.schemas.bill import HealthResponse

router = APIRouter(tags=["Health"])

# Module load time doubles as service start time
_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check() -> HealthResponse:
    return HealthResponse(
        status="healthy",
        version=__version__,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
