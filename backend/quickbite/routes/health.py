"""
QuickBite Backend: Health Check Route
======================================

What:  GET /health for load balancers and container health checks.
How:   Probes the data store with its cheapest query.

Status levels:
    - healthy:   data store reachable (HTTP 200)
    - unhealthy: data store unreachable or never configured (HTTP 503)

The API has no other dependency, so there is no "degraded" state.
"""

import logging
import time

from fastapi import APIRouter, Request, Response

from quickbite import __version__
from quickbite.schemas.common import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check(request: Request, response: Response) -> HealthResponse:
    # Read app.state directly: a missing store should report, not raise
    store = getattr(request.app.state, "datastore", None)

    if store is None:
        datastore_status = "unconfigured"
    elif await store.health_check():
        datastore_status = "connected"
    else:
        datastore_status = "disconnected"

    overall = "healthy" if datastore_status == "connected" else "unhealthy"
    if overall != "healthy":
        response.status_code = 503
        logger.warning("Health check: data store %s", datastore_status)

    return HealthResponse(
        status=overall,
        version=__version__,
        datastore=datastore_status,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
