"""
Travel Diary Backend — Health Check Route
==========================================

What:  Health check endpoint for monitoring and container probes.
How:   Runs `SELECT 1` through the application's Database handle and
       reports the result together with version and uptime.
Who:   Called by Docker health checks and monitoring systems.

Status levels:
    - healthy:   database reachable
    - unhealthy: database unreachable (reported in the body; HTTP 200)
"""

import logging
import time

from fastapi import APIRouter, Request

from travel_diary import __version__
from travel_diary.schemas.common import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check(request: Request) -> HealthResponse:
    """
    Check the health of the service and its database.

    The check reuses the Database handle from the lifespan; it does not
    open a session or touch any table.
    """
    database = request.app.state.database
    connected = await database.ping()

    return HealthResponse(
        status="healthy" if connected else "unhealthy",
        version=__version__,
        database="connected" if connected else "disconnected",
        uptime_seconds=round(time.time() - _start_time, 2),
    )
