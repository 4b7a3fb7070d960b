"""
Travel Diary Backend — Request Logging Middleware
==================================================

What:  One access-log line per HTTP request: method, path, status,
       duration, request id, client ip.
How:   Times the downstream call. Completed requests are logged at a level
       picked from the status class; a request whose handler raised is
       logged at ERROR as "unhandled" and the exception is re-raised for
       the fallback handler, which answers 500.
When:  Runs inside RequestIDMiddleware so the request id is already set.

Request bodies are never logged.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from travel_diary.middleware.request_id import request_id_var

logger = logging.getLogger("travel_diary.access")


def level_for_status(status: int) -> int:
    """5xx → ERROR, 4xx → WARNING, anything else → INFO."""
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Access log for the diary API.

    /health is skipped: container probes call it every few seconds.
    """

    QUIET_PATHS = {"/health"}

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        path = request.url.path
        if path in self.QUIET_PATHS:
            return await call_next(request)

        started = time.perf_counter()
        fields = {
            "request_id": request_id_var.get(""),
            "method": request.method,
            "path": path,
            "client_ip": request.client.host if request.client else "unknown",
        }

        try:
            response = await call_next(request)
        except Exception as e:
            fields["duration_ms"] = round((time.perf_counter() - started) * 1000, 2)
            fields["error"] = type(e).__name__
            logger.error(
                "%s %s unhandled %s %.1fms [%s] from %s",
                fields["method"],
                path,
                fields["error"],
                fields["duration_ms"],
                fields["request_id"],
                fields["client_ip"],
                extra=fields,
            )
            raise

        fields["status"] = response.status_code
        fields["duration_ms"] = round((time.perf_counter() - started) * 1000, 2)
        logger.log(
            level_for_status(response.status_code),
            "%s %s %d %.1fms [%s] from %s",
            fields["method"],
            path,
            response.status_code,
            fields["duration_ms"],
            fields["request_id"],
            fields["client_ip"],
            extra=fields,
        )

        return response
