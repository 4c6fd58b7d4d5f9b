"""
QuickBite Backend: Request Logging Middleware
==============================================

What:  One access-log line per HTTP request.
How:   Measures the time spent in the rest of the stack and logs method,
       path, status, duration, request id and client IP.

Unhandled exceptions stop here: they are logged with their traceback and
answered with the usual {"error": ...} 500 body, so the response still
passes back through RequestIDMiddleware and gets its X-Request-ID.

What we log vs what we DON'T log:
    ✅ Log: method, path, status, duration, IP, request ID
    ❌ Don't log: request bodies (passwords), Authorization headers, tokens
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from quickbite.middleware.request_id import request_id_var

logger = logging.getLogger("quickbite.access")

QUIET_PATHS = frozenset({"/health"})


def _level_for(status: int) -> int:
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs each request once the response is ready.

    Level follows the status class: 5xx → ERROR, 4xx → WARNING,
    everything else → INFO. Health probes are not logged.
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        start_time = time.perf_counter()
        rid = request_id_var.get("")

        try:
            response = await call_next(request)
        except Exception:
            logger.exception(
                "[%s] Unhandled error on %s %s", rid, request.method, request.url.path
            )
            response = JSONResponse(status_code=500, content={"error": "Internal server error"})

        if request.url.path in QUIET_PATHS:
            return response

        duration_ms = (time.perf_counter() - start_time) * 1000
        client_ip = request.client.host if request.client else "unknown"

        logger.log(
            _level_for(response.status_code),
            "%s %s %d %.1fms [%s] from %s",
            request.method,
            request.url.path,
            response.status_code,
            duration_ms,
            rid,
            client_ip,
        )

        return response
