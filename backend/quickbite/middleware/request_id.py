"""
QuickBite Backend: Request ID Middleware
=========================================

What:  Assigns an id to each request and returns it in `X-Request-ID`.
Why:   Every log line of a request can be matched to the response the
       client saw.
How:   Reuses a client-sent X-Request-ID when present, otherwise generates
       a short random id. The id is kept in a ContextVar for loggers and on
       `request.state` for handlers.
"""

import uuid
from contextvars import ContextVar
from typing import Optional

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

REQUEST_ID_HEADER = "X-Request-ID"
MAX_CLIENT_ID_LENGTH = 64

# Coroutine-local: concurrent requests on one event loop each see their own id
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


def new_request_id() -> str:
    return uuid.uuid4().hex[:8]


def resolve_request_id(header_value: Optional[str]) -> str:
    """Client id if usable, else a fresh one. Oversized ids are replaced."""
    candidate = (header_value or "").strip()
    if not candidate or len(candidate) > MAX_CLIENT_ID_LENGTH:
        return new_request_id()
    return candidate


class RequestIDMiddleware(BaseHTTPMiddleware):

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = resolve_request_id(request.headers.get(REQUEST_ID_HEADER))
        token = request_id_var.set(rid)
        request.state.request_id = rid
        try:
            response = await call_next(request)
        finally:
            request_id_var.reset(token)

        response.headers[REQUEST_ID_HEADER] = rid
        return response
