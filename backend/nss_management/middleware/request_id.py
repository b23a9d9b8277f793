"""
NSS Management Backend: Request ID Middleware
===============================================

What:  Assigns a short correlation ID to each request and echoes it back.
Why:   Every log line and error body for one request shares the same ID, so a
       failing call reported by the UI can be found in the server logs.
How:   Uses the client's X-Request-ID header when present, otherwise a new
       8-character UUID prefix. Stored in a ContextVar for loggers and
       exception handlers, and in request.state for route handlers.
"""

import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

# Coroutine-local: concurrent requests on one event loop each see their own ID
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Middleware that tags each request/response pair with an ID."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = request.headers.get("X-Request-ID") or str(uuid.uuid4())[:8]

        request_id_var.set(rid)
        request.state.request_id = rid

        response = await call_next(request)
        response.headers["X-Request-ID"] = rid
        return response
