"""
Userbase Backend — Request ID Middleware
==========================================

What:  Assigns a short unique ID to each incoming request and echoes it back.
Why:   Every log line for a request shares the same ID, and clients can quote
       the X-Request-ID response header when reporting a failure.
How:   Reuses the client's X-Request-ID header when present, otherwise
       generates one; stores it in a ContextVar and in request.state.
Who:   Applied to every request via Starlette middleware.
When:  Outermost of the application middlewares, so the access log, the
       error handlers and the 500 path all see the same ID.

Where the ID shows up:
    - access log lines ("userbase.access") and error logs, as [rid]
    - the X-Request-ID response header, on success and failure alike
    - request.state.request_id, for route handlers that want it
"""

import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

# ── Context Variable ──────────────────────────────────────────────────────
# What: Coroutine-local storage for the current request ID
# Why ContextVar: concurrent requests share one thread on the event loop;
# each task gets its own copy, so IDs never leak between requests.
# Read by: app.errors (error logs) and RequestLoggingMiddleware (access log)
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Middleware that assigns a unique ID to each request for tracing.

    Behavior:
        1. Use the client's X-Request-ID header if it is present and non-empty
        2. Otherwise generate a new short UUID
        3. Store it in the ContextVar and request.state
        4. Copy it onto the response headers
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        # Client-provided ID wins; an empty header counts as absent
        # 8 chars of a UUID is enough for correlation and readable in logs
        rid = request.headers.get("X-Request-ID") or str(uuid.uuid4())[:8]

        # ContextVar for loggers and middleware, request.state for handlers
        request_id_var.set(rid)
        request.state.request_id = rid

        # Inner middleware turns unhandled errors into a 500 response,
        # so this also runs for failed requests
        response = await call_next(request)

        # Exposed to browsers via CORS expose_headers (see app.main)
        response.headers["X-Request-ID"] = rid

        return response
