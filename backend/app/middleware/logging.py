"""
Userbase Backend — Request Logging Middleware
===============================================

What:  One structured access log line per HTTP request, plus request metrics.
Why:   Enables monitoring, debugging and alerting.
How:   Times the downstream call, then logs method, path, status, duration
       and request ID, and records the Prometheus counter/histogram.
       Unhandled exceptions are turned into the generic 500 here, while the
       request ID is still in scope.
Who:   Applied to every request via Starlette middleware.
When:  After RequestIDMiddleware (uses request ID for correlation).

What we log vs what we DON'T log (privacy):
    ✅ Log: method, path, status, duration, IP, request ID
    ❌ Don't log: request body (names and emails are PII)
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from app.errors import build_error_response
from app.metrics import record_request
from app.middleware.request_id import request_id_var

logger = logging.getLogger("userbase.access")

# Probed every few seconds by orchestrators and scrapers
QUIET_PATHS = {"/health", "/metrics"}


def _endpoint_label(request: Request) -> str:
    """Route template if one matched, else the raw path."""
    route = request.scope.get("route")
    return getattr(route, "path", None) or request.url.path


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs structured information about each HTTP request and response.

    Log level follows the status class:
        5xx → ERROR, 4xx → WARNING, everything else → INFO
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        start_time = time.perf_counter()

        # request.client may be None in testing
        client_ip = request.client.host if request.client else "unknown"
        method = request.method
        path = request.url.path
        rid = request_id_var.get("")

        if path in QUIET_PATHS:
            return await call_next(request)

        try:
            response = await call_next(request)
        except Exception as exc:
            # call_next re-raises what the app raised; answering here keeps
            # the failure inside the access log and request metrics.
            response = build_error_response(request, exc)

        duration = time.perf_counter() - start_time
        duration_ms = duration * 1000

        status = response.status_code
        if status >= 500:
            log_level = logging.ERROR
        elif status >= 400:
            log_level = logging.WARNING
        else:
            log_level = logging.INFO

        logger.log(
            log_level,
            "%s %s %d %.1fms [%s] from %s",
            method,
            path,
            status,
            duration_ms,
            rid,
            client_ip,
            extra={
                "request_id": rid,
                "method": method,
                "path": path,
                "status": status,
                "duration_ms": round(duration_ms, 2),
                "client_ip": client_ip,
            },
        )
        record_request(method, _endpoint_label(request), status, duration)

        return response
