"""
Userbase Backend — Prometheus Metrics
=======================================

What:  Request counters and latency histogram, exposed at GET /metrics.
Who:   Recorded by RequestLoggingMiddleware; rendered by routes/health.py.

Labels use the matched route template (e.g. /api/users/{user_id}) rather
than the raw path, so ids do not explode label cardinality.
"""

from prometheus_client import Counter, Histogram

http_requests_total = Counter(
    "userbase_http_requests_total",
    "Total HTTP requests",
    ["method", "endpoint", "status"],
)

http_request_duration_seconds = Histogram(
    "userbase_http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "endpoint"],
)


def record_request(method: str, endpoint: str, status: int, duration_seconds: float) -> None:
    http_requests_total.labels(method=method, endpoint=endpoint, status=str(status)).inc()
    http_request_duration_seconds.labels(method=method, endpoint=endpoint).observe(duration_seconds)
