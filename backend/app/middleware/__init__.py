# Middleware package init
"""
Userbase Backend — Middleware Package
=======================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (order matters!):
    Request → [Request ID] → [Logging + Metrics] → [GZip] → [CORS] → Route Handler

    1. Request ID first: every later log line carries the correlation ID
    2. Logging: records status and duration once the response is built

    The order is reversed for responses, so the X-Request-ID header is
    attached after logging has seen the final status code.
"""
