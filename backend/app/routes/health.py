"""
Userbase Backend — Operational Routes
=======================================

What:  Read-only endpoints for monitoring: /health, /info, /metrics.
Why:   Load balancers route away from instances whose database is unreachable;
       Prometheus scrapes request metrics; operators check the running version.
Who:   Docker health checks, load balancers, Prometheus, humans.

Status levels (GET /health):
    - healthy:   database reachable (HTTP 200)
    - unhealthy: database unreachable (HTTP 503, stop routing traffic)
"""

import logging
import time

from fastapi import APIRouter, Response
from fastapi.responses import JSONResponse
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from sqlalchemy import text

from app import __version__
from app.config import settings
from app.schemas.user import HealthResponse, InfoResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Operations"])

# Initialized once when the module loads
_start_time = time.time()

DESCRIPTION = "CRUD REST backend for the User resource"


@router.get(
    "/health",
    response_model=HealthResponse,
    responses={503: {"description": "Database unreachable", "model": HealthResponse}},
    summary="Service health check",
)
async def health_check():
    """
    Probe the database with SELECT 1 and report aggregate status.

    The check is deliberately lightweight: it runs every few seconds.
    """
    db_status = "connected"
    overall = "healthy"

    try:
        from app.database import engine
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except Exception as e:
        db_status = "disconnected"
        overall = "unhealthy"
        logger.warning("Health check: database unreachable: %s", str(e))

    body = HealthResponse(
        status=overall,
        version=__version__,
        database=db_status,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
    status_code = 200 if overall == "healthy" else 503
    return JSONResponse(status_code=status_code, content=body.model_dump())


@router.get("/info", response_model=InfoResponse, summary="Application information")
async def info() -> InfoResponse:
    return InfoResponse(
        name=settings.app_name,
        version=__version__,
        description=DESCRIPTION,
    )


@router.get("/metrics", summary="Prometheus metrics", response_class=Response)
async def metrics() -> Response:
    """Prometheus text exposition format, for scraping."""
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
