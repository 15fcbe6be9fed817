"""
Manages API routes for service health, status and metrics.

This module provides FastAPI endpoints for:
- Liveness checks.
- Server status (version and uptime).
- Prometheus metrics exposition.
"""

import time

from fastapi import APIRouter
from fastapi.responses import Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from qr_service._version import VERSION

api_router_status = APIRouter()  # Router for health, status and metrics endpoints

# Store startup time
SERVER_START_TIME = time.time()


@api_router_status.get("/healthz")
async def healthz():
    """Liveness probe."""
    return {"status": "ok"}


@api_router_status.get("/status")
async def get_server_status():
    """Returns basic server status information."""
    uptime_seconds = time.time() - SERVER_START_TIME
    return {
        "status": "ok",
        "version": VERSION,
        "server_start_time_unix": SERVER_START_TIME,
        "uptime_seconds": uptime_seconds,
        "message": "qrpayload server is running.",
    }


@api_router_status.get("/metrics")
def metrics():
    """Prometheus metrics endpoint."""
    data = generate_latest()
    return Response(content=data, media_type=CONTENT_TYPE_LATEST)
