#!/usr/bin/env python3
"""
Main entry point for the qrpayload service.

This script initializes and runs the FastAPI application that exposes the
qr_decoder library over HTTP.

Key responsibilities include:
- Configuring application-wide logging.
- Initializing the FastAPI application, including:
    - Setting up Prometheus metrics middleware.
    - Registering API routers (decoding, status and metrics).
    - Defining startup and shutdown handlers.
- Providing a command-line interface to start the Uvicorn server.
"""
import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from qr_service._version import VERSION
from qr_service.config import configure_logger, get_fastapi_config, get_server_config
from qr_service.middleware import prometheus_http_middleware

from .api_routers.decode import api_router_decode
from .api_routers.status import api_router_status

logger = logging.getLogger(__name__)


def create_app():
    # ── FastAPI setup ──────────────────────────────────────────────────────────
    fastapi_config = get_fastapi_config()
    API_TITLE = fastapi_config["title"]
    API_SERVER_DESCRIPTION = fastapi_config["server_description"]
    API_ROOT_PATH = fastapi_config["root_path"]

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # --- Startup ---
        logger.info(f"qrpayload {VERSION} starting up...")
        yield
        # --- Shutdown ---
        logger.info("qrpayload shutting down...")

    app = FastAPI(
        title=API_TITLE,
        version=VERSION,
        servers=[{"url": "/", "description": API_SERVER_DESCRIPTION}],
        root_path=API_ROOT_PATH,
        lifespan=lifespan,
    )

    # ── Middleware ─────────────────────────────────────────────────────────────
    @app.middleware("http")
    async def prometheus_middleware_handler(request, call_next):
        """Prometheus metrics middleware for HTTP requests."""
        return await prometheus_http_middleware(request, call_next)

    # ── API Routers ────────────────────────────────────────────────────────────
    app.include_router(api_router_decode, prefix="/api")
    app.include_router(api_router_status, prefix="/api")

    return app


app = create_app()


# ── Entrypoint ─────────────────────────────────────────────────────────────
def main():
    """
    Main function to run the Uvicorn server for the qrpayload service.

    Configures logging, reads host, port, and log level from environment
    variables or defaults, then starts the Uvicorn server.
    """
    configure_logger()
    server_config = get_server_config()
    host = server_config["host"]
    port = server_config["port"]
    log_level = server_config["log_level"]

    logger.info(f"Starting Uvicorn server on {host}:{port} with log level '{log_level}'")
    uvicorn.run(app, host=host, port=port, log_level=log_level)


if __name__ == "__main__":
    main()
