"""
qr_service

HTTP service for qrpayload, providing a FastAPI-based backend that decodes
QR codeword streams with the qr_decoder library.

Modules:
    - config: Logging, FastAPI, server and decoder configuration from the environment
    - main: FastAPI application setup and server entry point
    - metrics: Prometheus metric definitions
    - middleware: HTTP metrics middleware
    - models: Pydantic models for API request/response validation
"""

from ._version import VERSION
from .config import configure_logger
from .main import app, create_app, main

__all__ = [
    "VERSION",
    "app",
    "create_app",
    "main",
    "configure_logger",
]
