"""
Handles application configuration for the qrpayload service.

This module is responsible for:
- Configuring logging for the application.
- Providing FastAPI application settings (title, description, root_path).
- Providing Uvicorn server settings (host, port, log level).
- Providing decoder limits (maximum accepted payload size) from environment variables.
"""

import logging
import os

import coloredlogs

# ── Logging Configuration ──────────────────────────────────────────────────
# This logger is for messages originating from the config.py module itself.
module_logger = logging.getLogger(__name__)

DEFAULT_MAX_PAYLOAD_BYTES = 4096


def configure_logger():
    root_logger = logging.getLogger()
    log_level_str = os.getenv("LOG_LEVEL", "INFO").upper()

    log_level_int = getattr(logging, log_level_str, None)
    if not isinstance(log_level_int, int):
        module_logger.warning(f"Invalid LOG_LEVEL '{log_level_str}'. Defaulting to INFO.")
        log_level_int = logging.INFO

    log_format = "%(asctime)s %(name)s[%(process)d] %(levelname)s %(message)s"

    # Root captures everything; the coloredlogs handler filters by level.
    root_logger.setLevel(logging.DEBUG)

    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)

    coloredlogs.install(
        level=log_level_int,
        fmt=log_format,
        logger=root_logger,
        reconfigure=True,
    )

    return root_logger


# ── FastAPI Configuration ──────────────────────────────────────────────────
def get_fastapi_config():
    """
    Retrieves FastAPI application settings from environment variables.

    Returns:
        dict: A dictionary containing title, server_description, and root_path
              for the FastAPI application.
    """
    return {
        "title": os.getenv("QR_SERVICE_TITLE", "qrpayload"),
        "server_description": os.getenv(
            "QR_SERVICE_DESCRIPTION", "QR payload decoding service"
        ),
        "root_path": os.getenv("QR_SERVICE_ROOT_PATH", ""),
    }


# ── Server Configuration ───────────────────────────────────────────────────
def get_server_config():
    """
    Retrieves Uvicorn server settings from environment variables.

    Returns:
        dict: A dictionary containing 'host', 'port' (int) and 'log_level'.
    """
    return {
        "host": os.getenv("QR_SERVICE_HOST", "0.0.0.0"),
        "port": int(os.getenv("QR_SERVICE_PORT", "8000")),
        "log_level": os.getenv("QR_SERVICE_LOG_LEVEL", "info").lower(),
    }


# ── Decoder Configuration ──────────────────────────────────────────────────
def get_decoder_config():
    """
    Retrieves decoder limits from environment variables.

    QR_MAX_PAYLOAD_BYTES bounds the size of a codeword stream accepted by the
    decode endpoint. Missing, non-numeric or non-positive values fall back to
    DEFAULT_MAX_PAYLOAD_BYTES.

    Returns:
        dict: A dictionary containing 'max_payload_bytes' (int).
    """
    raw = os.getenv("QR_MAX_PAYLOAD_BYTES")
    max_payload_bytes = DEFAULT_MAX_PAYLOAD_BYTES
    if raw:
        try:
            parsed = int(raw)
        except ValueError:
            parsed = 0
        if parsed > 0:
            max_payload_bytes = parsed
        else:
            module_logger.warning(
                f"Invalid QR_MAX_PAYLOAD_BYTES '{raw}'. "
                f"Defaulting to {DEFAULT_MAX_PAYLOAD_BYTES}."
            )
    return {"max_payload_bytes": max_payload_bytes}
