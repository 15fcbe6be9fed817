"""
Defines FastAPI APIRouter for payload decoding.

This module includes routes to decode a codeword stream into its payload and
segments, and to inspect the fixed tables the decoder uses.
"""

import base64
import logging

from fastapi import APIRouter, HTTPException
from fastapi.responses import JSONResponse

from qr_decoder import ALPHANUMERIC, LENGTH_BITS, DecodeError, decode_segments
from qr_service.config import get_decoder_config
from qr_service.metrics import DECODE_ERRORS, DECODE_LATENCY, DECODE_REQUESTS, SEGMENT_COUNTER
from qr_service.models import (
    AlphabetInfo,
    DecodeErrorResponse,
    DecodeRequest,
    DecodeResponse,
    SegmentModel,
)

logger = logging.getLogger(__name__)

api_router_decode = APIRouter()  # FastAPI router for decoding endpoints

DECODE_FAILURE_DESCRIPTION = (
    "Either the codeword stream failed to decode, with body "
    "`DecodeErrorResponse {error, detail}` where `error` names the decode error type, "
    "or the request body failed validation, with FastAPI's body "
    "`{detail: [{loc, msg, type}, ...]}`."
)


@api_router_decode.post(
    "/decode",
    response_model=DecodeResponse,
    responses={
        400: {"description": "Payload is not valid hexadecimal."},
        413: {"description": "Payload exceeds the configured size limit."},
        422: {"model": DecodeErrorResponse, "description": DECODE_FAILURE_DESCRIPTION},
    },
)
async def decode_payload(request: DecodeRequest):
    """
    Decodes a codeword stream into its payload.

    Returns 413 for payloads above the configured limit (checked on the hex
    length, before parsing), 400 for malformed hex, and 422 with the error
    type when the stream itself fails to decode.
    """
    DECODE_REQUESTS.inc()

    max_payload_bytes = get_decoder_config()["max_payload_bytes"]
    payload_bytes = len(request.payload) // 2
    if payload_bytes > max_payload_bytes:
        raise HTTPException(
            status_code=413,
            detail=f"Payload of {payload_bytes} bytes exceeds the limit of {max_payload_bytes}.",
        )

    try:
        buffer = bytes.fromhex(request.payload)
    except ValueError:
        raise HTTPException(status_code=400, detail="Payload is not valid hexadecimal.")

    try:
        with DECODE_LATENCY.time():
            segments = decode_segments(buffer, request.version)
    except DecodeError as e:
        error_name = type(e).__name__
        DECODE_ERRORS.labels(error=error_name).inc()
        logger.warning(f"Decode failed ({error_name}) for version {request.version}: {e}")
        return JSONResponse(
            status_code=422,
            content=DecodeErrorResponse(error=error_name, detail=str(e)).model_dump(),
        )

    for segment in segments:
        SEGMENT_COUNTER.labels(mode=segment.mode).inc()

    data = b"".join(segment.data for segment in segments)
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError:
        text = None

    return DecodeResponse(
        version=request.version,
        data_hex=data.hex(),
        data_base64=base64.b64encode(data).decode("ascii"),
        text=text,
        segments=[SegmentModel.from_segment(segment) for segment in segments],
    )


@api_router_decode.get("/alphabet", response_model=AlphabetInfo)
async def get_alphabet():
    """Returns the alphanumeric alphabet and the length-field widths per mode and version band."""
    return AlphabetInfo(
        alphanumeric=ALPHANUMERIC,
        length_bits={
            mode.name: {band.name: width for band, width in widths.items()}
            for mode, widths in LENGTH_BITS.items()
        },
    )
