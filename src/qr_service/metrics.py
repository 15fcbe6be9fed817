"""
Defines Prometheus metrics for monitoring the qrpayload service.

This module centralizes the Counter and Histogram metrics used to track decode
requests, decode failures by error type, decoded segments by mode, and HTTP
traffic.
"""

from prometheus_client import Counter, Histogram

DECODE_REQUESTS = Counter("qrpayload_decode_requests_total", "Total decode requests")
DECODE_ERRORS = Counter(
    "qrpayload_decode_errors_total", "Total failed decodes by error type", ["error"]
)
SEGMENT_COUNTER = Counter("qrpayload_segments_total", "Decoded segments by mode", ["mode"])
DECODE_LATENCY = Histogram(
    "qrpayload_decode_latency_seconds", "Time spent decoding a codeword stream"
)
HTTP_REQUESTS = Counter(
    "qrpayload_http_requests_total", "Total HTTP requests", ["method", "endpoint", "status_code"]
)
HTTP_LATENCY = Histogram(
    "qrpayload_http_request_latency_seconds",
    "HTTP request latency in seconds",
    ["method", "endpoint"],
)
