"""
Contains custom FastAPI middleware for the qrpayload service.

Middleware functions in this module intercept HTTP requests to collect
Prometheus metrics.
"""

import time

from fastapi import Request

from qr_service.metrics import HTTP_LATENCY, HTTP_REQUESTS

UNMATCHED_ENDPOINT = "unmatched"


def endpoint_label(request: Request) -> str:
    """
    Label value for the route that served a request.

    Uses the matched route's path template so the label set stays bounded;
    requests no route matched (404s) share UNMATCHED_ENDPOINT.
    """
    route = request.scope.get("route")
    path = getattr(route, "path", None)
    return path if path else UNMATCHED_ENDPOINT


async def prometheus_http_middleware(request: Request, call_next):
    """
    Record request count and latency for every HTTP request.

    Counts are labeled by method, route template and status code; latency by
    method and route template. The route is only known once routing has run,
    so labels are computed after call_next returns.
    """
    start = time.perf_counter()
    response = await call_next(request)
    latency = time.perf_counter() - start

    endpoint = endpoint_label(request)
    HTTP_REQUESTS.labels(
        method=request.method, endpoint=endpoint, status_code=response.status_code
    ).inc()
    HTTP_LATENCY.labels(method=request.method, endpoint=endpoint).observe(latency)
    return response
