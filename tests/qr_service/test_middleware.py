"""
Tests for the Prometheus HTTP middleware.

Verifies that `prometheus_http_middleware` records request counts labeled by
method, route template and status code, and latency labeled by method and
route template, and that unrouted paths share a single label value.
"""

from types import SimpleNamespace

import pytest
from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from fastapi.testclient import TestClient

from qr_service.metrics import HTTP_LATENCY, HTTP_REQUESTS
from qr_service.middleware import UNMATCHED_ENDPOINT, endpoint_label, prometheus_http_middleware


@pytest.fixture(autouse=True)
def reset_metrics():
    """Clears labeled children of the HTTP metrics before each test."""
    HTTP_REQUESTS.clear()
    HTTP_LATENCY.clear()


def get_histogram_count(histogram, **labels):
    for metric in histogram.collect():
        for sample in metric.samples:
            if sample.name.endswith("_count") and all(
                sample.labels.get(k) == v for k, v in labels.items()
            ):
                return sample.value
    return 0


def get_endpoint_labels(counter):
    return {
        sample.labels["endpoint"]
        for metric in counter.collect()
        for sample in metric.samples
        if sample.name.endswith("_total")
    }


@pytest.fixture
def metered_app():
    app = FastAPI()

    @app.middleware("http")
    async def middleware_wrapper(request: Request, call_next):
        return await prometheus_http_middleware(request, call_next)

    @app.get("/ok")
    async def ok():
        return PlainTextResponse("OK", status_code=200)

    @app.get("/broken")
    async def broken():
        return PlainTextResponse("Error", status_code=500)

    @app.get("/items/{item_id}")
    async def item(item_id: int):
        return {"item_id": item_id}

    return app


def _bare_request(path: str) -> Request:
    return Request(
        {"type": "http", "method": "POST", "path": path, "headers": [], "query_string": b""}
    )


@pytest.mark.asyncio
async def test_middleware_records_request_directly():
    """Awaits the middleware with a bare ASGI request and a stub handler that routes it."""
    request = _bare_request("/api/decode")

    async def call_next(req):
        req.scope["route"] = SimpleNamespace(path="/api/decode")
        return PlainTextResponse("done", status_code=201)

    response = await prometheus_http_middleware(request, call_next)

    assert response.status_code == 201
    assert (
        HTTP_REQUESTS.labels(method="POST", endpoint="/api/decode", status_code="201")._value.get()
        == 1
    )
    assert get_histogram_count(HTTP_LATENCY, method="POST", endpoint="/api/decode") == 1


def test_endpoint_label_without_route():
    assert endpoint_label(_bare_request("/anything")) == UNMATCHED_ENDPOINT


def test_middleware_separates_routes_and_statuses(metered_app):
    client = TestClient(metered_app)
    client.get("/ok")
    client.get("/ok")
    client.get("/broken")

    assert HTTP_REQUESTS.labels(method="GET", endpoint="/ok", status_code="200")._value.get() == 2
    assert (
        HTTP_REQUESTS.labels(method="GET", endpoint="/broken", status_code="500")._value.get() == 1
    )
    assert get_histogram_count(HTTP_LATENCY, method="GET", endpoint="/ok") == 2
    assert get_histogram_count(HTTP_LATENCY, method="GET", endpoint="/broken") == 1


def test_middleware_labels_with_route_template(metered_app):
    client = TestClient(metered_app)
    for item_id in range(5):
        client.get(f"/items/{item_id}")

    assert get_endpoint_labels(HTTP_REQUESTS) == {"/items/{item_id}"}
    assert (
        HTTP_REQUESTS.labels(
            method="GET", endpoint="/items/{item_id}", status_code="200"
        )._value.get()
        == 5
    )


def test_unknown_paths_do_not_grow_label_set(metered_app):
    client = TestClient(metered_app)
    client.get("/ok")
    before = get_endpoint_labels(HTTP_REQUESTS)

    for i in range(50):
        assert client.get(f"/nope-{i}").status_code == 404

    after = get_endpoint_labels(HTTP_REQUESTS)
    assert after == before | {UNMATCHED_ENDPOINT}
    assert (
        HTTP_REQUESTS.labels(
            method="GET", endpoint=UNMATCHED_ENDPOINT, status_code="404"
        )._value.get()
        == 50
    )
