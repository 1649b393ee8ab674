import logging

from fastapi import FastAPI, Request
from fastapi.testclient import TestClient

from mentorme.core.logging import LOGGER_NAME, get_request_id
from mentorme.core.middleware.request_id import RequestIdMiddleware


def _make_app():
    app = FastAPI()
    app.add_middleware(RequestIdMiddleware)

    @app.get("/")
    async def root(request: Request):
        return {
            "request_id": getattr(request.state, "request_id", None),
            "context_request_id": get_request_id(),
        }

    return app


def test_generates_request_id_when_missing():
    client = TestClient(_make_app())

    resp = client.get("/")
    assert resp.status_code == 200
    rid_header = resp.headers.get("x-request-id")
    body = resp.json()

    assert rid_header
    assert body["request_id"] == rid_header
    assert body["context_request_id"] == rid_header


def test_echoes_provided_request_id():
    client = TestClient(_make_app())

    provided = "test-rid-123"
    resp = client.get("/", headers={"X-Request-Id": provided})

    assert resp.status_code == 200
    assert resp.headers.get("x-request-id") == provided
    assert resp.json().get("request_id") == provided


def test_context_cleared_after_request():
    client = TestClient(_make_app())
    client.get("/")
    assert get_request_id() is None


def test_completion_log_carries_route_and_latency(caplog):
    client = TestClient(_make_app())
    with caplog.at_level(logging.INFO, logger=LOGGER_NAME):
        resp = client.get("/", headers={"x-request-id": "rid-log"})

    record = next(r for r in caplog.records if r.getMessage() == "request.complete")
    assert resp.status_code == 200
    assert record.request_id == "rid-log"
    assert record.path == "/"
    assert record.status == "200"
    assert record.latency_bucket in {"<10ms", "10-100ms", "100-500ms", "500-1000ms", ">=1000ms"}
