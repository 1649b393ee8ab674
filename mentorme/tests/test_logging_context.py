"""Tests for structured logging and request_id propagation."""

import json
import logging

from fastapi.testclient import TestClient

from mentorme.core.logging import JsonFormatter, LOGGER_NAME, latency_bucket_ms, log_event, request_id_ctx_var
from mentorme.main import app


def test_request_id_in_response_and_logs(caplog):
    client = TestClient(app)
    with caplog.at_level(logging.INFO, logger=LOGGER_NAME):
        response = client.get("/readyz")
    rid = response.headers.get("x-request-id")
    assert rid
    records = [r for r in caplog.records if getattr(r, "request_id", None) == rid]
    assert records, "Expected logs to contain request_id from response"
    assert len({r.request_id for r in records}) == 1


def test_request_id_in_error_response():
    client = TestClient(app)
    response = client.post("/v1/mentor/card", params={"now": "not-a-date"}, json={})
    rid = response.headers.get("x-request-id")
    assert response.status_code == 400
    assert rid
    payload = response.json()
    assert payload["error"]["request_id"] == rid


def test_log_event_binds_context_request_id(caplog):
    token = request_id_ctx_var.set("rid-42")
    try:
        with caplog.at_level(logging.WARNING, logger=LOGGER_NAME):
            log_event(
                "warning",
                "summarizer.fallback",
                event_type="summarizer",
                error_code="timeout",
                extra={"task": "journal_theme", "detail": "x" * 900},
            )
    finally:
        request_id_ctx_var.reset(token)

    record = next(r for r in caplog.records if r.getMessage() == "summarizer.fallback")
    assert record.request_id == "rid-42"
    assert record.error_code == "timeout"
    assert record.detail.endswith("...<truncated>")

    line = json.loads(JsonFormatter().format(record))
    assert line["event_type"] == "summarizer"
    assert line["task"] == "journal_theme"
    assert line["request_id"] == "rid-42"


def test_latency_buckets():
    assert latency_bucket_ms(None) == "unknown"
    assert latency_bucket_ms(5) == "<10ms"
    assert latency_bucket_ms(250) == "100-500ms"
    assert latency_bucket_ms(2500) == ">=1000ms"
