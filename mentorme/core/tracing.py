"""
OpenTelemetry spans for mentor assessments and HTTP requests.

Off unless OTEL_ENABLED. The service keeps its own TracerProvider instead of
installing a global one, so tests can switch exporters between runs.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Dict, Optional

from opentelemetry import trace
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import ConsoleSpanExporter, SimpleSpanProcessor, SpanExporter
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter

from mentorme.core.config import settings

SERVICE_NAME = "mentorme"

_tracer: Optional[trace.Tracer] = None
_exporter: Optional[SpanExporter] = None


def _build_exporter(name: str) -> SpanExporter:
    if name == "memory":
        return InMemorySpanExporter()
    return ConsoleSpanExporter()


def setup_tracing(enabled: Optional[bool] = None, exporter_name: Optional[str] = None) -> None:
    """(Re)configure tracing; passing enabled=False turns every span into a no-op."""
    global _tracer, _exporter

    if not (settings.OTEL_ENABLED if enabled is None else enabled):
        _tracer = None
        return

    _exporter = _build_exporter(exporter_name or os.getenv("OTEL_EXPORTER", settings.OTEL_EXPORTER))
    provider = TracerProvider(resource=Resource.create({"service.name": SERVICE_NAME}))
    provider.add_span_processor(SimpleSpanProcessor(_exporter))
    _tracer = provider.get_tracer(SERVICE_NAME)


@contextmanager
def start_span(name: str, attributes: Optional[Dict[str, object]] = None):
    """Yield the active span, or None while tracing is off. None-valued attributes are dropped."""
    if _tracer is None:
        yield None
        return
    clean = {k: v for k, v in (attributes or {}).items() if v is not None}
    with _tracer.start_as_current_span(name, attributes=clean) as span:
        yield span


def get_exported_spans():
    if isinstance(_exporter, InMemorySpanExporter):
        return _exporter.get_finished_spans()
    return []


def reset_exported_spans() -> None:
    if isinstance(_exporter, InMemorySpanExporter):
        _exporter.clear()
