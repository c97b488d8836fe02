"""Thin tracing facade over the OpenTelemetry API.

``opentelemetry-api`` returns a non-recording tracer until an SDK and exporter
are installed by the application, so instrumentation here is always safe to
call and costs almost nothing when tracing is not configured.
"""
from __future__ import annotations

from opentelemetry import trace

TRACER_NAME = "llm_sdk"


def get_tracer(service_name: str = TRACER_NAME) -> trace.Tracer:
    """Return the tracer used for SDK spans."""
    return trace.get_tracer(service_name)


def start_span(name: str, *, tracer: trace.Tracer | None = None, kind: trace.SpanKind = trace.SpanKind.CLIENT):
    """Start a span and make it current for the duration of a ``with`` block.

    Usage:

        with start_span("llm_sdk.http embeddings") as span:
            span.set_attribute("http.request.method", "POST")
    """
    tracer = tracer or get_tracer()
    return tracer.start_as_current_span(name, kind=kind, record_exception=False, set_status_on_exception=False)


__all__ = ["TRACER_NAME", "get_tracer", "start_span"]
