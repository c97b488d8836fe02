"""Tracing middleware: one client span per logical call.

Installed outside the retry middleware so the span covers every attempt and
records only the final outcome.
"""
from __future__ import annotations

import asyncio

import httpx
from opentelemetry import trace
from opentelemetry.trace import Status, StatusCode

from ..tracing import start_span
from .middleware_base import CallNext, Middleware


class TracingMiddleware(Middleware):
    def __init__(self, tracer: trace.Tracer | None = None) -> None:
        self._tracer = tracer

    async def handle(self, request: httpx.Request, call_next: CallNext) -> httpx.Response:
        path = request.url.path
        with start_span(f"llm_sdk.http {path}", tracer=self._tracer) as span:
            span.set_attribute("http.request.method", request.method)
            span.set_attribute("url.full", str(request.url))
            try:
                response = await call_next(request)
            except asyncio.CancelledError as exc:
                # The call deadline (or the caller) cancelled the chain mid-flight.
                span.record_exception(exc)
                span.set_status(Status(StatusCode.ERROR, "cancelled"))
                raise
            except Exception as exc:
                span.record_exception(exc)
                span.set_status(Status(StatusCode.ERROR, type(exc).__name__))
                raise
            span.set_attribute("http.response.status_code", response.status_code)
            if response.status_code >= 400:
                span.set_status(Status(StatusCode.ERROR))
            return response


__all__ = ["TracingMiddleware"]
