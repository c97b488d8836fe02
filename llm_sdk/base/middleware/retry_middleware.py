"""Content-type gated retry middleware.

Multipart uploads and raw octet streams are sent exactly once: their bodies
are not guaranteed to be cheaply re-sendable, and resubmitting them may repeat
side effects upstream. Every other request, including one without a
``Content-Type`` header (no body), goes through the wrapped
:class:`TransientRetryMiddleware`.

Only ``multipart/form-data`` (anywhere in the header value) and exactly
``application/octet-stream`` are exempt. Other content types stay retryable.
"""
from __future__ import annotations

import logging

import httpx

from ..logging import get_logger, log_event
from .middleware_base import CallNext, Middleware
from .transient_retry import TransientRetryMiddleware


def is_retry_exempt(request: httpx.Request) -> bool:
    """Return True when ``request`` must be sent at most once."""
    content_type = request.headers.get("content-type")
    if content_type is None:
        return False
    return "multipart/form-data" in content_type or content_type == "application/octet-stream"


class RetryMiddleware(Middleware):
    """Delegates to ``inner`` unless the request body is exempt from retry."""

    def __init__(self, inner: TransientRetryMiddleware) -> None:
        self.inner = inner
        self._logger = get_logger("llm_sdk.retry")

    async def handle(self, request: httpx.Request, call_next: CallNext) -> httpx.Response:
        if is_retry_exempt(request):
            log_event(
                self._logger,
                "retry.bypass",
                level=logging.DEBUG,
                path=request.url.path,
                content_type=request.headers.get("content-type"),
            )
            return await call_next(request)
        return await self.inner.handle(request, call_next)


__all__ = ["RetryMiddleware", "is_retry_exempt"]
