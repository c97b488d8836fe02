"""Shared transport client for the SDK.

Purpose:
    Own one pooled ``httpx.AsyncClient`` plus the middleware chain every
    outbound request runs through. A client is constructed explicitly (there
    is no module-level pool) and shared by reference across any number of
    concurrent calls.

Middleware order (outermost first, fixed at construction):
    1. :class:`TracingMiddleware` - one span per logical call, final outcome.
    2. :class:`RetryMiddleware` - content-type gate around the transient retry
       policy.
    3. network send via ``httpx.AsyncClient.send``.

Concurrency:
    Nothing is mutated after ``__init__``; the connection pool inside
    ``httpx.AsyncClient`` is the only shared mutable resource and is never
    exposed to callers. To change configuration, build a new client.

Lifecycle:
    Call :meth:`aclose` (or use ``async with``) to release pooled connections.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Optional, Tuple

import httpx
from opentelemetry import trace

from ...config.defaults import REQUEST_TIMEOUT_SECONDS
from ..logging import LogContext, get_logger, log_event
from ..middleware import (
    Middleware,
    MiddlewareChain,
    RetryMiddleware,
    TracingMiddleware,
    TransientRetryMiddleware,
)
from ..request import join_url
from ..resilience.retry import RetryConfig


class TransportClient:
    """Base-URL-bound HTTP client with a fixed middleware chain.

    Parameters:
        base_url: API root that endpoint paths are joined to.
        token: Bearer token; ``""`` disables the ``Authorization`` header.
        max_retries: Retry budget for transient failures of retryable requests.
        retry_config: Full retry policy; when given, ``max_retries`` is ignored.
            Attempts are logged unless the policy carries its own ``attempt_logger``.
        transport: Optional ``httpx`` transport (e.g. ``httpx.MockTransport``).
        tracer: Optional OpenTelemetry tracer for the tracing middleware.
        timeout: Per-attempt httpx timeout (connect, read, write and pool), in seconds.
    """

    def __init__(
        self,
        base_url: str,
        token: str,
        max_retries: int,
        *,
        retry_config: Optional[RetryConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        tracer: Optional[trace.Tracer] = None,
        timeout: float = REQUEST_TIMEOUT_SECONDS,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._token = token
        self._logger = get_logger("llm_sdk.http")
        if retry_config is None:
            retry_config = RetryConfig(max_retries=max_retries)
        if retry_config.attempt_logger is None:
            retry_config = replace(retry_config, attempt_logger=self._log_attempt)
        self._retry_config = retry_config
        self._http = httpx.AsyncClient(transport=transport, timeout=httpx.Timeout(timeout))
        self._chain = MiddlewareChain(
            [
                TracingMiddleware(tracer),
                RetryMiddleware(TransientRetryMiddleware(self._retry_config)),
            ],
            self._send,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def token(self) -> str:
        return self._token

    @property
    def retry_config(self) -> RetryConfig:
        return self._retry_config

    @property
    def middlewares(self) -> Tuple[Middleware, ...]:
        return self._chain.items

    @property
    def http(self) -> httpx.AsyncClient:
        """Underlying client, used by descriptors to build requests."""
        return self._http

    def build_request(self, method: str, path: str, **kwargs: Any) -> httpx.Request:
        """Build a request for ``path`` relative to :attr:`base_url`."""
        return self._http.build_request(method, join_url(self._base_url, path), **kwargs)

    async def send(self, request: httpx.Request) -> httpx.Response:
        """Run ``request`` through the middleware chain and return the final response."""
        return await self._chain.run(request)

    async def _send(self, request: httpx.Request) -> httpx.Response:
        log_event(
            self._logger,
            "http.request",
            level=logging.DEBUG,
            method=request.method,
            path=request.url.path,
        )
        return await self._http.send(request)

    def _log_attempt(
        self,
        *,
        request: httpx.Request,
        attempt: int,
        max_attempts: int,
        delay: float | None,
        status: int | None,
        error: BaseException | None,
    ) -> None:
        will_retry = delay is not None
        if attempt == 0 and not will_retry:
            return
        log_event(
            self._logger,
            "retry.attempt",
            LogContext(extra={"path": request.url.path}),
            level=logging.WARNING if will_retry else logging.INFO,
            attempt=attempt,
            max_attempts=max_attempts,
            delay=delay,
            status=status,
            error=type(error).__name__ if error else None,
            will_retry=will_retry,
        )

    async def aclose(self) -> None:
        await self._http.aclose()

    async def __aenter__(self) -> "TransportClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"TransportClient(base_url={self._base_url!r}, max_retries={self._retry_config.max_retries})"


__all__ = ["TransportClient"]
