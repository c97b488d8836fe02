"""Generic transient-failure retry middleware.

Sends the request, and while the outcome is transient (a network-level error
or a retryable status, see :class:`~llm_sdk.base.resilience.retry.RetryConfig`)
and the retry budget is not spent, waits the backoff delay and sends the same
request again. Attempts never overlap.

The final outcome is returned unchanged: the last response (success or not),
or the last exception re-raised.
"""
from __future__ import annotations

import asyncio
from typing import Awaitable, Callable

import httpx

from ..resilience.retry import DEFAULT_RETRY_CONFIG, RetryConfig, is_transient_error
from .middleware_base import CallNext, Middleware

Sleep = Callable[[float], Awaitable[None]]


class TransientRetryMiddleware(Middleware):
    def __init__(self, config: RetryConfig = DEFAULT_RETRY_CONFIG, *, sleep: Sleep = asyncio.sleep) -> None:
        self.config = config
        self._sleep = sleep

    async def handle(self, request: httpx.Request, call_next: CallNext) -> httpx.Response:
        cfg = self.config
        attempt = 0
        while True:
            try:
                response = await call_next(request)
            except httpx.HTTPError as exc:
                if not is_transient_error(exc) or attempt >= cfg.max_retries:
                    self._report(request, attempt, None, None, exc)
                    raise
                delay = cfg.backoff(attempt)
                self._report(request, attempt, delay, None, exc)
            else:
                if not cfg.is_retryable_status(response.status_code) or attempt >= cfg.max_retries:
                    self._report(request, attempt, None, response.status_code, None)
                    return response
                delay = cfg.backoff(attempt)
                self._report(request, attempt, delay, response.status_code, None)
                # The retried response is discarded; release its connection.
                await response.aclose()
            await self._sleep(delay)
            attempt += 1

    def _report(
        self,
        request: httpx.Request,
        attempt: int,
        delay: float | None,
        status: int | None,
        error: BaseException | None,
    ) -> None:
        if self.config.attempt_logger is None:
            return
        self.config.attempt_logger(
            request=request,
            attempt=attempt,
            max_attempts=self.config.max_attempts,
            delay=delay,
            status=status,
            error=error,
        )


__all__ = ["TransientRetryMiddleware", "Sleep"]
