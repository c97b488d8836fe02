"""Retry policy configuration and transient-failure predicates.

The policy is consumed by
:class:`llm_sdk.base.middleware.transient_retry.TransientRetryMiddleware`.
A request is sent at most ``max_retries + 1`` times. Before retry number
``n`` (0-based) the caller waits ``backoff(n)`` seconds:

    min(max_delay, base_delay * backoff_factor ** n)

scaled by a uniform random factor in ``[0, 1)`` when ``jitter`` is on
("full jitter"), which spreads retries from concurrent callers apart.
"""
from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Optional, Protocol

import httpx

from ...config.defaults import (
    DEFAULT_MAX_RETRIES,
    RETRY_BACKOFF_FACTOR,
    RETRY_BASE_DELAY_SECONDS,
    RETRY_MAX_DELAY_SECONDS,
)

# 429 plus every 5xx.
DEFAULT_RETRYABLE_STATUSES: frozenset[int] = frozenset({429, *range(500, 600)})


class AttemptLogger(Protocol):  # pragma: no cover - structural protocol
    def __call__(
        self,
        *,
        request: httpx.Request,
        attempt: int,
        max_attempts: int,
        delay: float | None,
        status: int | None,
        error: BaseException | None,
    ) -> None: ...


@dataclass(frozen=True)
class RetryConfig:
    max_retries: int = DEFAULT_MAX_RETRIES
    base_delay: float = RETRY_BASE_DELAY_SECONDS
    backoff_factor: float = RETRY_BACKOFF_FACTOR
    max_delay: float = RETRY_MAX_DELAY_SECONDS
    jitter: bool = True
    retryable_statuses: frozenset[int] = DEFAULT_RETRYABLE_STATUSES
    attempt_logger: Optional[AttemptLogger] = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if self.max_retries < 0:
            raise ValueError("max_retries must be >= 0")
        if self.base_delay < 0 or self.max_delay < 0:
            raise ValueError("backoff delays must be >= 0")
        if self.backoff_factor < 1:
            raise ValueError("backoff_factor must be >= 1")

    @property
    def max_attempts(self) -> int:
        return self.max_retries + 1

    def backoff(self, attempt: int) -> float:
        """Return the delay (seconds) to wait before retry number ``attempt``."""
        delay = min(self.max_delay, self.base_delay * self.backoff_factor**attempt)
        if self.jitter:
            delay *= random.random()  # nosec B311 - jitter, not security sensitive
        return delay

    def is_retryable_status(self, status: int) -> bool:
        return status in self.retryable_statuses


def is_transient_error(exc: BaseException) -> bool:
    """Return True for network-level failures worth retrying.

    Timeouts, connection/read/write errors and malformed server responses are
    transient. Local protocol errors, proxy misconfiguration, unsupported
    schemes and decoding problems are bugs or configuration errors.
    """
    if isinstance(exc, (httpx.TimeoutException, httpx.NetworkError, httpx.RemoteProtocolError)):
        return True
    return False


DEFAULT_RETRY_CONFIG = RetryConfig()


__all__ = [
    "AttemptLogger",
    "RetryConfig",
    "DEFAULT_RETRY_CONFIG",
    "DEFAULT_RETRYABLE_STATUSES",
    "is_transient_error",
]
