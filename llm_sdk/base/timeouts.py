"""Request timeout configuration.

Every SDK call carries one fixed timeout that bounds the whole call, retries
included. The value defaults to :data:`llm_sdk.config.defaults.REQUEST_TIMEOUT_SECONDS`
and can be overridden once per process with ``LLM_SDK_TIMEOUT_SECONDS``.
"""
from __future__ import annotations

import os
from dataclasses import dataclass

from ..config.defaults import REQUEST_TIMEOUT_SECONDS


@dataclass(frozen=True)
class TimeoutConfig:
    """Normalized timeout values (seconds).

    Attributes:
        request_timeout_seconds: Upper bound for one logical call, covering
            every retry attempt and the body read.
    """

    request_timeout_seconds: float = REQUEST_TIMEOUT_SECONDS


_CACHED: TimeoutConfig | None = None
_ENV_GUARD: str | None = None


def parse_env_float(name: str, default: float | None) -> float | None:
    """Read ``name`` as a positive float; unset, invalid or non-positive values yield ``default``."""
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        val = float(raw)
    except ValueError:
        return default
    return val if val > 0 else default


def get_timeout_config() -> TimeoutConfig:
    """Return the process-cached :class:`TimeoutConfig`.

    The cache is refreshed when ``LLM_SDK_TIMEOUT_SECONDS`` changes so tests can
    adjust it through ``monkeypatch``.
    """
    global _CACHED, _ENV_GUARD  # noqa: PLW0603 - documented module cache
    guard = os.getenv("LLM_SDK_TIMEOUT_SECONDS", "")
    if _CACHED is not None and guard == _ENV_GUARD:
        return _CACHED
    seconds = parse_env_float("LLM_SDK_TIMEOUT_SECONDS", REQUEST_TIMEOUT_SECONDS)
    _CACHED = TimeoutConfig(request_timeout_seconds=float(seconds))
    _ENV_GUARD = guard
    return _CACHED


__all__ = ["TimeoutConfig", "get_timeout_config", "parse_env_float"]
