"""Failure categories carried by :class:`~llm_sdk.base.errors.SdkError`.

The string values appear in ``error_code`` log fields and are safe to match on.
"""
from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    AUTH = "auth"  # 401, 403
    RATE_LIMIT = "rate_limit"  # 429
    TIMEOUT = "timeout"  # call deadline, httpx timeouts, 408, 504
    TRANSIENT = "transient"  # connection-level failures, 502
    VALIDATION = "validation"  # 400, 422 and other 4xx
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    SERVER_ERROR = "server_error"  # 500 and other 5xx
    UNAVAILABLE = "unavailable"  # 503
    DECODE = "decode"  # success status, body does not match the response type
    UNKNOWN = "unknown"


__all__ = ["ErrorCode"]
