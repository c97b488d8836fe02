"""
Map HTTP statuses and exceptions to :class:`ErrorCode`.

Every 4xx/5xx status has a code: specific statuses first, then the status
class (other 4xx are validation failures, other 5xx server errors).
Exceptions are mapped by httpx exception family, then by any HTTP status they
expose.
"""
from __future__ import annotations

import asyncio
from typing import Dict, Iterable, Optional

import httpx

from .error_code import ErrorCode
from .sdk_error import SdkError


def _codes(code: ErrorCode, *statuses: int) -> Iterable[tuple[int, ErrorCode]]:
    return ((status, code) for status in statuses)


_HTTP_STATUS_MAP: Dict[int, ErrorCode] = dict(
    [
        *_codes(ErrorCode.VALIDATION, 400, 422),
        *_codes(ErrorCode.AUTH, 401, 403),
        *_codes(ErrorCode.NOT_FOUND, 404),
        *_codes(ErrorCode.TIMEOUT, 408, 504),
        *_codes(ErrorCode.CONFLICT, 409),
        *_codes(ErrorCode.RATE_LIMIT, 429),
        *_codes(ErrorCode.SERVER_ERROR, 500),
        *_codes(ErrorCode.TRANSIENT, 502),
        *_codes(ErrorCode.UNAVAILABLE, 503),
    ]
)

_TIMEOUT_TYPES = (httpx.TimeoutException, asyncio.TimeoutError, TimeoutError)


def _as_status(value: object) -> Optional[int]:
    return value if isinstance(value, int) and 100 <= value < 600 else None


def _extract_status(exc: object) -> Optional[int]:
    """Find an HTTP status on ``exc`` (``status_code``, ``status``) or on ``exc.response``."""
    response = getattr(exc, "response", None)
    candidates = (
        getattr(exc, "status_code", None),
        getattr(exc, "status", None),
        getattr(response, "status_code", None) if response is not None else None,
    )
    return next((s for s in map(_as_status, candidates) if s is not None), None)


def classify_status(status: int) -> ErrorCode:
    """Classify a failing HTTP status into an :class:`ErrorCode`."""
    if status in _HTTP_STATUS_MAP:
        return _HTTP_STATUS_MAP[status]
    if 400 <= status < 500:
        return ErrorCode.VALIDATION
    if 500 <= status < 600:
        return ErrorCode.SERVER_ERROR
    return ErrorCode.UNKNOWN


def classify_exception(exc: BaseException) -> ErrorCode:
    """Classify an exception into an :class:`ErrorCode`.

    Order: an :class:`SdkError` keeps its code; timeouts (httpx or asyncio);
    any other ``httpx.TransportError`` is transient; an exposed HTTP status is
    mapped with :func:`classify_status`; everything else is ``UNKNOWN``.
    """
    if isinstance(exc, SdkError):
        return exc.code
    if isinstance(exc, _TIMEOUT_TYPES):
        return ErrorCode.TIMEOUT
    if isinstance(exc, httpx.TransportError):
        return ErrorCode.TRANSIENT
    status = _extract_status(exc)
    return classify_status(status) if status is not None else ErrorCode.UNKNOWN


__all__ = [
    "classify_exception",
    "classify_status",
    "_extract_status",
    "_HTTP_STATUS_MAP",
]
