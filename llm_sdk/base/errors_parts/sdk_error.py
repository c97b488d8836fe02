"""
Structured SDK error exception type.

Every failure that reaches a caller of :class:`llm_sdk.LlmSdk` after a request
was dispatched is an :class:`SdkError`. HTTP failures carry the status and the
raw response text; transport failures carry the original exception in ``raw``.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .error_code import ErrorCode


@dataclass
class SdkError(Exception):
    """Represents a classified failure of one logical API call.

    Attributes:
        code: Normalized :class:`ErrorCode` classification for the failure.
        message: Human-readable error message suitable for logging.
        operation: SDK operation that failed (e.g. ``"embedding"``).
        status: HTTP status of the final response, when one was received.
        body: Raw response text for HTTP failures. Never parsed.
        retryable: Hint for callers; retries already happened inside the client.
        raw: Optional original exception for diagnostics.
    """

    code: ErrorCode
    message: str
    operation: str
    status: Optional[int] = None
    body: Optional[str] = None
    retryable: bool = False
    raw: Optional[BaseException] = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        status = self.status if self.status is not None else "-"
        return f"{self.operation}:{status} {self.code.value}: {self.message}"


__all__ = ["SdkError"]
