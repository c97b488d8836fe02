"""
SDK base package.

Provider-agnostic building blocks of the request dispatch pipeline:
- Request descriptor contract and endpoint DTOs
- Transport client and its middleware chain (tracing, retry)
- Error taxonomy, structured logging, timeouts
"""

from .errors import ErrorCode, SdkError, classify_exception, classify_status
from .http import TransportClient
from .request import BodyKind, IntoRequest, join_url
from .resilience import RetryConfig
from .timeouts import TimeoutConfig, get_timeout_config

__all__ = [
    # Errors
    "ErrorCode",
    "SdkError",
    "classify_exception",
    "classify_status",
    # Transport
    "TransportClient",
    "RetryConfig",
    # Requests
    "BodyKind",
    "IntoRequest",
    "join_url",
    # Timeouts
    "TimeoutConfig",
    "get_timeout_config",
]
