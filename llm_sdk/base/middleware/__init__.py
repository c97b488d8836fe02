"""HTTP middleware chain and the middlewares installed by the transport client."""

from .middleware_base import CallNext, Middleware
from .chain import MiddlewareChain
from .transient_retry import TransientRetryMiddleware
from .retry_middleware import RetryMiddleware, is_retry_exempt
from .tracing_middleware import TracingMiddleware

__all__ = [
    "CallNext",
    "Middleware",
    "MiddlewareChain",
    "TransientRetryMiddleware",
    "RetryMiddleware",
    "is_retry_exempt",
    "TracingMiddleware",
]
