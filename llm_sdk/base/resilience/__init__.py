"""Resilience policies (retry) for the transport layer."""

from .retry import DEFAULT_RETRY_CONFIG, DEFAULT_RETRYABLE_STATUSES, RetryConfig, is_transient_error

__all__ = ["DEFAULT_RETRY_CONFIG", "DEFAULT_RETRYABLE_STATUSES", "RetryConfig", "is_transient_error"]
