"""Unified SDK error taxonomy public surface.

Re-exports the one-class-per-file implementations under
``llm_sdk.base.errors_parts`` so callers keep a single stable import path.
"""

from .errors_parts.error_code import ErrorCode
from .errors_parts.sdk_error import SdkError
from .errors_parts.classification import classify_exception, classify_status

__all__ = ["ErrorCode", "SdkError", "classify_exception", "classify_status"]
