"""Errors parts package public surface.

Prefer importing from `llm_sdk.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .sdk_error import SdkError
from .classification import classify_exception, classify_status

__all__ = ["ErrorCode", "SdkError", "classify_exception", "classify_status"]
