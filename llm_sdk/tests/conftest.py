"""Pytest configuration for the SDK test suite.

Every test builds its own client around a scripted ``httpx.MockTransport``;
there is no shared client instance and no network access.
"""

from __future__ import annotations

from typing import Callable, Iterator, Sequence

import pytest

from llm_sdk import LlmSdk
from llm_sdk.base.resilience import RetryConfig
from llm_sdk.tests.utils import Outcome, ScriptedTransport

TEST_BASE_URL = "https://api.test.local/v1"
TEST_TOKEN = "sk-test"  # pragma: allowlist secret - fake token for tests


@pytest.fixture()
def fast_retry() -> RetryConfig:
    """Retry policy with two retries and no backoff delay."""
    return RetryConfig(max_retries=2, base_delay=0.0, jitter=False)


@pytest.fixture()
def make_sdk(fast_retry: RetryConfig) -> Iterator[Callable[..., tuple[LlmSdk, ScriptedTransport]]]:
    """Factory yielding ``(sdk, script)`` pairs bound to a scripted transport."""

    def _make(outcomes: Sequence[Outcome], *, token: str = TEST_TOKEN, **kwargs) -> tuple[LlmSdk, ScriptedTransport]:
        script = ScriptedTransport(outcomes)
        kwargs.setdefault("retry_config", fast_retry)
        sdk = LlmSdk(token, base_url=TEST_BASE_URL, transport=script.transport(), **kwargs)
        return sdk, script

    yield _make


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep real credentials and config files out of the tests."""
    for var in ("OPENAI_API_KEY", "LLM_SDK_BASE_URL", "LLM_SDK_MAX_RETRIES", "LLM_SDK_TIMEOUT_SECONDS", "LLM_SDK_CONFIG_FILE"):
        monkeypatch.delenv(var, raising=False)
