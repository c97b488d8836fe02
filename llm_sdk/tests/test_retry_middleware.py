"""Content-type gated retry over the generic transient retry policy."""
from __future__ import annotations

from typing import List

import httpx
import pytest

from llm_sdk.base.middleware import RetryMiddleware, TransientRetryMiddleware, is_retry_exempt
from llm_sdk.base.resilience import RetryConfig
from llm_sdk.tests.utils import assert_true, run

URL = "https://api.test.local/v1/x"


class _Downstream:
    """Fake ``call_next`` returning scripted statuses or raising exceptions."""

    def __init__(self, outcomes: List[object]) -> None:
        self.outcomes = outcomes
        self.calls = 0

    async def __call__(self, request: httpx.Request) -> httpx.Response:
        outcome = self.outcomes[min(self.calls, len(self.outcomes) - 1)]
        self.calls += 1
        if isinstance(outcome, Exception):
            raise outcome
        return httpx.Response(outcome, request=request)


class _Sleeps:
    def __init__(self) -> None:
        self.delays: List[float] = []

    async def __call__(self, delay: float) -> None:
        self.delays.append(delay)


def _middleware(max_retries: int = 3, sleeps: _Sleeps | None = None, **cfg) -> RetryMiddleware:
    config = RetryConfig(max_retries=max_retries, base_delay=1.0, jitter=False, **cfg)
    return RetryMiddleware(TransientRetryMiddleware(config, sleep=sleeps or _Sleeps()))


def _request(content_type: str | None) -> httpx.Request:
    headers = {"content-type": content_type} if content_type is not None else {}
    return httpx.Request("POST", URL, headers=headers, content=b"{}")


@pytest.mark.parametrize(
    "content_type",
    [
        "multipart/form-data; boundary=abc",
        "multipart/form-data",
        "application/octet-stream",
    ],
)
@pytest.mark.parametrize("outcome", [500, 503, 429, 400, 200, httpx.ConnectError("down")])
def test_exempt_requests_are_sent_at_most_once(content_type, outcome):
    down = _Downstream([outcome])
    mw = _middleware()
    req = _request(content_type)
    if isinstance(outcome, Exception):
        with pytest.raises(httpx.ConnectError):
            run(mw.handle(req, down))
    else:
        res = run(mw.handle(req, down))
        assert res.status_code == outcome  # nosec B101 - asserts are appropriate in unit tests
    assert_true(down.calls == 1, f"expected a single send for {content_type}, got {down.calls}")


@pytest.mark.parametrize(
    "content_type, exempt",
    [
        ("application/json", False),
        (None, False),
        ("text/plain", False),
        ("application/octet-stream; charset=binary", False),
        ("application/octet-stream", True),
        ("multipart/form-data; boundary=x", True),
    ],
)
def test_is_retry_exempt(content_type, exempt):
    assert is_retry_exempt(_request(content_type)) is exempt  # nosec B101


@pytest.mark.parametrize("content_type", ["application/json", None])
def test_retry_budget_caps_total_attempts(content_type):
    sleeps = _Sleeps()
    down = _Downstream([503])
    res = run(_middleware(max_retries=3, sleeps=sleeps).handle(_request(content_type), down))
    assert res.status_code == 503  # nosec B101
    assert_true(down.calls == 4, f"expected N+1=4 sends, got {down.calls}")
    assert sleeps.delays == [1.0, 2.0, 4.0]  # nosec B101


def test_retry_recovers_after_transient_statuses():
    down = _Downstream([500, 429, 200])
    res = run(_middleware(max_retries=5).handle(_request("application/json"), down))
    assert res.status_code == 200  # nosec B101
    assert down.calls == 3  # nosec B101


@pytest.mark.parametrize("status", [400, 401, 404, 408, 422])
def test_non_retryable_client_errors_stop_immediately(status):
    down = _Downstream([status, 200])
    res = run(_middleware().handle(_request("application/json"), down))
    assert res.status_code == status  # nosec B101
    assert down.calls == 1  # nosec B101


def test_success_stops_immediately():
    down = _Downstream([200, 500])
    run(_middleware().handle(_request("application/json"), down))
    assert down.calls == 1  # nosec B101


@pytest.mark.parametrize(
    "exc",
    [
        httpx.ConnectError("refused"),
        httpx.ReadTimeout("slow"),
        httpx.RemoteProtocolError("garbled"),
    ],
)
def test_transient_network_errors_are_retried(exc):
    down = _Downstream([exc, exc, 200])
    res = run(_middleware().handle(_request("application/json"), down))
    assert res.status_code == 200  # nosec B101
    assert down.calls == 3  # nosec B101


def test_network_error_reraised_after_budget():
    down = _Downstream([httpx.ConnectError("refused")])
    with pytest.raises(httpx.ConnectError):
        run(_middleware(max_retries=2).handle(_request("application/json"), down))
    assert down.calls == 3  # nosec B101


def test_non_transient_transport_error_is_not_retried():
    down = _Downstream([httpx.UnsupportedProtocol("ftp"), 200])
    with pytest.raises(httpx.UnsupportedProtocol):
        run(_middleware().handle(_request("application/json"), down))
    assert down.calls == 1  # nosec B101


def test_zero_retries_sends_once():
    down = _Downstream([502])
    res = run(_middleware(max_retries=0).handle(_request("application/json"), down))
    assert res.status_code == 502  # nosec B101
    assert down.calls == 1  # nosec B101


def test_attempt_logger_reports_every_attempt():
    log: list[dict] = []

    def attempt_logger(**kw):
        log.append(kw)

    down = _Downstream([500, 200])
    mw = _middleware(max_retries=2, attempt_logger=attempt_logger)
    run(mw.handle(_request("application/json"), down))
    assert [e["attempt"] for e in log] == [0, 1]  # nosec B101
    assert log[0]["status"] == 500 and log[0]["delay"] == 1.0  # nosec B101
    assert log[-1]["delay"] is None and log[-1]["status"] == 200  # nosec B101
