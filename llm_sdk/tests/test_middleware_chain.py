"""Tests for middleware chain ordering and the transport client's fixed stack."""

from __future__ import annotations

import asyncio
from contextlib import contextmanager
from typing import Any, Dict, List

import httpx
import pytest
from opentelemetry.trace import StatusCode

from llm_sdk import EmbeddingRequest, ErrorCode, LlmSdk, SdkError
from llm_sdk.base.http import TransportClient
from llm_sdk.base.middleware import (
    Middleware,
    MiddlewareChain,
    RetryMiddleware,
    TracingMiddleware,
)
from llm_sdk.base.resilience import RetryConfig
from llm_sdk.config.defaults import REQUEST_TIMEOUT_SECONDS
from llm_sdk.tests.utils import ScriptedTransport, assert_true, run

BASE = "https://api.test.local/v1"


class _Recorder(Middleware):
    def __init__(self, name: str, log: List[str]):
        self.name = name
        self.log = log

    async def handle(self, request, call_next):
        self.log.append(f"{self.name}:before")
        response = await call_next(request)
        self.log.append(f"{self.name}:after")
        return response


class _FakeSpan:
    def __init__(self, name: str) -> None:
        self.name = name
        self.attributes: Dict[str, Any] = {}
        self.exceptions: List[BaseException] = []
        self.status: Any = None

    def set_attribute(self, key: str, value: Any) -> None:
        self.attributes[key] = value

    def record_exception(self, exc: BaseException) -> None:
        self.exceptions.append(exc)

    def set_status(self, status: Any) -> None:
        self.status = status


class _FakeTracer:
    def __init__(self) -> None:
        self.spans: List[_FakeSpan] = []

    @contextmanager
    def start_as_current_span(self, name: str, **_: Any):
        span = _FakeSpan(name)
        self.spans.append(span)
        yield span


def test_chain_runs_outermost_first_and_unwinds_in_reverse():
    log: List[str] = []

    async def send(request: httpx.Request) -> httpx.Response:
        log.append("send")
        return httpx.Response(200, request=request)

    chain = MiddlewareChain([_Recorder("a", log), _Recorder("b", log)], send)
    run(chain.run(httpx.Request("POST", f"{BASE}/x")))
    assert_true(log == ["a:before", "b:before", "send", "b:after", "a:after"], f"ordering was {log}")


def test_empty_chain_sends_directly():
    async def send(request: httpx.Request) -> httpx.Response:
        return httpx.Response(204, request=request)

    res = run(MiddlewareChain([], send).run(httpx.Request("POST", f"{BASE}/x")))
    assert res.status_code == 204  # nosec B101 - asserts are appropriate in unit tests


def test_transport_client_stack_is_tracing_then_retry():
    client = TransportClient(BASE, "", 3)
    try:
        kinds = [type(m) for m in client.middlewares]
        assert_true(kinds == [TracingMiddleware, RetryMiddleware], f"unexpected stack {kinds}")
        assert client.retry_config.max_retries == 3  # nosec B101
        assert client.base_url == BASE  # nosec B101
    finally:
        run(client.aclose())


def test_chain_is_not_mutable():
    client = TransportClient(BASE, "", 1)
    try:
        with pytest.raises(AttributeError):
            client.middlewares.append(Middleware())  # type: ignore[attr-defined]
    finally:
        run(client.aclose())


def _send_json(client: TransportClient) -> httpx.Response:
    async def go() -> httpx.Response:
        request = client.build_request("POST", "embeddings", json={"input": "x"})
        try:
            return await client.send(request)
        finally:
            await client.aclose()

    return run(go())


def test_one_span_per_logical_call_with_final_outcome():
    tracer = _FakeTracer()
    script = ScriptedTransport([httpx.Response(503), httpx.Response(502), httpx.Response(200)])
    client = TransportClient(
        BASE,
        "",
        3,
        retry_config=RetryConfig(max_retries=3, base_delay=0.0, jitter=False),
        transport=script.transport(),
        tracer=tracer,
    )
    res = _send_json(client)
    assert res.status_code == 200  # nosec B101
    assert script.calls == 3  # nosec B101
    assert_true(len(tracer.spans) == 1, f"expected one span, got {len(tracer.spans)}")
    span = tracer.spans[0]
    assert span.name == "llm_sdk.http /v1/embeddings"  # nosec B101
    assert span.attributes["http.response.status_code"] == 200  # nosec B101
    assert span.attributes["http.request.method"] == "POST"  # nosec B101
    assert span.status is None  # nosec B101


def test_span_records_exception_after_retries_exhausted():
    tracer = _FakeTracer()
    script = ScriptedTransport([httpx.ConnectError("refused")])
    client = TransportClient(
        BASE,
        "",
        2,
        retry_config=RetryConfig(max_retries=2, base_delay=0.0, jitter=False),
        transport=script.transport(),
        tracer=tracer,
    )
    with pytest.raises(httpx.ConnectError):
        _send_json(client)
    assert script.calls == 3  # nosec B101
    assert len(tracer.spans) == 1  # nosec B101
    assert len(tracer.spans[0].exceptions) == 1  # nosec B101
    assert tracer.spans[0].status is not None  # nosec B101


def test_span_marks_http_failures():
    tracer = _FakeTracer()
    script = ScriptedTransport([httpx.Response(404)])
    client = TransportClient(BASE, "", 0, transport=script.transport(), tracer=tracer)
    res = _send_json(client)
    assert res.status_code == 404  # nosec B101
    assert tracer.spans[0].attributes["http.response.status_code"] == 404  # nosec B101
    assert tracer.spans[0].status is not None  # nosec B101


def test_span_marks_call_timeout_as_error():
    tracer = _FakeTracer()

    async def slow(request: httpx.Request) -> httpx.Response:
        await asyncio.sleep(1.0)
        return httpx.Response(200)

    script = ScriptedTransport([slow])
    sdk = LlmSdk("", base_url=BASE, timeout=0.1, transport=script.transport(), tracer=tracer)

    async def go():
        try:
            return await sdk.embedding(EmbeddingRequest.new("x"))
        finally:
            await sdk.aclose()

    with pytest.raises(SdkError) as ei:
        run(go())
    assert ei.value.code is ErrorCode.TIMEOUT  # nosec B101
    assert len(tracer.spans) == 1  # nosec B101
    span = tracer.spans[0]
    assert_true(span.status is not None, "a timed-out call must leave an error status on its span")
    assert span.status.status_code is StatusCode.ERROR  # nosec B101
    assert len(span.exceptions) == 1  # nosec B101
    assert isinstance(span.exceptions[0], asyncio.CancelledError)  # nosec B101


@pytest.mark.parametrize("kwargs, expected", [({}, REQUEST_TIMEOUT_SECONDS), ({"timeout": 7.5}, 7.5)])
def test_transport_client_requests_carry_its_timeout(kwargs, expected):
    client = TransportClient(BASE, "", 0, **kwargs)
    try:
        request = client.build_request("POST", "embeddings", json={})
        assert request.extensions["timeout"] == httpx.Timeout(expected).as_dict()  # nosec B101
    finally:
        run(client.aclose())
