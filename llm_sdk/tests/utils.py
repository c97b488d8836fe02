"""Shared testing utilities for the SDK test suite.

Exports:
    - assert_true(condition, message): explicit AssertionError helper.
    - ScriptedTransport: ``httpx.MockTransport`` handler that records every
      request it receives and replays a scripted list of outcomes.
    - run(coro): drive a coroutine to completion from a sync test.
"""
from __future__ import annotations

import asyncio
import json
from typing import Any, Awaitable, Callable, List, Sequence, TypeVar, Union

import httpx

T = TypeVar("T")

Outcome = Union[httpx.Response, Exception, Callable[[httpx.Request], httpx.Response]]


def assert_true(condition: bool, message: str) -> None:
    """Raise AssertionError with the provided message if condition is False."""
    if not condition:
        raise AssertionError(message)


def run(coro: Awaitable[T]) -> T:
    return asyncio.run(coro)  # type: ignore[arg-type]


class ScriptedTransport:
    """Replay ``outcomes`` in order; the last one repeats once the script runs out.

    Each outcome is an ``httpx.Response`` to return, an exception to raise, or
    a callable producing a response from the request.
    """

    def __init__(self, outcomes: Sequence[Outcome]) -> None:
        if not outcomes:
            raise ValueError("at least one outcome is required")
        self.outcomes: List[Outcome] = list(outcomes)
        self.requests: List[httpx.Request] = []

    @property
    def calls(self) -> int:
        return len(self.requests)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        request.read()
        self.requests.append(request)
        idx = min(len(self.requests) - 1, len(self.outcomes) - 1)
        outcome = self.outcomes[idx]
        if isinstance(outcome, Exception):
            raise outcome
        if isinstance(outcome, httpx.Response):
            # Fresh copy per send; a response instance is consumed by the client.
            return httpx.Response(outcome.status_code, headers=outcome.headers, content=outcome.content)
        return outcome(request)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


def json_response(status: int, payload: Any) -> httpx.Response:
    return httpx.Response(status, content=json.dumps(payload).encode("utf-8"), headers={"content-type": "application/json"})


def request_json(request: httpx.Request) -> Any:
    return json.loads(request.content.decode("utf-8"))
