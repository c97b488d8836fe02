"""Composable middleware chain around the network send."""
from __future__ import annotations

from typing import Sequence, Tuple

import httpx

from .middleware_base import CallNext, Middleware


class MiddlewareChain:
    """Ordered, immutable chain of middlewares.

    ``items[0]`` is outermost: it sees the request first and the final
    response last. The terminal link is ``send``.
    """

    __slots__ = ("_items", "_send")

    def __init__(self, items: Sequence[Middleware], send: CallNext) -> None:
        self._items: Tuple[Middleware, ...] = tuple(items)
        self._send = send

    @property
    def items(self) -> Tuple[Middleware, ...]:
        return self._items

    async def run(self, request: httpx.Request) -> httpx.Response:
        return await self._call(0, request)

    async def _call(self, index: int, request: httpx.Request) -> httpx.Response:
        if index == len(self._items):
            return await self._send(request)

        async def call_next(req: httpx.Request) -> httpx.Response:
            return await self._call(index + 1, req)

        return await self._items[index].handle(request, call_next)


__all__ = ["MiddlewareChain"]
