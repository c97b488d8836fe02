"""Base class for HTTP middlewares.

A middleware receives the outbound ``httpx.Request`` and a ``call_next``
coroutine function that runs the rest of the chain (ending in the network
send). It may observe or modify the request, call ``call_next`` zero or more
times, and observe or replace the response.

Failure modes:
- Exceptions raised by ``call_next`` propagate unless the middleware handles
  them. Middlewares must not turn a final failure into a success.
"""

from __future__ import annotations

from typing import Awaitable, Callable

import httpx

CallNext = Callable[[httpx.Request], Awaitable[httpx.Response]]


class Middleware:
    """Pass-through middleware; subclasses override :meth:`handle`."""

    async def handle(self, request: httpx.Request, call_next: CallNext) -> httpx.Response:
        """Process ``request`` and return the response produced downstream.

        Parameters:
            request: The transport request about to be sent.
            call_next: Runs the remaining middlewares and the network send.
        """
        return await call_next(request)


__all__ = ["CallNext", "Middleware"]
