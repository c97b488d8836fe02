"""SDK facade: one async method per API capability.

Every operation follows the same pipeline:

1. ``descriptor.into_request(base_url, client)`` builds the ``httpx.Request``.
2. :meth:`LlmSdk.prepare_request` attaches ``Authorization: Bearer <token>``
   (skipped for an empty token). Each attempt already carries the call
   timeout as its httpx timeout.
3. The request runs through the transport client's middleware chain
   (tracing, then content-type gated retry, then the network), bounded as a
   whole by the same timeout.
4. Status 400-599 raises :class:`SdkError` carrying the status and raw body
   text; anything else is decoded into the operation's result type.

Decoding is per operation: JSON into a response model for most endpoints,
raw bytes for speech, and for whisper a branch on the *request's*
``response_format`` (JSON only for ``json``; verbatim text otherwise).
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, Optional, Type, TypeVar

import httpx
from opentelemetry import trace
from pydantic import ValidationError

from .base.dto import (
    ChatCompletionRequest,
    ChatCompletionResponse,
    CreateImageRequest,
    CreateImageResponse,
    EmbeddingRequest,
    EmbeddingResponse,
    SpeechRequest,
    WhisperRequest,
    WhisperResponse,
)
from .base.errors import ErrorCode, SdkError, classify_exception, classify_status
from .base.http import TransportClient
from .base.logging import LogContext, get_logger, log_event
from .base.request import IntoRequest, ResponseModel
from .base.resilience import RetryConfig
from .base.timeouts import get_timeout_config
from .config import get_sdk_config
from .config.defaults import DEFAULT_BASE_URL, DEFAULT_MAX_RETRIES

R = TypeVar("R", bound=ResponseModel)


class LlmSdk:
    """Typed client for the chat, image, speech, whisper and embedding endpoints.

    Parameters:
        token: API key sent as a bearer credential. ``""`` sends no auth header.
        base_url: API root; endpoint paths are appended to it.
        max_retries: Retry budget for transient failures (JSON requests only).
        retry_config: Full retry policy; overrides ``max_retries`` when given.
        timeout: Seconds allowed for one whole call, retries included.
            Defaults to ``LLM_SDK_TIMEOUT_SECONDS`` or 30 seconds.
        transport: Optional ``httpx`` transport, mainly for tests.
        tracer: Optional OpenTelemetry tracer.

    Instances are safe to share across concurrent tasks. Close with
    :meth:`aclose` or use ``async with``.
    """

    def __init__(
        self,
        token: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        max_retries: int = DEFAULT_MAX_RETRIES,
        timeout: Optional[float] = None,
        retry_config: Optional[RetryConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        tracer: Optional[trace.Tracer] = None,
    ) -> None:
        if timeout is None:
            timeout = get_timeout_config().request_timeout_seconds
        if timeout <= 0:
            raise ValueError("timeout must be positive")
        self._timeout = float(timeout)
        self._client = TransportClient(
            base_url,
            token,
            max_retries,
            retry_config=retry_config,
            transport=transport,
            tracer=tracer,
            timeout=self._timeout,
        )
        self._logger = get_logger("llm_sdk.client")

    @classmethod
    def from_config(cls, overrides: Optional[Dict[str, Any]] = None, **kwargs: Any) -> "LlmSdk":
        """Build a client from :func:`llm_sdk.config.get_sdk_config`.

        ``kwargs`` (``retry_config``, ``transport``, ``tracer``) are passed through unchanged.
        """
        cfg = get_sdk_config(overrides)
        return cls(
            cfg["token"],
            base_url=cfg["base_url"],
            max_retries=cfg["max_retries"],
            timeout=cfg["timeout"],
            **kwargs,
        )

    @property
    def base_url(self) -> str:
        return self._client.base_url

    @property
    def timeout(self) -> float:
        return self._timeout

    @property
    def transport_client(self) -> TransportClient:
        return self._client

    # ----- Operations -----

    async def chat_completion(self, req: ChatCompletionRequest) -> ChatCompletionResponse:
        res = await self._dispatch("chat_completion", req, model=req.model)
        return self._decode_json("chat_completion", res, ChatCompletionResponse)

    async def create_image(self, req: CreateImageRequest) -> CreateImageResponse:
        res = await self._dispatch("create_image", req, model=req.model.value)
        return self._decode_json("create_image", res, CreateImageResponse)

    async def speech(self, req: SpeechRequest) -> bytes:
        res = await self._dispatch("speech", req, model=req.model.value)
        return res.content

    async def whisper(self, req: WhisperRequest) -> WhisperResponse:
        operation = f"whisper.{req.request_type.value}"
        res = await self._dispatch(operation, req, model=req.model.value)
        if req.expects_json:
            return self._decode_json(operation, res, WhisperResponse)
        return WhisperResponse(text=res.text)

    async def embedding(self, req: EmbeddingRequest) -> EmbeddingResponse:
        res = await self._dispatch("embedding", req, model=req.model.value)
        return self._decode_json("embedding", res, EmbeddingResponse)

    # ----- Pipeline -----

    def prepare_request(self, req: IntoRequest) -> httpx.Request:
        """Build the transport request for ``req`` with auth attached.

        The per-attempt timeout comes from the transport client, which was
        built with this client's call timeout.
        """
        request = req.into_request(self._client.base_url, self._client.http)
        token = self._client.token
        if token:
            request.headers["Authorization"] = f"Bearer {token}"
        return request

    async def _dispatch(self, operation: str, req: IntoRequest, *, model: Optional[str] = None) -> httpx.Response:
        ctx = LogContext(operation=operation, model=model)
        request = self.prepare_request(req)
        try:
            response = await asyncio.wait_for(self._client.send(request), timeout=self._timeout)
        except asyncio.TimeoutError as exc:
            log_event(self._logger, "http.timeout", ctx, level=logging.ERROR, timeout=self._timeout)
            raise SdkError(
                code=ErrorCode.TIMEOUT,
                message=f"request exceeded {self._timeout}s",
                operation=operation,
                retryable=True,
                raw=exc,
            ) from exc
        except httpx.HTTPError as exc:
            code = classify_exception(exc)
            log_event(self._logger, "http.transport_error", ctx, level=logging.ERROR, error_code=code.value, error=str(exc))
            raise SdkError(
                code=code,
                message=str(exc) or type(exc).__name__,
                operation=operation,
                retryable=code in (ErrorCode.TIMEOUT, ErrorCode.TRANSIENT),
                raw=exc,
            ) from exc
        return self._classify(operation, ctx, response)

    def _classify(self, operation: str, ctx: LogContext, response: httpx.Response) -> httpx.Response:
        status = response.status_code
        if 400 <= status < 600:
            body = response.text
            code = classify_status(status)
            log_event(self._logger, "http.error", ctx, level=logging.ERROR, status=status, error_code=code.value, body=body)
            raise SdkError(
                code=code,
                message=body,
                operation=operation,
                status=status,
                body=body,
                retryable=status == 429 or status >= 500,
            )
        return response

    def _decode_json(self, operation: str, response: httpx.Response, model: Type[R]) -> R:
        try:
            return model.model_validate_json(response.content)
        except ValidationError as exc:
            log_event(
                self._logger,
                "http.decode_error",
                LogContext(operation=operation),
                level=logging.ERROR,
                status=response.status_code,
                error=str(exc),
            )
            raise SdkError(
                code=ErrorCode.DECODE,
                message=f"cannot decode {model.__name__}: {exc.error_count()} error(s)",
                operation=operation,
                status=response.status_code,
                body=response.text,
                raw=exc,
            ) from exc

    # ----- Lifecycle -----

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "LlmSdk":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"LlmSdk(base_url={self.base_url!r}, timeout={self._timeout})"


__all__ = ["LlmSdk"]
