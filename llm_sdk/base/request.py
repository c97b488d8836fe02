"""Request descriptor contract.

A descriptor is a validated, immutable value describing one outbound call.
It knows its endpoint path and body encoding and turns itself into an
``httpx.Request`` through :meth:`IntoRequest.into_request`. Building is a pure
transform: all validation already happened when the descriptor was
constructed. Retries reuse the built request, never the descriptor.
"""
from __future__ import annotations

from enum import Enum
from typing import Any, ClassVar, Dict, Protocol, Tuple, runtime_checkable

import httpx
from pydantic import BaseModel, ConfigDict

HTTP_METHOD = "POST"


class BodyKind(str, Enum):
    """Body encoding of a descriptor."""

    JSON = "json"
    MULTIPART = "multipart"


@runtime_checkable
class IntoRequest(Protocol):
    """Anything that can build a transport request against a base URL."""

    def into_request(self, base_url: str, client: httpx.AsyncClient) -> httpx.Request: ...


def join_url(base_url: str, path: str) -> str:
    """Join ``base_url`` and a relative endpoint ``path`` with exactly one slash."""
    return f"{base_url.rstrip('/')}/{path.lstrip('/')}"


class RequestModel(BaseModel):
    """Frozen pydantic base shared by request descriptors.

    Unknown fields are rejected so typos fail at construction time. A
    descriptor sets ``PATH`` (or overrides :attr:`path`) and ``BODY_KIND``;
    multipart descriptors also implement :meth:`into_form`.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", use_enum_values=False)

    PATH: ClassVar[str] = ""
    BODY_KIND: ClassVar[BodyKind] = BodyKind.JSON

    @property
    def path(self) -> str:
        return self.PATH

    def to_payload(self) -> Dict[str, Any]:
        """Return the JSON body; optional fields left unset are omitted."""
        return self.model_dump(mode="json", exclude_none=True)

    def into_form(self) -> Tuple[Dict[str, Any], Dict[str, str]]:
        """Return ``(files, fields)`` for a multipart body."""
        raise NotImplementedError(f"{type(self).__name__} has no multipart form")

    def into_request(self, base_url: str, client: httpx.AsyncClient) -> httpx.Request:
        url = join_url(base_url, self.path)
        if self.BODY_KIND is BodyKind.MULTIPART:
            files, fields = self.into_form()
            return build_multipart_request(client, url, files=files, fields=fields)
        return build_json_request(client, url, self.to_payload())


class ResponseModel(BaseModel):
    """Lenient base for decoded responses; unknown fields are ignored."""

    model_config = ConfigDict(extra="ignore")


def build_json_request(client: httpx.AsyncClient, url: str, payload: Dict[str, Any]) -> httpx.Request:
    return client.build_request(HTTP_METHOD, url, json=payload)


def build_multipart_request(
    client: httpx.AsyncClient,
    url: str,
    *,
    files: Dict[str, Any],
    fields: Dict[str, str],
) -> httpx.Request:
    return client.build_request(HTTP_METHOD, url, files=files, data=fields)


__all__ = [
    "HTTP_METHOD",
    "BodyKind",
    "IntoRequest",
    "RequestModel",
    "ResponseModel",
    "join_url",
    "build_json_request",
    "build_multipart_request",
]
