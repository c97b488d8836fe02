"""Embedding request descriptor and response shape.

Endpoint: ``POST {base_url}/embeddings`` with a JSON body.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, ClassVar, List, Optional, Union

from pydantic import Field

from ...config.defaults import EMBEDDING_DEFAULT_MODEL
from ..request import BodyKind, RequestModel, ResponseModel


class EmbeddingModel(str, Enum):
    TEXT_EMBEDDING_ADA_002 = EMBEDDING_DEFAULT_MODEL


class EmbeddingEncodingFormat(str, Enum):
    FLOAT = "float"
    BASE64 = "base64"


# Arrays of token ids are not supported.
EmbeddingInput = Union[
    Annotated[str, Field(min_length=1)],
    Annotated[List[Annotated[str, Field(min_length=1)]], Field(min_length=1, max_length=2048)],
]


class EmbeddingRequest(RequestModel):
    """Embedding request.

    Attributes:
        input: Text to embed, or a list of texts to embed in one call. Empty
            strings and empty lists are rejected.
        model: Embedding model.
        encoding_format: ``float`` or ``base64``; omitted when unset.
        user: End-user identifier for upstream abuse monitoring.
    """

    PATH: ClassVar[str] = "embeddings"
    BODY_KIND: ClassVar[BodyKind] = BodyKind.JSON

    input: EmbeddingInput
    model: EmbeddingModel = EmbeddingModel.TEXT_EMBEDDING_ADA_002
    encoding_format: Optional[EmbeddingEncodingFormat] = None
    user: Optional[str] = None

    @classmethod
    def new(cls, input: EmbeddingInput) -> "EmbeddingRequest":  # noqa: A002 - mirrors the wire field
        return cls(input=input)


class EmbeddingUsage(ResponseModel):
    prompt_tokens: int
    total_tokens: int


class EmbeddingData(ResponseModel):
    index: int
    # Floats, or a base64 string when ``encoding_format="base64"``.
    embedding: Union[List[float], str]
    object: str = "embedding"


class EmbeddingResponse(ResponseModel):
    object: str
    data: List[EmbeddingData]
    model: str
    usage: EmbeddingUsage


__all__ = [
    "EmbeddingModel",
    "EmbeddingEncodingFormat",
    "EmbeddingInput",
    "EmbeddingRequest",
    "EmbeddingUsage",
    "EmbeddingData",
    "EmbeddingResponse",
]
