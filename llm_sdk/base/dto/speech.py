"""Text-to-speech request descriptor.

Endpoint: ``POST {base_url}/audio/speech`` with a JSON body. The response is
raw audio in the requested format, not JSON, so there is no response model.
"""

from __future__ import annotations

from enum import Enum
from typing import ClassVar, Optional

from pydantic import Field

from ...config.defaults import SPEECH_DEFAULT_MODEL
from ..request import BodyKind, RequestModel


class SpeechModel(str, Enum):
    TTS_1 = SPEECH_DEFAULT_MODEL
    TTS_1_HD = "tts-1-hd"


class SpeechVoice(str, Enum):
    ALLOY = "alloy"
    ECHO = "echo"
    FABLE = "fable"
    ONYX = "onyx"
    NOVA = "nova"
    SHIMMER = "shimmer"


class SpeechResponseFormat(str, Enum):
    MP3 = "mp3"
    OPUS = "opus"
    AAC = "aac"
    FLAC = "flac"


class SpeechRequest(RequestModel):
    """Speech synthesis request.

    ``model``, ``voice`` and ``response_format`` are always sent; ``speed``
    only when set (0.25 to 4.0).
    """

    PATH: ClassVar[str] = "audio/speech"
    BODY_KIND: ClassVar[BodyKind] = BodyKind.JSON

    model: SpeechModel = SpeechModel.TTS_1
    input: str = Field(..., min_length=1, max_length=4096)
    voice: SpeechVoice = SpeechVoice.NOVA
    response_format: SpeechResponseFormat = SpeechResponseFormat.MP3
    speed: Optional[float] = Field(default=None, ge=0.25, le=4.0)

    @classmethod
    def new(cls, input: str) -> "SpeechRequest":  # noqa: A002 - mirrors the wire field
        return cls(input=input)


__all__ = ["SpeechModel", "SpeechVoice", "SpeechResponseFormat", "SpeechRequest"]
