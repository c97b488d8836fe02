"""Speech-to-text (transcription and translation) request descriptor.

Endpoints: ``POST {base_url}/audio/transcriptions`` or
``POST {base_url}/audio/translations``, both ``multipart/form-data``.

Form layout:
    - ``file``: the audio bytes (file name ``file``, MIME ``audio/mp3``)
    - ``model`` and ``response_format``: always present
    - ``language``: transcription only, when set (translation output is English)
    - ``prompt`` and ``temperature``: when set

The response is JSON (``{"text": ...}``) only for ``response_format=json``.
Every other format comes back as plain text and is wrapped verbatim by the
dispatcher without parsing.
"""

from __future__ import annotations

from enum import Enum
from typing import ClassVar, Dict, Optional, Tuple

from pydantic import Field

from ...config.defaults import WHISPER_DEFAULT_MODEL
from ..request import BodyKind, RequestModel, ResponseModel

AUDIO_FILE_NAME = "file"
AUDIO_MIME_TYPE = "audio/mp3"


class WhisperModel(str, Enum):
    WHISPER_1 = WHISPER_DEFAULT_MODEL


class WhisperResponseFormat(str, Enum):
    JSON = "json"
    TEXT = "text"
    SRT = "srt"
    VERBOSE_JSON = "verbose_json"
    VTT = "vtt"


class WhisperRequestType(str, Enum):
    TRANSCRIPTION = "transcription"
    TRANSLATION = "translation"


_PATHS: Dict[WhisperRequestType, str] = {
    WhisperRequestType.TRANSCRIPTION: "audio/transcriptions",
    WhisperRequestType.TRANSLATION: "audio/translations",
}


class WhisperRequest(RequestModel):
    """Transcription or translation request for an in-memory audio file."""

    BODY_KIND: ClassVar[BodyKind] = BodyKind.MULTIPART

    file: bytes = Field(..., min_length=1, repr=False)
    model: WhisperModel = WhisperModel.WHISPER_1
    language: Optional[str] = None
    prompt: Optional[str] = None
    response_format: WhisperResponseFormat = WhisperResponseFormat.JSON
    temperature: Optional[float] = Field(default=None, ge=0.0, le=1.0)
    request_type: WhisperRequestType = WhisperRequestType.TRANSCRIPTION

    @classmethod
    def transcription(cls, data: bytes) -> "WhisperRequest":
        return cls(file=data, request_type=WhisperRequestType.TRANSCRIPTION)

    @classmethod
    def translation(cls, data: bytes) -> "WhisperRequest":
        return cls(file=data, request_type=WhisperRequestType.TRANSLATION)

    @property
    def path(self) -> str:
        return _PATHS[self.request_type]

    @property
    def expects_json(self) -> bool:
        """True when the response body should be decoded as JSON."""
        return self.response_format is WhisperResponseFormat.JSON

    def into_form(self) -> Tuple[Dict[str, Tuple[str, bytes, str]], Dict[str, str]]:
        """Return ``(files, fields)`` for the multipart body."""
        files = {"file": (AUDIO_FILE_NAME, self.file, AUDIO_MIME_TYPE)}
        fields = {
            "model": self.model.value,
            "response_format": self.response_format.value,
        }
        if self.request_type is WhisperRequestType.TRANSCRIPTION and self.language is not None:
            fields["language"] = self.language
        if self.prompt is not None:
            fields["prompt"] = self.prompt
        if self.temperature is not None:
            fields["temperature"] = str(self.temperature)
        return files, fields


class WhisperResponse(ResponseModel):
    text: str


__all__ = [
    "WhisperModel",
    "WhisperResponseFormat",
    "WhisperRequestType",
    "WhisperRequest",
    "WhisperResponse",
]
