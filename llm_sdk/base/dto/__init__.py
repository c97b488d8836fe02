"""Endpoint request descriptors and response shapes."""

from .chat import (
    AssistantMessage,
    ChatChoice,
    ChatCompletionRequest,
    ChatCompletionResponse,
    ChatMessage,
    ChatResponseFormat,
    ChatResponseFormatType,
    ChatUsage,
    FunctionCall,
    FunctionSpec,
    ToolCall,
    ToolSpec,
)
from .embedding import (
    EmbeddingData,
    EmbeddingEncodingFormat,
    EmbeddingModel,
    EmbeddingRequest,
    EmbeddingResponse,
    EmbeddingUsage,
)
from .image import (
    CreateImageRequest,
    CreateImageResponse,
    ImageModel,
    ImageObject,
    ImageQuality,
    ImageResponseFormat,
    ImageSize,
    ImageStyle,
)
from .speech import SpeechModel, SpeechRequest, SpeechResponseFormat, SpeechVoice
from .whisper import (
    WhisperModel,
    WhisperRequest,
    WhisperRequestType,
    WhisperResponse,
    WhisperResponseFormat,
)

__all__ = [
    "AssistantMessage",
    "ChatChoice",
    "ChatCompletionRequest",
    "ChatCompletionResponse",
    "ChatMessage",
    "ChatResponseFormat",
    "ChatResponseFormatType",
    "ChatUsage",
    "FunctionCall",
    "FunctionSpec",
    "ToolCall",
    "ToolSpec",
    "EmbeddingData",
    "EmbeddingEncodingFormat",
    "EmbeddingModel",
    "EmbeddingRequest",
    "EmbeddingResponse",
    "EmbeddingUsage",
    "CreateImageRequest",
    "CreateImageResponse",
    "ImageModel",
    "ImageObject",
    "ImageQuality",
    "ImageResponseFormat",
    "ImageSize",
    "ImageStyle",
    "SpeechModel",
    "SpeechRequest",
    "SpeechResponseFormat",
    "SpeechVoice",
    "WhisperModel",
    "WhisperRequest",
    "WhisperRequestType",
    "WhisperResponse",
    "WhisperResponseFormat",
]
