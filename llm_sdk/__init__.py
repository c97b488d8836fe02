"""llm_sdk package

Typed async client for an OpenAI-compatible generative AI API: chat
completion, image generation, text-to-speech, speech-to-text and embeddings.

Public API (re-exported):
    - Client: :class:`LlmSdk`
    - Exceptions: :class:`SdkError`, :class:`ErrorCode`
    - Request descriptors and response shapes from :mod:`llm_sdk.base.dto`

Example::

    async with LlmSdk(os.environ["OPENAI_API_KEY"]) as sdk:
        res = await sdk.embedding(EmbeddingRequest.new("hello"))
"""

from .base.dto import *  # noqa: F401,F403
from .base.dto import __all__ as _dto_all
from .base.errors import ErrorCode, SdkError
from .base.http import TransportClient
from .base.resilience import RetryConfig
from .client import LlmSdk

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "LlmSdk",
    "TransportClient",
    "RetryConfig",
    "ErrorCode",
    "SdkError",
    *_dto_all,
]
