"""llm_sdk.config.defaults
=======================

Central place for small, stable default values used across the SDK. These can
be overridden through :func:`llm_sdk.config.get_sdk_config` (config file,
environment, explicit overrides) but provide sensible fallbacks for local
development and tests.

Only plain constants live here; this module imports nothing from the SDK.
"""

from __future__ import annotations

# ---- Transport ----
DEFAULT_BASE_URL = "https://api.openai.com/v1"
# One fixed timeout for every call, retries included.
REQUEST_TIMEOUT_SECONDS = 30.0

# ---- Retry ----
DEFAULT_MAX_RETRIES = 3
# Exponential backoff: min(RETRY_MAX_DELAY_SECONDS, base * factor ** attempt), jittered.
RETRY_BASE_DELAY_SECONDS = 1.0
RETRY_BACKOFF_FACTOR = 2.0
RETRY_MAX_DELAY_SECONDS = 30.0

# ---- Endpoint models ----
CHAT_DEFAULT_MODEL = "gpt-4o-mini"
IMAGE_DEFAULT_MODEL = "dall-e-3"
SPEECH_DEFAULT_MODEL = "tts-1"
WHISPER_DEFAULT_MODEL = "whisper-1"
EMBEDDING_DEFAULT_MODEL = "text-embedding-ada-002"


__all__ = [
    "DEFAULT_BASE_URL",
    "REQUEST_TIMEOUT_SECONDS",
    "DEFAULT_MAX_RETRIES",
    "RETRY_BASE_DELAY_SECONDS",
    "RETRY_BACKOFF_FACTOR",
    "RETRY_MAX_DELAY_SECONDS",
    "CHAT_DEFAULT_MODEL",
    "IMAGE_DEFAULT_MODEL",
    "SPEECH_DEFAULT_MODEL",
    "WHISPER_DEFAULT_MODEL",
    "EMBEDDING_DEFAULT_MODEL",
]
