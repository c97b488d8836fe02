"""Base structured logging utilities for the SDK.

All SDK modules log through children of the shared ``llm_sdk`` logger, which
owns a single stderr handler with the JSON formatter. The level comes from the
``LLM_SDK_LOG_LEVEL`` environment variable (default ``WARNING`` so a library
stays quiet unless asked).

Events are written with :func:`log_event` as one JSON object per line:
``{"event": "retry.attempt", "operation": "embedding", "attempt": 1, ...}``.
"""
from __future__ import annotations

import json
import logging
import os
import sys
from typing import Any

from .log_support import JsonFormatter, LogContext

BASE_LOGGER_NAME = "llm_sdk"
_BASE_LOGGER_ATTR = "_llm_sdk_logger_initialized"
_HANDLER_ATTR = "_llm_sdk_handler"
_PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def _parse_level(value: str | None, default: int = logging.WARNING) -> int:
    """Resolve a level name such as ``"debug"`` or ``"WARN"``; unknown names yield ``default``."""
    if not value:
        return default
    level = logging.getLevelName(value.strip().upper())
    return level if isinstance(level, int) else default


def _formatter(json_mode: bool) -> logging.Formatter:
    return JsonFormatter() if json_mode else logging.Formatter(_PLAIN_FORMAT)


def _ensure_base_logger(json_mode: bool) -> logging.Logger:
    logger = logging.getLogger(BASE_LOGGER_NAME)
    if getattr(logger, _BASE_LOGGER_ATTR, False):
        return logger
    level = _parse_level(os.getenv("LLM_SDK_LOG_LEVEL"))
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(_formatter(json_mode))
    setattr(handler, _HANDLER_ATTR, True)
    logger.setLevel(level)
    logger.addHandler(handler)
    # Library output goes to our handler only, never to the application's root handlers.
    logger.propagate = False
    setattr(logger, _BASE_LOGGER_ATTR, True)
    return logger


def get_logger(name: str = BASE_LOGGER_NAME, json_mode: bool = True) -> logging.Logger:
    """Return the shared SDK logger or one of its children.

    Child loggers carry no handlers of their own and propagate to the base
    logger, so level changes through :func:`configure_logger` apply everywhere.
    """
    base_logger = _ensure_base_logger(json_mode=json_mode)
    if name == BASE_LOGGER_NAME:
        return base_logger
    if not name.startswith(BASE_LOGGER_NAME + "."):
        name = f"{BASE_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def configure_logger(*, level: int | str | None = None, json_mode: bool = True) -> logging.Logger:
    """Reconfigure the shared SDK logger at runtime.

    Parameters
    ----------
    level: int | str | None
        Numeric level or name (e.g. ``"DEBUG"``). ``None`` keeps the current level.
    json_mode: bool
        Use the JSON formatter (default) or a plain text formatter.
    """
    logger = _ensure_base_logger(json_mode=json_mode)
    if isinstance(level, str):
        level = _parse_level(level, default=logger.level)
    if level is not None:
        logger.setLevel(level)
    # Handlers attached by the application are left alone.
    for handler in logger.handlers:
        if getattr(handler, _HANDLER_ATTR, False):
            handler.setLevel(logger.level)
            handler.setFormatter(_formatter(json_mode))
    return logger


def log_event(
    logger: logging.Logger,
    event: str,
    ctx: LogContext | None = None,
    *,
    level: int = logging.INFO,
    keep_none: bool = False,
    **fields: Any,
) -> None:
    """Emit a structured log event.

    Keys whose value is ``None`` are dropped unless ``keep_none`` is set.
    Nothing is serialized when ``level`` is disabled for ``logger``.
    """
    if not logger.isEnabledFor(level):
        return
    payload: dict[str, Any] = {"event": event, **(ctx.to_dict() if ctx else {})}
    payload.update(fields if keep_none else {k: v for k, v in fields.items() if v is not None})
    logger.log(level, json.dumps(payload, ensure_ascii=False, default=str))


__all__ = [
    "BASE_LOGGER_NAME",
    "LogContext",
    "get_logger",
    "configure_logger",
    "log_event",
]
