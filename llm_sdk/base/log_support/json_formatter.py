"""One-line JSON formatter for SDK log records.

Messages written by :func:`llm_sdk.base.logging.log_event` are JSON objects;
their keys are merged into the output line instead of being nested as an
escaped string. Attributes passed through ``extra=`` are kept as well.
"""
from __future__ import annotations

import contextlib
import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict

ISO = "%Y-%m-%dT%H:%M:%S.%fZ"

# Attributes every LogRecord carries; anything else came from ``extra=``.
_RECORD_ATTRS = frozenset(vars(logging.LogRecord("", 0, "", 0, "", None, None))) | {
    "message",
    "asctime",
    "taskName",
}


def _extra_attrs(record: logging.LogRecord) -> Dict[str, Any]:
    return {k: v for k, v in vars(record).items() if not k.startswith("_") and k not in _RECORD_ATTRS}


class JsonFormatter(logging.Formatter):
    """Render a record as ``{"ts", "level", "logger", ...event fields}``."""

    def format(self, record: logging.LogRecord) -> str:
        line: Dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).strftime(ISO),
            "level": record.levelname,
            "logger": record.name,
        }
        text = record.getMessage()
        event: Any = None
        with contextlib.suppress(ValueError):
            event = json.loads(text)
        if isinstance(event, dict):
            line.update(event)
        else:
            line["msg"] = text
        for key, value in _extra_attrs(record).items():
            line.setdefault(key, value)
        if record.exc_info:
            line["exc"] = self.formatException(record.exc_info)
        return json.dumps(line, ensure_ascii=False, default=str)


__all__ = ["JsonFormatter", "ISO"]
