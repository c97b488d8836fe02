"""Per-call context merged into every structured SDK log event."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class LogContext:
    """Identifies the SDK operation an event belongs to.

    ``extra`` entries are flattened into the event; unset (``None``) values
    are left out so every line carries only what is known.
    """

    operation: Optional[str] = None
    model: Optional[str] = None
    request_id: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        fields = {"operation": self.operation, "model": self.model, "request_id": self.request_id, **self.extra}
        return {k: v for k, v in fields.items() if v is not None}


__all__ = ["LogContext"]
