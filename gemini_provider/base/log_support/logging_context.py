"""Identity fields merged into every structured adapter event."""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Dict, Optional


@dataclass
class LogContext:
    """Who an event is about: provider, model and the API version in use.

    ``extra`` entries are flattened into the payload next to the named
    fields; ``None`` values are dropped.
    """

    provider: Optional[str] = None
    model: Optional[str] = None
    api_version: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def bind(self, **extra: Any) -> "LogContext":
        """Return a copy whose ``extra`` also carries ``extra``."""
        return replace(self, extra={**self.extra, **extra})

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"provider": self.provider, "model": self.model, "api_version": self.api_version}
        data.update(self.extra)
        return {k: v for k, v in data.items() if v is not None}


__all__ = ["LogContext"]
