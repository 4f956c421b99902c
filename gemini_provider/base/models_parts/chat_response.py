"""
ChatResponse DTO.

``raw`` holds the decoded vendor payload for debugging and is excluded from
:meth:`ChatResponse.to_dict`.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from .content_part import ContentPart
from .provider_metadata import ProviderMetadata


@dataclass
class ChatResponse:
    """Normalized response of a chat call."""

    text: Optional[str]
    parts: Optional[List[ContentPart]]
    raw: Optional[Any]
    meta: ProviderMetadata

    @property
    def error(self) -> Optional[str]:
        return self.meta.extra.get("error")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "text": self.text,
            "parts": [p.to_dict() for p in self.parts] if self.parts else None,
            "meta": self.meta.to_dict(),
        }


__all__ = ["ChatResponse"]
