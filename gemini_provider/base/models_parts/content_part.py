"""
Structured content part of an assistant reply.

Gemini returns candidates as lists of parts; text parts map to
``type="text"``, function calls to ``type="tool_call"`` and everything else
(inline data, code results) to ``type="other"`` with the raw part in ``data``.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Literal, Optional

ContentPartType = Literal["text", "json", "tool_call", "other"]


@dataclass
class ContentPart:
    """One piece of assistant content."""

    type: ContentPartType
    text: Optional[str] = None
    data: Optional[Dict[str, Any]] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


__all__ = ["ContentPart", "ContentPartType"]
