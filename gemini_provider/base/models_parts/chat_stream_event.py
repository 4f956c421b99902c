"""
ChatStreamEvent: one increment of a streamed chat.

A stream yields zero or more delta events followed by exactly one terminal
event (``finish=True``); a terminal event with ``error`` set reports failure.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class ChatStreamEvent:
    """A streamed text delta or the terminal event."""

    provider: str
    model: str
    delta: Optional[str]
    finish: bool = False
    finish_reason: Optional[str] = None
    error: Optional[str] = None
    code: Optional[str] = None
    raw: Optional[Any] = None


__all__ = ["ChatStreamEvent"]
