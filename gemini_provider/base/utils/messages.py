"""Message translation helpers for the Generative Language wire format.

Helpers here are pure: they map provider-agnostic ``Message`` DTOs onto the
JSON shapes the ``generateContent`` endpoint accepts and perform no I/O.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

from ..models import Message

# Gemini calls the assistant role "model".
_ROLE_MAP = {"user": "user", "assistant": "model"}


def extract_system_text(messages: Sequence[Message]) -> Optional[str]:
    """Return all system message text joined by blank lines, or ``None``.

    Summary
    - System messages may appear anywhere in the list; their order is kept.
    - Whitespace-only system messages are ignored.

    Returns
    - ``None`` when there is no non-empty system message.
    """
    chunks = [
        text
        for m in messages
        if isinstance(m, Message) and m.role == "system"
        for text in [m.text_or_joined().strip()]
        if text
    ]
    return "\n\n".join(chunks) if chunks else None


def to_gemini_contents(messages: Sequence[Message]) -> List[Dict[str, Any]]:
    """Map user/assistant messages to ``contents`` entries.

    Each message becomes ``{"role": "user"|"model", "parts": [{"text": ...}]}``.
    System messages are skipped (see :func:`extract_system_text`), as are
    messages whose flattened text is empty and items that are not ``Message``.
    """
    contents: List[Dict[str, Any]] = []
    for m in messages:
        if not isinstance(m, Message):
            continue
        role = _ROLE_MAP.get(m.role)
        if role is None:
            continue
        text = m.text_or_joined()
        if not text.strip():
            continue
        contents.append({"role": role, "parts": [{"text": text}]})
    return contents


def system_instruction_payload(text: str) -> Dict[str, Any]:
    """Wrap system text as a ``Content`` object (``{"parts": [{"text": ...}]}``)."""
    return {"parts": [{"text": text}]}


__all__ = ["extract_system_text", "to_gemini_contents", "system_instruction_payload"]
