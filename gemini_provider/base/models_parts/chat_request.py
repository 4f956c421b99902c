"""
ChatRequest DTO: a provider-agnostic chat invocation.

The Google model handle translates it into a ``generateContent`` body; see
``GoogleGenerativeModel.build_request_body``.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .message import Message


@dataclass
class ChatRequest:
    """Normalized chat request.

    Attributes:
        messages: Ordered chat messages. System messages become the
            request's system instruction.
        model: Optional model override. Handles are bound to one model and
            only use this for logging/metadata when it matches.
        max_tokens: Output token cap (``generationConfig.maxOutputTokens``).
        temperature: Sampling temperature.
        response_format: ``"json_object"`` requests a JSON response.
        json_schema: Response schema for structured output.
        extra: Raw ``generationConfig`` entries merged last.
    """

    messages: List[Message]
    model: Optional[str] = None
    max_tokens: Optional[int] = None
    temperature: Optional[float] = None
    response_format: Optional[str] = None
    json_schema: Optional[Dict[str, Any]] = None
    extra: Dict[str, Any] = field(default_factory=dict)


__all__ = ["ChatRequest"]
