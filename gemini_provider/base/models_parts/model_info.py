"""
ModelInfo DTO: one entry of a provider's model catalog.

The front end consumes catalog entries as camelCase JSON
(``maxTokenAllowed``, ``maxCompletionTokens``); :meth:`ModelInfo.to_dict`
produces that shape while the Python attributes stay snake_case.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Dict, Mapping, Optional


@dataclass(frozen=True)
class ModelInfo:
    """A model identifier together with its token limits.

    Attributes:
        name: Model identifier as sent to the vendor (``"gemini-2.5-pro"``).
        label: Human-readable name shown in model pickers.
        provider: Owning provider name (``"Google"``).
        max_token_allowed: Context window (maximum input tokens).
        max_completion_tokens: Maximum output tokens, when known.
    """

    name: str
    label: str
    provider: str
    max_token_allowed: int
    max_completion_tokens: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        """Return the camelCase wire representation."""
        out: Dict[str, Any] = {
            "name": self.name,
            "label": self.label,
            "provider": self.provider,
            "maxTokenAllowed": self.max_token_allowed,
        }
        if self.max_completion_tokens is not None:
            out["maxCompletionTokens"] = self.max_completion_tokens
        return out

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ModelInfo":
        """Build an entry from the camelCase wire representation."""
        return cls(
            name=str(data["name"]),
            label=str(data.get("label") or data["name"]),
            provider=str(data["provider"]),
            max_token_allowed=int(data["maxTokenAllowed"]),
            max_completion_tokens=(
                int(data["maxCompletionTokens"]) if data.get("maxCompletionTokens") is not None else None
            ),
        )

    def copy(self) -> "ModelInfo":
        return replace(self)


__all__ = ["ModelInfo"]
