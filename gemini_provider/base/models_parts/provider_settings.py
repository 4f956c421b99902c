"""
Per-provider settings handed down by the front end.

Only the field this adapter reads is modelled; other keys of the front
end's settings object (``enabled``, ``baseUrl``, ...) are ignored by
:meth:`ProviderSettings.from_dict`.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional


@dataclass(frozen=True)
class ProviderSettings:
    """User-level settings for one provider.

    Attributes:
        api_key: Key entered in the provider settings, if any.
    """

    api_key: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "ProviderSettings":
        if not data:
            return cls()
        return cls(api_key=data.get("apiKey") or data.get("api_key") or None)


__all__ = ["ProviderSettings"]
