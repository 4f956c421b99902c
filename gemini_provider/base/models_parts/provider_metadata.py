"""
Execution metadata attached to every chat response.

On failure ``extra`` carries ``error`` (message) and ``code`` (``ErrorCode``
value); callers check ``meta.extra.get("error")`` rather than catching.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Optional


@dataclass
class ProviderMetadata:
    """Diagnostics for one provider call.

    Attributes:
        provider_name: Provider that served the call.
        model_name: Model the call was bound to.
        http_status: Vendor HTTP status when known.
        finish_reason: Candidate ``finishReason`` reported by the vendor.
        latency_ms: Wall-clock latency in milliseconds.
        usage: Token usage as reported (``usageMetadata``).
        extra: Adapter-specific details, including error info.
    """

    provider_name: str
    model_name: str
    http_status: Optional[int] = None
    finish_reason: Optional[str] = None
    latency_ms: Optional[float] = None
    usage: Optional[Dict[str, Any]] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


__all__ = ["ProviderMetadata"]
