"""
Structured provider error exception type.

Raised by model discovery and model-handle construction. Chat calls on the
handle never raise it; they fold the same fields into response metadata.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .error_code import ErrorCode


@dataclass
class ProviderError(Exception):
    """A provider failure carrying a normalized :class:`ErrorCode`.

    Attributes:
        code: Normalized failure classification.
        message: Human-readable message. Never contains credentials.
        provider: Provider name where the error originated (``"Google"``).
        model: Optional model identifier involved in the failure.
        http_status: HTTP status returned by the vendor, when there was one.
        retryable: Hint for callers that run their own retry layer.
        raw: Original exception for diagnostics.
    """

    code: ErrorCode
    message: str
    provider: str
    model: Optional[str] = None
    http_status: Optional[int] = None
    retryable: bool = False
    raw: Optional[Exception] = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"{self.provider}:{self.model or '-'} {self.code.value}: {self.message}"


__all__ = ["ProviderError"]
