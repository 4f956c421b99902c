"""
Provider interfaces (Protocols).

Re-exports the single-class modules under ``base.interfaces_parts``.
"""

from __future__ import annotations

from .interfaces_parts import (
    DynamicModelProvider,
    LLMProvider,
    ModelInstanceProvider,
    ModelListingProvider,
)

__all__ = [
    "LLMProvider",
    "ModelListingProvider",
    "DynamicModelProvider",
    "ModelInstanceProvider",
]
