"""Built-in catalog of Google models.

Served when the front end has not (or cannot) refresh the list from the
vendor. Limits are the published values for each model.
"""
from __future__ import annotations

from typing import List

from ..base.models import ModelInfo
from ..config.defaults import GOOGLE_PROVIDER_NAME

STATIC_MODELS = (
    ModelInfo(
        name="gemini-2.5-pro",
        label="Gemini 2.5 Pro",
        provider=GOOGLE_PROVIDER_NAME,
        max_token_allowed=1_048_576,
        max_completion_tokens=65_536,
    ),
    ModelInfo(
        name="gemini-2.5-flash",
        label="Gemini 2.5 Flash",
        provider=GOOGLE_PROVIDER_NAME,
        max_token_allowed=1_048_576,
        max_completion_tokens=65_536,
    ),
)


def static_models() -> List[ModelInfo]:
    """Return a fresh list of the built-in entries."""
    return [m.copy() for m in STATIC_MODELS]


__all__ = ["STATIC_MODELS", "static_models"]
