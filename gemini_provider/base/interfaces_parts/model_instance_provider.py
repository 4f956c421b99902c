"""ModelInstanceProvider Protocol (single-class module)."""

from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol, runtime_checkable

from ..models import ProviderSettings
from .llm_provider import LLMProvider


@runtime_checkable
class ModelInstanceProvider(Protocol):
    """Providers that construct configured model handles."""

    def get_model_instance(
        self,
        model: str,
        server_env: Optional[Mapping[str, Any]] = None,
        api_keys: Optional[Mapping[str, str]] = None,
        provider_settings: Optional[Mapping[str, ProviderSettings]] = None,
    ) -> LLMProvider:
        """Return a handle for ``model``. Raises ``ProviderError`` without a key."""
        ...
