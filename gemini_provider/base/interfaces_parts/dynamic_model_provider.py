"""DynamicModelProvider Protocol (single-class module).

Providers that publish a static catalog and can discover models at runtime.
"""

from __future__ import annotations

from typing import Any, List, Mapping, Optional, Protocol, runtime_checkable

from ..models import ModelInfo, ProviderSettings


@runtime_checkable
class DynamicModelProvider(Protocol):
    """Static catalog plus runtime discovery."""

    name: str

    @property
    def static_models(self) -> List[ModelInfo]:
        ...

    def get_dynamic_models(
        self,
        api_keys: Optional[Mapping[str, str]] = None,
        settings: Optional[ProviderSettings] = None,
        server_env: Optional[Mapping[str, Any]] = None,
    ) -> List[ModelInfo]:
        """Fetch and normalize the vendor's model list. Raises ``ProviderError``."""
        ...
