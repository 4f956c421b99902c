"""ModelListingProvider Protocol (single-class module)."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ..models import ModelRegistrySnapshot


@runtime_checkable
class ModelListingProvider(Protocol):
    """Interface to obtain a snapshot of known models for a provider."""

    def list_models(self, refresh: bool = False) -> ModelRegistrySnapshot:
        """Return known models; ``refresh=True`` queries the vendor first."""
        ...
