"""
ModelRegistrySnapshot DTO: the catalog a provider reported at one moment.

Snapshots are returned from ``list_models`` and are never persisted by this
package; ``fetched_via`` records whether the entries came from the built-in
catalog (``"static"``) or from the vendor's listing endpoint (``"api"``).
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .model_info import ModelInfo


@dataclass
class ModelRegistrySnapshot:
    """Models known for one provider.

    Attributes:
        provider: Provider name the snapshot belongs to.
        models: Catalog entries, static entries first.
        fetched_via: ``"static"`` or ``"api"``.
        fetched_at: ISO-8601 UTC timestamp of when the snapshot was built.
        metadata: Extra JSON-serializable details (e.g. ``api_version``).
    """

    provider: str
    models: List[ModelInfo]
    fetched_via: Optional[str] = None
    fetched_at: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    def names(self) -> List[str]:
        return [m.name for m in self.models]

    def get(self, name: str) -> Optional[ModelInfo]:
        """Return the entry called ``name``, or ``None``."""
        return next((m for m in self.models if m.name == name), None)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "provider": self.provider,
            "models": [m.to_dict() for m in self.models],
            "fetched_via": self.fetched_via,
            "fetched_at": self.fetched_at,
            "metadata": self.metadata,
        }


__all__ = ["ModelRegistrySnapshot"]
