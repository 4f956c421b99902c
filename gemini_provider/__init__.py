"""gemini_provider package

Google Generative Language API adapter for LLM-orchestration front ends.

Purpose:
    Expose Google's models as an interchangeable "model provider": a static
    catalog with token limits, runtime discovery from the vendor's listing
    endpoint, and callable model handles whose outgoing requests match the
    vendor's current wire format.

Public API (re-exported):
    - Version: ``__version__``
    - Exceptions: :class:`ProviderError`, :class:`ErrorCode`
    - Provider: :class:`GoogleProvider`, :class:`GoogleGenerativeModel`
    - DTOs: :class:`ModelInfo`, :class:`ModelRegistrySnapshot`,
      :class:`ProviderSettings`, :class:`ChatRequest`, :class:`ChatResponse`,
      :class:`Message`
    - Factory: :func:`create`
"""

from typing import Any

from .base.errors import ErrorCode, ProviderError
from .base.models import (
    ChatRequest,
    ChatResponse,
    ChatStreamEvent,
    Message,
    ModelInfo,
    ModelRegistrySnapshot,
    ProviderSettings,
)
from .google import GoogleGenerativeModel, GoogleProvider

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "ProviderError",
    "ErrorCode",
    "GoogleProvider",
    "GoogleGenerativeModel",
    "ModelInfo",
    "ModelRegistrySnapshot",
    "ProviderSettings",
    "ChatRequest",
    "ChatResponse",
    "ChatStreamEvent",
    "Message",
    "create",
]

# Registry names accepted by create(); the front end registers the provider as "Google".
_PROVIDER_ALIASES = {
    "google": GoogleProvider,
    "gemini": GoogleProvider,
}


def create(provider_name: str = "google", **kwargs: Any) -> GoogleProvider:
    """Instantiate the provider adapter registered under ``provider_name``.

    Parameters
    ----------
    provider_name:
        ``"google"`` (or the alias ``"gemini"``), case-insensitive.
    **kwargs:
        Forwarded to the adapter constructor (e.g. ``transport=``).

    Raises
    ------
    ProviderError
        ``UNSUPPORTED`` for unknown names, ``VALIDATION`` when the
        constructor rejects ``kwargs``.
    """
    klass = _PROVIDER_ALIASES.get((provider_name or "").lower().strip())
    if klass is None:
        raise ProviderError(
            code=ErrorCode.UNSUPPORTED,
            message=f"Unknown provider '{provider_name}'",
            provider=provider_name or "unknown",
        )
    try:
        return klass(**kwargs)
    except TypeError as e:
        raise ProviderError(
            code=ErrorCode.VALIDATION,
            message=f"Invalid arguments for '{provider_name}' adapter: {e}",
            provider=provider_name,
        ) from e
