"""
Base package: provider-agnostic building blocks.

- Interfaces: runtime-checkable Protocols the Google adapter satisfies
- Models (DTOs): catalog entries, settings, chat request/response shapes
- Errors: ``ErrorCode`` taxonomy and ``ProviderError``
- Logging, HTTP client pool and timeouts
"""

from .errors import ErrorCode, ProviderError, classify_exception
from .interfaces import (
    DynamicModelProvider,
    LLMProvider,
    ModelInstanceProvider,
    ModelListingProvider,
)
from .models import (
    ChatRequest,
    ChatResponse,
    ChatStreamEvent,
    ContentPart,
    ContentPartType,
    Message,
    ModelInfo,
    ModelRegistrySnapshot,
    ProviderMetadata,
    ProviderSettings,
    Role,
)

__all__ = [
    "ErrorCode",
    "ProviderError",
    "classify_exception",
    "DynamicModelProvider",
    "LLMProvider",
    "ModelInstanceProvider",
    "ModelListingProvider",
    "ChatRequest",
    "ChatResponse",
    "ChatStreamEvent",
    "ContentPart",
    "ContentPartType",
    "Message",
    "ModelInfo",
    "ModelRegistrySnapshot",
    "ProviderMetadata",
    "ProviderSettings",
    "Role",
]
