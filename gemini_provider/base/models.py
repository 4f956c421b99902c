"""
Provider-agnostic DTOs public surface.

Re-exports the one-class-per-file implementations under
``gemini_provider.base.models_parts``.
"""

from .models_parts.content_part import ContentPart, ContentPartType
from .models_parts.message import Message, Role
from .models_parts.provider_metadata import ProviderMetadata
from .models_parts.provider_settings import ProviderSettings
from .models_parts.chat_request import ChatRequest
from .models_parts.chat_response import ChatResponse
from .models_parts.chat_stream_event import ChatStreamEvent
from .models_parts.model_info import ModelInfo
from .models_parts.model_registry_snapshot import ModelRegistrySnapshot

__all__ = [
    "ContentPart",
    "ContentPartType",
    "Message",
    "Role",
    "ProviderMetadata",
    "ProviderSettings",
    "ChatRequest",
    "ChatResponse",
    "ChatStreamEvent",
    "ModelInfo",
    "ModelRegistrySnapshot",
]
