"""Google Generative Language provider: catalog, discovery and model handles."""

from .catalog import STATIC_MODELS, static_models
from .get_google_models import fetch_models, normalize_models
from .model import GoogleGenerativeModel
from .provider import GoogleProvider
from .request_patch import patch_system_instruction, system_instruction_transport

__all__ = [
    "GoogleProvider",
    "GoogleGenerativeModel",
    "STATIC_MODELS",
    "static_models",
    "fetch_models",
    "normalize_models",
    "patch_system_instruction",
    "system_instruction_transport",
]
