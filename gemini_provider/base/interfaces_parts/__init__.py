"""Interfaces (Protocols) split into single-class modules."""

from .llm_provider import LLMProvider
from .model_listing_provider import ModelListingProvider
from .dynamic_model_provider import DynamicModelProvider
from .model_instance_provider import ModelInstanceProvider

__all__ = [
    "LLMProvider",
    "ModelListingProvider",
    "DynamicModelProvider",
    "ModelInstanceProvider",
]
