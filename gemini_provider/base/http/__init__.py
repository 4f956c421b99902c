"""HTTP helpers: pooled ``httpx`` clients and the body-patching transport."""

from .client import SharedTransport, close_all_clients, get_httpx_client, set_httpx_client
from .patching import BodyPatch, BodyPatchTransport

__all__ = [
    "get_httpx_client",
    "set_httpx_client",
    "close_all_clients",
    "SharedTransport",
    "BodyPatch",
    "BodyPatchTransport",
]
