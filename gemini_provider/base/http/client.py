"""Shared HTTP client pool.

Reusable ``httpx.Client`` instances keyed by ``(base_url, purpose)`` so that
model listing calls do not open a new connection pool per request. Timeouts
come from :func:`get_timeout_config`. All pooled clients are closed at
interpreter exit; tests may call :func:`close_all_clients` directly.

Model handles do not use this pool: each handle owns a client whose
transport is wrapped with its request patch (see ``http.patching``).
"""

from __future__ import annotations

import atexit
import contextlib
import threading
from typing import Dict, Optional, Tuple

import httpx

from ..timeouts import get_timeout_config

_CLIENTS: Dict[Tuple[Optional[str], str], httpx.Client] = {}
_LOCK = threading.RLock()


def get_httpx_client(base_url: Optional[str], purpose: str) -> httpx.Client:
    """Return the pooled client for ``(base_url, purpose)``, creating it once.

    Parameters:
        base_url: Base URL set on the client so callers can issue relative
            requests. ``None`` groups clients under a shared key.
        purpose: Short discriminator for separate pools (e.g. ``"models"``).
    """
    key = (base_url, purpose)
    client = _CLIENTS.get(key)
    if client is not None and not client.is_closed:
        return client

    with _LOCK:
        client = _CLIENTS.get(key)
        if client is not None and not client.is_closed:
            return client
        timeout = get_timeout_config().for_request()
        client = httpx.Client(base_url=base_url, timeout=timeout) if base_url else httpx.Client(timeout=timeout)
        _CLIENTS[key] = client
        return client


def set_httpx_client(base_url: Optional[str], purpose: str, client: httpx.Client) -> None:
    """Install ``client`` for a pool key, closing any client it replaces.

    Used to inject a client with a custom transport (proxies, test doubles).
    """
    with _LOCK:
        previous = _CLIENTS.get((base_url, purpose))
        _CLIENTS[(base_url, purpose)] = client
    if previous is not None and previous is not client:
        with contextlib.suppress(Exception):
            previous.close()


class SharedTransport(httpx.BaseTransport):
    """Delegate to a transport owned elsewhere without taking over its lifetime.

    Closing a client built on this wrapper leaves ``inner`` open for the other
    clients that use it.
    """

    def __init__(self, inner: httpx.BaseTransport) -> None:
        self._inner = inner

    def handle_request(self, request: httpx.Request) -> httpx.Response:
        return self._inner.handle_request(request)

    def close(self) -> None:
        pass


def close_all_clients() -> None:
    """Close and forget every pooled client."""
    with _LOCK:
        for c in _CLIENTS.values():
            with contextlib.suppress(Exception):
                c.close()
        _CLIENTS.clear()


atexit.register(close_all_clients)

__all__ = ["get_httpx_client", "set_httpx_client", "close_all_clients", "SharedTransport"]
