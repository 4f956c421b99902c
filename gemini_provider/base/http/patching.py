"""Transport wrapper that rewrites outgoing request bodies.

:class:`BodyPatchTransport` sits between an ``httpx.Client`` and its real
transport. Every request body is handed to a patch callable before it is
sent; the callable returns the bytes to send instead. Model handles build
their bodies in the proto3 JSON mapping (camelCase) and use this transport
to translate the fields the endpoint expects under another name as a
separate, last step before the request goes on the wire.

A patch must never prevent a request from being sent: if it raises, the
failure is logged and the original body goes out unchanged.
"""
from __future__ import annotations

import logging
from typing import Callable, Optional

import httpx

from ..logging import get_logger, log_event

BodyPatch = Callable[[bytes], bytes]

_logger = get_logger("http.patching")


def _rebuild(request: httpx.Request, body: bytes) -> httpx.Request:
    """Return a copy of ``request`` carrying ``body`` and a matching Content-Length."""
    headers = httpx.Headers(request.headers)
    headers.pop("content-length", None)
    headers.pop("transfer-encoding", None)
    return httpx.Request(
        request.method,
        request.url,
        headers=headers,
        content=body,
        extensions=request.extensions,
    )


class BodyPatchTransport(httpx.BaseTransport):
    """Apply ``patch`` to each request body before delegating to ``inner``.

    Parameters
    ----------
    patch:
        Callable mapping the original body bytes to the bytes to send.
    inner:
        Transport that performs the I/O. Defaults to ``httpx.HTTPTransport()``,
        which is closed with this transport; a supplied one is left open.
    name:
        Label used in the warning emitted when ``patch`` fails.
    """

    def __init__(self, patch: BodyPatch, inner: Optional[httpx.BaseTransport] = None, *, name: str = "body_patch") -> None:
        self._patch = patch
        self._owns_inner = inner is None
        self._inner = inner if inner is not None else httpx.HTTPTransport()
        self._name = name

    def handle_request(self, request: httpx.Request) -> httpx.Response:
        body = request.read()
        if body:
            try:
                patched = self._patch(body)
            except Exception as exc:  # patch failures must not block the request
                log_event(
                    _logger,
                    f"{self._name}.error",
                    level=logging.WARNING,
                    error=str(exc),
                    error_type=type(exc).__name__,
                    url=str(request.url.copy_with(query=None)),
                )
                patched = body
            if patched != body:
                request = _rebuild(request, patched)
        return self._inner.handle_request(request)

    def close(self) -> None:
        # a caller-supplied inner transport may be shared; its owner closes it
        if self._owns_inner:
            self._inner.close()


__all__ = ["BodyPatch", "BodyPatchTransport"]
