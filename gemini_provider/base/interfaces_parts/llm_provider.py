"""LLMProvider Protocol (single-class module).

Contract for a callable model handle returned by ``get_model_instance``.
"""

from __future__ import annotations

from typing import Iterator, Protocol, runtime_checkable

from ..models import ChatRequest, ChatResponse, ChatStreamEvent


@runtime_checkable
class LLMProvider(Protocol):
    """A model handle bound to one model id.

    ``chat`` must not raise for provider failures; errors are encoded in
    ``ChatResponse.meta.extra``. Exceptions are reserved for programmer errors.
    """

    @property
    def model_id(self) -> str:
        ...

    def chat(self, request: ChatRequest) -> ChatResponse:
        ...

    def stream_chat(self, request: ChatRequest) -> Iterator[ChatStreamEvent]:
        ...
