"""GoogleGenerativeModel: the callable model handle.

A handle is bound to one model id, one API key and one endpoint
(``{base_url}/{api_version}``). It talks to the Generative Language REST API
through its own ``httpx.Client`` whose transport is wrapped with the
system-instruction patch before the first request is built, so every body it
sends uses the field names current endpoints expect.

Failure handling follows the ``LLMProvider`` contract: ``chat`` and
``stream_chat`` never raise for provider failures. The error message and
normalized code land in ``ChatResponse.meta.extra`` (or on the terminal
stream event). The low-level ``generate_content`` /
``stream_generate_content`` calls raise ``ProviderError``.
"""

from __future__ import annotations

import json
import time
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple

import httpx

from ..base.errors import ErrorCode, ProviderError, classify_exception, code_for_status, is_retryable
from ..base.logging import LogContext, get_logger, normalized_log_event
from ..base.models import (
    ChatRequest,
    ChatResponse,
    ChatStreamEvent,
    ContentPart,
    ProviderMetadata,
)
from ..base.timeouts import get_timeout_config
from ..base.utils.messages import extract_system_text, system_instruction_payload, to_gemini_contents
from ..config.defaults import GOOGLE_PROVIDER_NAME
from .get_google_models import MODEL_NAME_PREFIX
from .request_patch import CAMEL_FIELD, system_instruction_transport

_SSE_DATA_PREFIX = "data:"


def _vendor_error_message(resp: httpx.Response) -> str:
    """Pull ``error.message`` out of a Google error body, else the reason phrase."""
    try:
        body = resp.json()
    except ValueError:
        return resp.reason_phrase or "request failed"
    err = body.get("error") if isinstance(body, dict) else None
    if isinstance(err, dict) and isinstance(err.get("message"), str):
        return err["message"]
    return resp.reason_phrase or "request failed"


def _parse_candidate(payload: Mapping[str, Any]) -> Tuple[str, List[ContentPart], Optional[str]]:
    """Return ``(text, parts, finish_reason)`` for the first candidate.

    Thought-summary parts are left out of both text and parts.
    """
    candidates = payload.get("candidates")
    if not isinstance(candidates, list) or not candidates or not isinstance(candidates[0], dict):
        return "", [], None
    first = candidates[0]
    content = first.get("content") if isinstance(first.get("content"), dict) else {}
    texts: List[str] = []
    parts: List[ContentPart] = []
    for part in content.get("parts") or []:
        if not isinstance(part, dict) or part.get("thought"):
            continue
        if isinstance(part.get("text"), str):
            texts.append(part["text"])
            parts.append(ContentPart(type="text", text=part["text"]))
        elif isinstance(part.get("functionCall"), dict):
            parts.append(ContentPart(type="tool_call", data=part["functionCall"]))
        else:
            parts.append(ContentPart(type="other", data=part))
    return "".join(texts), parts, first.get("finishReason")


class GoogleGenerativeModel:
    """Model handle for one Gemini model.

    Parameters
    ----------
    model_id:
        Model identifier; a leading ``models/`` is accepted and dropped.
    api_key:
        Credential sent in the ``x-goog-api-key`` header.
    base_url:
        Versioned endpoint, e.g. ``https://generativelanguage.googleapis.com/v1beta``.
    provider:
        Provider name reported in metadata and logs.
    transport:
        Optional inner transport (proxies, tests). It is always wrapped by
        the system-instruction patch.
    """

    def __init__(
        self,
        model_id: str,
        *,
        api_key: str,
        base_url: str,
        provider: str = GOOGLE_PROVIDER_NAME,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        if model_id.startswith(MODEL_NAME_PREFIX):
            model_id = model_id[len(MODEL_NAME_PREFIX):]
        self._model_id = model_id
        self._base_url = base_url.rstrip("/")
        self._provider = provider
        self._timeouts = get_timeout_config()
        self._client = httpx.Client(
            transport=system_instruction_transport(transport),
            timeout=self._timeouts.for_request(),
            headers={"x-goog-api-key": api_key, "Content-Type": "application/json"},
        )
        self._logger = get_logger("google.model")

    @property
    def model_id(self) -> str:
        return self._model_id

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def provider(self) -> str:
        return self._provider

    def __repr__(self) -> str:
        return f"GoogleGenerativeModel(model_id={self._model_id!r}, base_url={self._base_url!r})"

    # ---- lifecycle ----
    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "GoogleGenerativeModel":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    # ---- request building ----
    def _method_url(self, method: str) -> str:
        return f"{self._base_url}/models/{self._model_id}:{method}"

    def build_request_body(self, request: ChatRequest) -> Dict[str, Any]:
        """Translate ``request`` into a ``generateContent`` body.

        The system instruction is written as ``systemInstruction``; the
        transport patch renames it on the way out.

        Raises
        ------
        ProviderError
            ``VALIDATION`` when there is no user or assistant content to send.
        """
        contents = to_gemini_contents(request.messages)
        if not contents:
            raise ProviderError(
                code=ErrorCode.VALIDATION,
                message="request has no user or assistant content",
                provider=self._provider,
                model=self._model_id,
            )
        body: Dict[str, Any] = {"contents": contents}
        if system_text := extract_system_text(request.messages):
            body[CAMEL_FIELD] = system_instruction_payload(system_text)
        generation_config: Dict[str, Any] = {}
        if request.max_tokens is not None:
            generation_config["maxOutputTokens"] = request.max_tokens
        if request.temperature is not None:
            generation_config["temperature"] = request.temperature
        if request.response_format == "json_object" or request.json_schema:
            generation_config["responseMimeType"] = "application/json"
        if request.json_schema:
            generation_config["responseSchema"] = request.json_schema
        generation_config.update(request.extra)
        if generation_config:
            body["generationConfig"] = generation_config
        return body

    # ---- raw REST calls ----
    def _status_error(self, resp: httpx.Response) -> ProviderError:
        code = code_for_status(resp.status_code)
        return ProviderError(
            code=code,
            message=f"{resp.status_code} {_vendor_error_message(resp)}",
            provider=self._provider,
            model=self._model_id,
            http_status=resp.status_code,
            retryable=is_retryable(code),
        )

    def _transport_error(self, exc: httpx.HTTPError) -> ProviderError:
        code = classify_exception(exc)
        return ProviderError(
            code=code,
            message=f"{type(exc).__name__}: {exc}",
            provider=self._provider,
            model=self._model_id,
            retryable=is_retryable(code),
            raw=exc,
        )

    def _invalid_body(self, exc: Exception) -> ProviderError:
        return ProviderError(
            code=ErrorCode.VALIDATION,
            message="Invalid response format from Google API",
            provider=self._provider,
            model=self._model_id,
            raw=exc,
        )

    def generate_content(self, body: Mapping[str, Any]) -> Dict[str, Any]:
        """POST ``:generateContent`` and return the decoded response.

        Raises
        ------
        ProviderError
            On transport failures, non-2xx statuses and undecodable bodies.
        """
        try:
            resp = self._client.post(self._method_url("generateContent"), json=dict(body))
        except httpx.HTTPError as e:
            raise self._transport_error(e) from e
        if not resp.is_success:
            raise self._status_error(resp)
        try:
            payload = resp.json()
        except ValueError as e:
            raise self._invalid_body(e) from e
        if not isinstance(payload, dict):
            raise self._invalid_body(TypeError(type(payload).__name__))
        return payload

    def stream_generate_content(self, body: Mapping[str, Any]) -> Iterator[Dict[str, Any]]:
        """POST ``:streamGenerateContent?alt=sse`` and yield each decoded chunk.

        Raises
        ------
        ProviderError
            Same conditions as :meth:`generate_content`; may be raised after
            some chunks were already yielded.
        """
        try:
            with self._client.stream(
                "POST",
                self._method_url("streamGenerateContent"),
                params={"alt": "sse"},
                json=dict(body),
                timeout=self._timeouts.for_stream(),
            ) as resp:
                if not resp.is_success:
                    resp.read()
                    raise self._status_error(resp)
                for line in resp.iter_lines():
                    if not line.startswith(_SSE_DATA_PREFIX):
                        continue
                    data = line[len(_SSE_DATA_PREFIX):].strip()
                    if not data:
                        continue
                    try:
                        chunk = json.loads(data)
                    except ValueError as e:
                        raise self._invalid_body(e) from e
                    if isinstance(chunk, dict):
                        yield chunk
        except httpx.HTTPError as e:
            raise self._transport_error(e) from e

    # ---- chat surface ----
    def _ctx(self) -> LogContext:
        return LogContext(provider=self._provider, model=self._model_id)

    def _error_response(self, e: ProviderError, latency_ms: Optional[float] = None) -> ChatResponse:
        meta = ProviderMetadata(
            provider_name=self._provider,
            model_name=self._model_id,
            http_status=e.http_status,
            latency_ms=latency_ms,
            extra={"error": e.message, "code": e.code.value, "retryable": e.retryable},
        )
        return ChatResponse(text=None, parts=None, raw=None, meta=meta)

    def chat(self, request: ChatRequest) -> ChatResponse:
        """Run one non-streaming completion.

        Returns a ``ChatResponse``; on failure ``text`` is ``None`` and
        ``meta.extra`` holds ``error`` and ``code``.
        """
        ctx = self._ctx()
        normalized_log_event(
            self._logger,
            "chat.start",
            ctx,
            phase="start",
            max_tokens=request.max_tokens,
            temperature=request.temperature,
            has_schema=bool(request.json_schema),
        )
        t0 = time.perf_counter()
        try:
            payload = self.generate_content(self.build_request_body(request))
        except ProviderError as e:
            latency_ms = (time.perf_counter() - t0) * 1000.0
            normalized_log_event(
                self._logger,
                "chat.error",
                ctx,
                phase="finalize",
                error=e.message,
                error_code=e.code.value,
                http_status=e.http_status,
                latency_ms=latency_ms,
            )
            return self._error_response(e, latency_ms)
        latency_ms = (time.perf_counter() - t0) * 1000.0

        text, parts, finish_reason = _parse_candidate(payload)
        usage = payload.get("usageMetadata") if isinstance(payload.get("usageMetadata"), dict) else None
        extra: Dict[str, Any] = {"is_structured": request.response_format == "json_object" or bool(request.json_schema)}
        feedback = payload.get("promptFeedback")
        if not parts and isinstance(feedback, dict) and feedback.get("blockReason"):
            extra["error"] = f"prompt blocked: {feedback['blockReason']}"
            extra["code"] = ErrorCode.VALIDATION.value
        normalized_log_event(
            self._logger,
            "chat.end",
            ctx,
            phase="finalize",
            emitted=bool(text),
            tokens=usage,
            finish_reason=finish_reason,
            latency_ms=latency_ms,
        )
        meta = ProviderMetadata(
            provider_name=self._provider,
            model_name=self._model_id,
            http_status=200,
            finish_reason=finish_reason,
            latency_ms=latency_ms,
            usage=usage,
            extra=extra,
        )
        return ChatResponse(text=text or None, parts=parts or None, raw=payload, meta=meta)

    __call__ = chat

    def stream_chat(self, request: ChatRequest) -> Iterator[ChatStreamEvent]:
        """Stream a completion as text deltas followed by one terminal event."""
        ctx = self._ctx()
        normalized_log_event(self._logger, "stream.start", ctx, phase="start", max_tokens=request.max_tokens)
        emitted = False
        finish_reason: Optional[str] = None
        usage: Optional[Dict[str, Any]] = None
        try:
            for chunk in self.stream_generate_content(self.build_request_body(request)):
                text, _parts, reason = _parse_candidate(chunk)
                finish_reason = reason or finish_reason
                if isinstance(chunk.get("usageMetadata"), dict):
                    usage = chunk["usageMetadata"]
                if text:
                    emitted = True
                    yield ChatStreamEvent(provider=self._provider, model=self._model_id, delta=text, raw=chunk)
        except ProviderError as e:
            normalized_log_event(
                self._logger,
                "stream.error",
                ctx,
                phase="finalize",
                emitted=emitted,
                error=e.message,
                error_code=e.code.value,
            )
            yield ChatStreamEvent(
                provider=self._provider,
                model=self._model_id,
                delta=None,
                finish=True,
                error=e.message,
                code=e.code.value,
            )
            return
        normalized_log_event(
            self._logger,
            "stream.end",
            ctx,
            phase="finalize",
            emitted=emitted,
            tokens=usage,
            finish_reason=finish_reason,
        )
        yield ChatStreamEvent(
            provider=self._provider,
            model=self._model_id,
            delta=None,
            finish=True,
            finish_reason=finish_reason,
        )


__all__ = ["GoogleGenerativeModel"]
