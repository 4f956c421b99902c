"""
Google: get models

Behavior
- GET ``{base_url}/{api_version}/models?key=...`` through a pooled ``httpx``
  client and return the listing as ``ModelInfo`` entries.
- Keeps only models with a usable output budget (``outputTokenLimit`` above
  8000) that are not experimental; ``flash-exp`` builds are kept.
- Nothing is cached or persisted and failed calls are not retried. Every
  failure surfaces as ``ProviderError``.

The ``key`` query parameter is never logged.
"""

from __future__ import annotations

import time
from typing import Any, List, Optional

import httpx
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..base.errors import ErrorCode, ProviderError, classify_exception, code_for_status, is_retryable
from ..base.http import get_httpx_client
from ..base.logging import LogContext, get_logger, normalized_log_event
from ..base.models import ModelInfo
from ..config.defaults import (
    CONTEXT_WINDOW_OVERRIDES,
    DEFAULT_COMPLETION_TOKENS,
    DEFAULT_CONTEXT_WINDOW,
    GOOGLE_PROVIDER_NAME,
    MAX_COMPLETION_TOKENS_CAP,
    MIN_OUTPUT_TOKEN_LIMIT,
)

PROVIDER = GOOGLE_PROVIDER_NAME
HTTP_POOL_PURPOSE = "google.models"
MODEL_NAME_PREFIX = "models/"
INVALID_RESPONSE_MESSAGE = "Invalid response format from Google API"

_logger = get_logger("google.models")


class ListedModel(BaseModel):
    """The fields of a ``models.list`` entry that normalization reads.

    Other fields (``supportedGenerationMethods``, ``temperature``, ...) are
    ignored rather than validated.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    name: str
    display_name: Optional[str] = Field(default=None, alias="displayName")
    input_token_limit: Optional[int] = Field(default=None, alias="inputTokenLimit")
    output_token_limit: Optional[int] = Field(default=None, alias="outputTokenLimit")

    @property
    def short_name(self) -> str:
        """Model id without the leading ``models/`` resource prefix."""
        return self.name.replace(MODEL_NAME_PREFIX, "", 1)


def models_url(base_url: str, api_version: str) -> str:
    return f"{base_url.rstrip('/')}/{api_version}/models"


def is_listed(model: ListedModel) -> bool:
    """Return True when a listing entry belongs in the catalog."""
    has_good_token_limit = (model.output_token_limit or 0) > MIN_OUTPUT_TOKEN_LIMIT
    is_stable = "exp" not in model.name or "flash-exp" in model.name
    return has_good_token_limit and is_stable


def context_label(context_window: int) -> str:
    """Format a context size as ``"2M"`` / ``"32k"`` (floored)."""
    if context_window >= 1_000_000:
        return f"{context_window // 1_000_000}M"
    return f"{context_window // 1000}k"


def normalize_model(model: ListedModel) -> ModelInfo:
    """Map one listing entry onto a catalog ``ModelInfo``.

    - ``context`` defaults to 32000 and is raised for the 1.5 generation,
      whose listings under-report it.
    - ``completion`` defaults to 8192 and is capped at 128000.
    - A missing ``displayName`` falls back to the model id.
    """
    model_name = model.short_name
    context_window = model.input_token_limit or DEFAULT_CONTEXT_WINDOW
    for marker, window in CONTEXT_WINDOW_OVERRIDES:
        if marker in model_name:
            context_window = window
    completion_tokens = min(model.output_token_limit or DEFAULT_COMPLETION_TOKENS, MAX_COMPLETION_TOKENS_CAP)
    display_name = model.display_name or model_name
    return ModelInfo(
        name=model_name,
        label=f"{display_name} ({context_label(context_window)} context)",
        provider=PROVIDER,
        max_token_allowed=context_window,
        max_completion_tokens=completion_tokens,
    )


def _parse_entries(raw_models: List[Any]) -> List[ListedModel]:
    """Parse raw entries, skipping ones without a string ``name``."""
    out: List[ListedModel] = []
    for raw in raw_models:
        if not isinstance(raw, dict) or not isinstance(raw.get("name"), str):
            continue
        try:
            out.append(ListedModel.model_validate(raw))
        except ValidationError:
            _logger.debug("skipping unparseable model entry %r", raw.get("name"))
    return out


def normalize_models(payload: Any) -> List[ModelInfo]:
    """Validate a ``models.list`` response body and normalize its entries.

    Raises
    ------
    ProviderError
        ``VALIDATION`` when ``payload`` is not an object with a ``models`` list.
    """
    if not isinstance(payload, dict) or not isinstance(payload.get("models"), list):
        raise ProviderError(code=ErrorCode.VALIDATION, message=INVALID_RESPONSE_MESSAGE, provider=PROVIDER)
    return [normalize_model(m) for m in _parse_entries(payload["models"]) if is_listed(m)]


def _fetch_payload(client: httpx.Client, url: str, api_key: str) -> Any:
    """GET the listing and decode it, translating every failure to ``ProviderError``."""
    try:
        resp = client.get(url, params={"key": api_key}, headers={"Content-Type": "application/json"})
    except httpx.HTTPError as e:
        code = classify_exception(e)
        raise ProviderError(
            code=code,
            message=f"Failed to fetch models from Google API: {type(e).__name__}",
            provider=PROVIDER,
            retryable=is_retryable(code),
            raw=e,
        ) from e
    if not resp.is_success:
        code = code_for_status(resp.status_code)
        raise ProviderError(
            code=code,
            message=f"Failed to fetch models from Google API: {resp.status_code} {resp.reason_phrase}",
            provider=PROVIDER,
            http_status=resp.status_code,
            retryable=is_retryable(code),
        )
    try:
        return resp.json()
    except ValueError as e:
        raise ProviderError(
            code=ErrorCode.VALIDATION,
            message=INVALID_RESPONSE_MESSAGE,
            provider=PROVIDER,
            http_status=resp.status_code,
            raw=e,
        ) from e


def fetch_models(
    api_key: str,
    *,
    base_url: str,
    api_version: str,
    client: Optional[httpx.Client] = None,
) -> List[ModelInfo]:
    """Fetch the vendor listing and return the normalized, filtered catalog.

    Parameters
    ----------
    api_key: str
        Credential sent as the ``key`` query parameter.
    base_url, api_version: str
        Endpoint pieces; the request goes to ``{base_url}/{api_version}/models``.
    client: Optional[httpx.Client]
        Client to use instead of the shared pool.

    Raises
    ------
    ProviderError
        On transport failures, non-2xx responses and malformed bodies.
    """
    url = models_url(base_url, api_version)
    http = client if client is not None else get_httpx_client(None, HTTP_POOL_PURPOSE)
    ctx = LogContext(provider=PROVIDER, api_version=api_version).bind(url=url)
    normalized_log_event(_logger, "models.fetch.start", ctx, phase="start")
    t0 = time.perf_counter()
    try:
        payload = _fetch_payload(http, url, api_key)
        models = normalize_models(payload)
    except ProviderError as e:
        normalized_log_event(
            _logger,
            "models.fetch.error",
            ctx,
            phase="finalize",
            error=e.message,
            error_code=e.code.value,
            http_status=e.http_status,
        )
        raise
    normalized_log_event(
        _logger,
        "models.fetch.end",
        ctx,
        phase="finalize",
        emitted=bool(models),
        count=len(payload["models"]),
        kept=len(models),
        latency_ms=(time.perf_counter() - t0) * 1000.0,
    )
    return models


__all__ = [
    "ListedModel",
    "INVALID_RESPONSE_MESSAGE",
    "models_url",
    "is_listed",
    "context_label",
    "normalize_model",
    "normalize_models",
    "fetch_models",
]
