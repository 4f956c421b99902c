"""GoogleProvider adapter.

Plugs Google's Generative Language API into the front end's provider
registry. The provider publishes a static catalog, refreshes it from the
vendor's ``models`` endpoint on demand, and builds configured model handles.

Credential precedence (first non-empty wins):
    1. ``api_keys["Google"]`` passed per request by the front end
    2. ``settings.api_key`` from the provider settings
    3. ``server_env["GOOGLE_GENERATIVE_AI_API_KEY"]``
    4. process environment via ``config.get_provider_config("google")``

Endpoint: ``GOOGLE_BASE_URL`` / ``GOOGLE_API_VERSION`` from ``server_env``,
then from configuration, then the defaults (public endpoint, ``v1beta``).
"""

from __future__ import annotations

from datetime import datetime, timezone
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

import httpx

from ..base.errors import ErrorCode, ProviderError
from ..base.http import SharedTransport
from ..base.logging import LogContext, get_logger, normalized_log_event
from ..base.models import ModelInfo, ModelRegistrySnapshot, ProviderSettings
from ..base.timeouts import get_timeout_config
from ..config import get_provider_config
from ..config.defaults import (
    GOOGLE_API_KEY_LINK,
    GOOGLE_API_TOKEN_KEY,
    GOOGLE_API_VERSION_ENV,
    GOOGLE_BASE_URL_ENV,
    GOOGLE_DEFAULT_API_VERSION,
    GOOGLE_DEFAULT_BASE_URL,
    GOOGLE_PROVIDER_NAME,
)
from .catalog import static_models
from .get_google_models import fetch_models
from .model import GoogleGenerativeModel

CONFIG_SECTION = "google"

SettingsLike = Union[ProviderSettings, Mapping[str, Any]]


def _coerce_settings(settings: Optional[SettingsLike]) -> Optional[ProviderSettings]:
    """Accept the front end's plain settings mapping as well as the DTO."""
    if settings is None or isinstance(settings, ProviderSettings):
        return settings
    return ProviderSettings.from_dict(settings)


class GoogleProvider:
    """Google model provider.

    Parameters
    ----------
    transport:
        Optional ``httpx`` transport used for every outbound call, both
        listing and model handles. Meant for proxies and tests; by default
        listing uses the shared client pool and handles use a plain
        ``HTTPTransport``.
    """

    name = GOOGLE_PROVIDER_NAME
    get_api_key_link = GOOGLE_API_KEY_LINK
    config = MappingProxyType({"api_token_key": GOOGLE_API_TOKEN_KEY})

    def __init__(self, transport: Optional[httpx.BaseTransport] = None) -> None:
        self._transport = transport
        self._listing_client: Optional[httpx.Client] = None
        self._logger = get_logger("google.provider")

    def __repr__(self) -> str:
        return f"GoogleProvider(name={self.name!r})"

    # ---- catalog ----
    @property
    def static_models(self) -> List[ModelInfo]:
        """The built-in catalog (a fresh list on every access)."""
        return static_models()

    # ---- resolution ----
    def resolve_api_key(
        self,
        api_keys: Optional[Mapping[str, str]] = None,
        settings: Optional[SettingsLike] = None,
        server_env: Optional[Mapping[str, Any]] = None,
    ) -> Optional[str]:
        """Return the API key to use, or ``None`` when none is configured."""
        if api_keys and api_keys.get(self.name):
            return api_keys[self.name]
        settings = _coerce_settings(settings)
        if settings is not None and settings.api_key:
            return settings.api_key
        if server_env and server_env.get(GOOGLE_API_TOKEN_KEY):
            return str(server_env[GOOGLE_API_TOKEN_KEY])
        return get_provider_config(CONFIG_SECTION).get("api_key") or None

    def resolve_endpoint(self, server_env: Optional[Mapping[str, Any]] = None) -> Tuple[str, str]:
        """Return ``(base_url, api_version)``; the base URL has no trailing slash."""
        env = server_env or {}
        cfg = get_provider_config(CONFIG_SECTION)
        api_version = env.get(GOOGLE_API_VERSION_ENV) or cfg.get("api_version") or GOOGLE_DEFAULT_API_VERSION
        base_url = env.get(GOOGLE_BASE_URL_ENV) or cfg.get("base_url") or GOOGLE_DEFAULT_BASE_URL
        return str(base_url).rstrip("/"), str(api_version)

    # ---- dynamic discovery ----
    def _client_for_listing(self) -> Optional[httpx.Client]:
        if self._transport is None:
            return None
        if self._listing_client is None or self._listing_client.is_closed:
            self._listing_client = httpx.Client(
                transport=SharedTransport(self._transport),
                timeout=get_timeout_config().for_request(),
            )
        return self._listing_client

    def get_dynamic_models(
        self,
        api_keys: Optional[Mapping[str, str]] = None,
        settings: Optional[SettingsLike] = None,
        server_env: Optional[Mapping[str, Any]] = None,
    ) -> List[ModelInfo]:
        """Fetch the vendor's model list and normalize it.

        Raises
        ------
        ProviderError
            ``AUTH`` when no key is configured; otherwise whatever
            :func:`fetch_models` raises for transport, status or format errors.
        """
        api_key = self.resolve_api_key(api_keys, settings, server_env)
        if not api_key:
            raise ProviderError(
                code=ErrorCode.AUTH,
                message=f"Missing Api Key configuration for {self.name} provider",
                provider=self.name,
            )
        base_url, api_version = self.resolve_endpoint(server_env)
        return fetch_models(
            api_key,
            base_url=base_url,
            api_version=api_version,
            client=self._client_for_listing(),
        )

    def list_models(
        self,
        refresh: bool = False,
        api_keys: Optional[Mapping[str, str]] = None,
        settings: Optional[SettingsLike] = None,
        server_env: Optional[Mapping[str, Any]] = None,
    ) -> ModelRegistrySnapshot:
        """Return the catalog, optionally refreshed from the vendor.

        With ``refresh=True`` the dynamic entries are merged over the static
        ones: a dynamic entry replaces the static entry of the same name in
        place, new names are appended. Discovery errors propagate.
        """
        fetched_at = datetime.now(timezone.utc).isoformat()
        models = self.static_models
        if not refresh:
            return ModelRegistrySnapshot(provider=self.name, models=models, fetched_via="static", fetched_at=fetched_at)

        dynamic = self.get_dynamic_models(api_keys, settings, server_env)
        by_name: Dict[str, ModelInfo] = {m.name: m for m in models}
        for m in dynamic:
            by_name[m.name] = m
        _, api_version = self.resolve_endpoint(server_env)
        return ModelRegistrySnapshot(
            provider=self.name,
            models=list(by_name.values()),
            fetched_via="api",
            fetched_at=fetched_at,
            metadata={"api_version": api_version, "dynamic_count": len(dynamic)},
        )

    # ---- model handles ----
    def get_model_instance(
        self,
        model: str,
        server_env: Optional[Mapping[str, Any]] = None,
        api_keys: Optional[Mapping[str, str]] = None,
        provider_settings: Optional[Mapping[str, SettingsLike]] = None,
    ) -> GoogleGenerativeModel:
        """Build a handle for ``model`` bound to the resolved key and endpoint.

        Raises
        ------
        ProviderError
            ``AUTH`` when no key is configured.
        """
        settings = provider_settings.get(self.name) if provider_settings else None
        api_key = self.resolve_api_key(api_keys, settings, server_env)
        if not api_key:
            raise ProviderError(
                code=ErrorCode.AUTH,
                message=f"Missing API key for {self.name} provider",
                provider=self.name,
                model=model,
            )
        base_url, api_version = self.resolve_endpoint(server_env)
        handle = GoogleGenerativeModel(
            model,
            api_key=api_key,
            base_url=f"{base_url}/{api_version}",
            provider=self.name,
            transport=self._transport,
        )
        normalized_log_event(
            self._logger,
            "model.instance",
            LogContext(provider=self.name, model=handle.model_id),
            phase="init",
            base_url=handle.base_url,
        )
        return handle

    def close(self) -> None:
        if self._listing_client is not None:
            self._listing_client.close()
            self._listing_client = None


__all__ = ["GoogleProvider", "CONFIG_SECTION"]
