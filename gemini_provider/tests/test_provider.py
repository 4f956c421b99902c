"""GoogleProvider: credential and endpoint resolution, discovery, handles."""
from __future__ import annotations

import httpx
import pytest

from gemini_provider import GoogleGenerativeModel, GoogleProvider, create
from gemini_provider.base.errors import ErrorCode, ProviderError
from gemini_provider.base.interfaces import (
    DynamicModelProvider,
    LLMProvider,
    ModelInstanceProvider,
    ModelListingProvider,
)
from gemini_provider.base.models import ProviderSettings
from gemini_provider.tests.helpers import RecordingTransport, events, generate_payload, listing_payload


def _provider(handler=None):
    transport = RecordingTransport(handler or (lambda r: httpx.Response(200, json=listing_payload())))
    return GoogleProvider(transport=transport), transport


def test_provider_satisfies_protocols():
    p = GoogleProvider()
    assert isinstance(p, DynamicModelProvider)
    assert isinstance(p, ModelInstanceProvider)
    assert isinstance(p, ModelListingProvider)
    handle = p.get_model_instance("gemini-2.5-flash", api_keys={"Google": "k"})
    assert isinstance(handle, LLMProvider)
    handle.close()


def test_api_key_precedence(monkeypatch):
    p = GoogleProvider()
    monkeypatch.setenv("GOOGLE_GENERATIVE_AI_API_KEY", "from-process")
    server_env = {"GOOGLE_GENERATIVE_AI_API_KEY": "from-server"}
    settings = ProviderSettings(api_key="from-settings")
    assert p.resolve_api_key({"Google": "from-request"}, settings, server_env) == "from-request"
    assert p.resolve_api_key({"OpenAI": "other"}, settings, server_env) == "from-settings"
    assert p.resolve_api_key(None, None, server_env) == "from-server"
    assert p.resolve_api_key() == "from-process"


def test_api_key_from_alias_and_placeholders_ignored(monkeypatch):
    p = GoogleProvider()
    monkeypatch.setenv("GOOGLE_GENERATIVE_AI_API_KEY", "changeme")
    monkeypatch.setenv("GEMINI_API_KEY", "alias-key")
    assert p.resolve_api_key() == "alias-key"


def test_api_key_missing_everywhere():
    assert GoogleProvider().resolve_api_key({"Google": ""}, None, {}) is None


def test_settings_accept_front_end_dict():
    p = GoogleProvider()
    assert p.resolve_api_key(None, {"apiKey": "dict-key", "enabled": True}) == "dict-key"


def test_resolve_endpoint_defaults_and_server_env(monkeypatch):
    p = GoogleProvider()
    assert p.resolve_endpoint() == ("https://generativelanguage.googleapis.com", "v1beta")
    monkeypatch.setenv("GOOGLE_API_VERSION", "v1")
    assert p.resolve_endpoint() == ("https://generativelanguage.googleapis.com", "v1")
    env = {"GOOGLE_BASE_URL": "https://proxy.example/", "GOOGLE_API_VERSION": "v1alpha"}
    assert p.resolve_endpoint(env) == ("https://proxy.example", "v1alpha")


def test_get_dynamic_models_requires_key():
    p, transport = _provider()
    with pytest.raises(ProviderError) as ei:
        p.get_dynamic_models()
    assert ei.value.code is ErrorCode.AUTH
    assert ei.value.message == "Missing Api Key configuration for Google provider"
    assert transport.requests == []


def test_get_dynamic_models_uses_server_env_endpoint():
    p, transport = _provider()
    env = {"GOOGLE_BASE_URL": "https://proxy.example", "GOOGLE_API_VERSION": "v1"}
    models = p.get_dynamic_models({"Google": "k"}, None, env)
    assert [m.name for m in models] == ["gemini-2.5-pro", "gemini-1.5-pro-002", "gemini-2.0-flash-exp"]
    assert str(transport.requests[0].url) == "https://proxy.example/v1/models?key=k"


def test_list_models_static_without_refresh():
    p, transport = _provider()
    snap = p.list_models()
    assert snap.fetched_via == "static"
    assert snap.names() == ["gemini-2.5-pro", "gemini-2.5-flash"]
    assert transport.requests == []


def test_list_models_refresh_merges_dynamic_over_static():
    p, _ = _provider()
    snap = p.list_models(refresh=True, api_keys={"Google": "k"})
    assert snap.fetched_via == "api"
    assert snap.names() == ["gemini-2.5-pro", "gemini-2.5-flash", "gemini-1.5-pro-002", "gemini-2.0-flash-exp"]
    assert snap.get("gemini-2.5-pro").label == "Gemini 2.5 Pro (1M context)"
    assert snap.get("gemini-2.5-flash").label == "Gemini 2.5 Flash"
    assert snap.metadata == {"api_version": "v1beta", "dynamic_count": 3}


def test_list_models_refresh_propagates_errors():
    p, _ = _provider(lambda r: httpx.Response(500))
    with pytest.raises(ProviderError) as ei:
        p.list_models(refresh=True, api_keys={"Google": "k"})
    assert ei.value.code is ErrorCode.SERVER_ERROR


def test_get_model_instance_requires_key():
    with pytest.raises(ProviderError) as ei:
        GoogleProvider().get_model_instance("gemini-2.5-pro")
    assert ei.value.code is ErrorCode.AUTH
    assert ei.value.message == "Missing API key for Google provider"
    assert ei.value.model == "gemini-2.5-pro"


def test_get_model_instance_configures_handle(log_records):
    p, transport = _provider(lambda r: httpx.Response(200, json=generate_payload("pong")))
    handle = p.get_model_instance(
        "gemini-2.5-pro",
        server_env={"GOOGLE_API_VERSION": "v1"},
        provider_settings={"Google": ProviderSettings(api_key="settings-key")},
    )
    assert isinstance(handle, GoogleGenerativeModel)
    assert handle.base_url == "https://generativelanguage.googleapis.com/v1"
    assert handle.provider == "Google"
    body = {"systemInstruction": {"parts": [{"text": "sys"}]}, "contents": [{"role": "user", "parts": [{"text": "ping"}]}]}
    handle.generate_content(body)
    sent = transport.requests[0]
    assert sent.headers["x-goog-api-key"] == "settings-key"
    assert b"system_instruction" in sent.content
    assert b"systemInstruction" not in sent.content
    ev = [e for e in events(log_records) if e["event"] == "model.instance"]
    assert ev and ev[0]["base_url"] == handle.base_url
    handle.close()


def test_closing_handle_keeps_provider_transport_usable():
    p, transport = _provider(lambda r: httpx.Response(200, json=generate_payload()))
    p.get_model_instance("gemini-2.5-flash", api_keys={"Google": "k"}).close()
    p.get_model_instance("gemini-2.5-flash", api_keys={"Google": "k"}).generate_content({"contents": []})
    assert len(transport.requests) == 1


def test_create_aliases_and_errors():
    assert isinstance(create(), GoogleProvider)
    assert isinstance(create("Gemini"), GoogleProvider)
    with pytest.raises(ProviderError) as ei:
        create("nope")
    assert ei.value.code is ErrorCode.UNSUPPORTED
    with pytest.raises(ProviderError) as ei:
        create("google", bogus=True)
    assert ei.value.code is ErrorCode.VALIDATION


def test_listing_client_uses_configured_http_timeout(monkeypatch):
    monkeypatch.setenv("PT_TIMEOUT_HTTP_SECONDS", "90")
    p, _ = _provider()
    timeout = p._client_for_listing().timeout
    assert timeout.read == 90.0
    assert timeout.connect == 30.0
    p.close()


def test_closing_provider_leaves_shared_transport_open():
    closed = []

    class _Transport(RecordingTransport):
        def close(self):
            closed.append(True)

    transport = _Transport(lambda r: httpx.Response(200, json=generate_payload("still here")))
    p = GoogleProvider(transport=transport)
    handle = p.get_model_instance("gemini-2.5-flash", api_keys={"Google": "k"})
    p._client_for_listing()
    p.close()
    assert closed == []
    assert handle.generate_content({"contents": []})["candidates"][0]["content"]["parts"][0]["text"] == "still here"
    handle.close()
    assert closed == []


def test_settings_dict_keeps_only_the_api_key():
    parsed = ProviderSettings.from_dict({"enabled": False, "baseUrl": "https://ignored", "apiKey": "k"})
    assert parsed == ProviderSettings(api_key="k")
    assert ProviderSettings.from_dict(None) == ProviderSettings()
