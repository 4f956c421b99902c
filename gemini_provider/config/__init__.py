"""Layered configuration for the Google provider adapter.

Sources are merged in a fixed order (later wins):

1. Built-in defaults (``config.defaults``)
2. Optional config file (JSON, or YAML via PyYAML) at ``PROVIDERS_CONFIG_FILE``
3. Environment variables
4. In-code overrides

Environment variables
---------------------
``GOOGLE_MODEL``, ``GOOGLE_BASE_URL``, ``GOOGLE_API_VERSION`` and the API key
names from ``config.env.ENV_ALIASES``. A ``.env`` file (path from
``DOTENV_FILE``, default ``.env``) is read once; it only fills variables that
are unset or hold placeholders.

Config file example
-------------------
```
google:
  model: gemini-2.5-pro
  api_version: v1
  base_url: https://generativelanguage.googleapis.com
```

Public API
----------
* get_provider_config(provider: str, overrides: dict | None = None) -> dict
* get_model(provider: str) -> str | None
* reset_config_cache() -> None
"""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .defaults import (
    GOOGLE_API_VERSION_ENV,
    GOOGLE_BASE_URL_ENV,
    GOOGLE_DEFAULT_API_VERSION,
    GOOGLE_DEFAULT_BASE_URL,
    GOOGLE_DEFAULT_MODEL,
)
from .env import is_placeholder, resolve_provider_key

DEFAULTS: Dict[str, Dict[str, Any]] = {
    "google": {
        "model": GOOGLE_DEFAULT_MODEL,
        "base_url": GOOGLE_DEFAULT_BASE_URL,
        "api_version": GOOGLE_DEFAULT_API_VERSION,
    },
}

# field -> env var, for providers whose names do not follow <PROVIDER>_<FIELD>
ENV_FIELD_OVERRIDES: Dict[str, Dict[str, str]] = {
    "google": {
        "base_url": GOOGLE_BASE_URL_ENV,
        "api_version": GOOGLE_API_VERSION_ENV,
    },
}

ENV_FIELD_MAP = {
    "model": "MODEL",
    "base_url": "BASE_URL",
    "api_version": "API_VERSION",
}

_FILE_CACHE: Optional[Dict[str, Any]] = None
_DOTENV_LOADED = False


def _load_dotenv_once() -> None:
    """Read KEY=VALUE lines from the dotenv file into ``os.environ`` once.

    Comments and blank lines are ignored. Existing variables are only
    replaced when their current value is a placeholder.
    """
    global _DOTENV_LOADED
    if _DOTENV_LOADED:
        return
    path = os.getenv("DOTENV_FILE", ".env")
    try:
        if not os.path.isfile(path):
            return
        with open(path, "r", encoding="utf-8") as fh:
            for line in fh:
                line = line.strip()
                if not line or line.startswith("#") or "=" not in line:
                    continue
                k, v = line.split("=", 1)
                k = k.strip()
                if k.startswith("export "):
                    k = k[len("export "):].strip()
                v = v.strip().strip('"').strip("'")
                if k and (k not in os.environ or is_placeholder(os.environ.get(k))):
                    os.environ[k] = v
    finally:
        _DOTENV_LOADED = True


def _load_external_config() -> Dict[str, Any]:
    """Load and cache the optional config file; unreadable files yield ``{}``."""
    global _FILE_CACHE
    if _FILE_CACHE is not None:
        return _FILE_CACHE
    path = os.getenv("PROVIDERS_CONFIG_FILE")
    if not path or not Path(path).is_file():
        _FILE_CACHE = {}
        return _FILE_CACHE
    text = Path(path).read_text(encoding="utf-8")
    try:
        data = json.loads(text)
    except ValueError:
        try:
            data = yaml.safe_load(text) or {}
        except yaml.YAMLError:
            data = {}
    _FILE_CACHE = data if isinstance(data, dict) else {}
    return _FILE_CACHE


def _env_overrides(provider: str) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    special = ENV_FIELD_OVERRIDES.get(provider, {})
    prefix = provider.upper()
    for field, suffix in ENV_FIELD_MAP.items():
        val = os.getenv(special.get(field, f"{prefix}_{suffix}"))
        if val:
            out[field] = val
    key, _ = resolve_provider_key(provider)
    if key:
        out["api_key"] = key
    return out


def get_provider_config(provider: str, overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Return merged configuration for ``provider``.

    Merge order (later wins): defaults -> config file -> env vars -> overrides.
    ``None`` values in ``overrides`` are ignored.
    """
    _load_dotenv_once()
    name = (provider or "").lower().strip()
    cfg: Dict[str, Any] = {}
    cfg |= DEFAULTS.get(name, {})
    file_cfg = _load_external_config().get(name)
    if isinstance(file_cfg, dict):
        cfg |= file_cfg
    cfg |= _env_overrides(name)
    if overrides:
        cfg |= {k: v for k, v in overrides.items() if v is not None}
    return cfg


def get_model(provider: str) -> Optional[str]:
    return get_provider_config(provider).get("model")


def reset_config_cache() -> None:
    """Forget the cached config file and dotenv state (used by tests)."""
    global _FILE_CACHE, _DOTENV_LOADED
    _FILE_CACHE = None
    _DOTENV_LOADED = False


__all__ = [
    "get_provider_config",
    "get_model",
    "reset_config_cache",
    "DEFAULTS",
]
