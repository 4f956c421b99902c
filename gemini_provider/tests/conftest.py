"""Pytest configuration for the gemini_provider test suite.

Every test runs with Google-related environment variables cleared, the
config caches reset and no ``.env`` file in play, so results never depend on
the developer's shell. Pooled HTTP clients are closed after each test.
"""

from __future__ import annotations

import logging
from typing import Iterator, List

import pytest

from gemini_provider.base.http import close_all_clients
from gemini_provider.base.logging import get_logger
from gemini_provider.config import reset_config_cache

_ENV_VARS = (
    "GOOGLE_GENERATIVE_AI_API_KEY",
    "GEMINI_API_KEY",
    "GOOGLE_API_KEY",
    "GOOGLE_BASE_URL",
    "GOOGLE_API_VERSION",
    "GOOGLE_MODEL",
    "PROVIDERS_CONFIG_FILE",
    "GEMINI_PROVIDER_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> Iterator[None]:
    """Clear provider env vars and point the dotenv loader at a missing file."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("DOTENV_FILE", str(tmp_path / "missing.env"))
    reset_config_cache()
    yield
    reset_config_cache()
    close_all_clients()


class _ListHandler(logging.Handler):
    """Collect records emitted under the base logger."""

    def __init__(self) -> None:
        super().__init__(level=logging.DEBUG)
        self.records: List[logging.LogRecord] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)


@pytest.fixture()
def log_records() -> Iterator[List[logging.LogRecord]]:
    """Records written to the (non-propagating) base logger during the test."""
    base = get_logger()
    handler = _ListHandler()
    base.addHandler(handler)
    try:
        yield handler.records
    finally:
        base.removeHandler(handler)
