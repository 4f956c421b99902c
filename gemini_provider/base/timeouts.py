"""Timeout configuration for outbound HTTP calls.

``get_timeout_config()`` parses environment overrides once and caches the
result until one of the variables changes. Supported variables (all
optional, positive floats):

    PT_TIMEOUT_HTTP_SECONDS     non-streaming REST calls (model listing, generateContent)
    PT_TIMEOUT_START_SECONDS    connect / first byte of a streaming call
    PT_TIMEOUT_STREAM_SECONDS   idle time between streamed chunks
"""
from __future__ import annotations

import os
from dataclasses import dataclass

import httpx

_ENV_NAMES = ("PT_TIMEOUT_HTTP_SECONDS", "PT_TIMEOUT_START_SECONDS", "PT_TIMEOUT_STREAM_SECONDS")


@dataclass(frozen=True)
class TimeoutConfig:
    """Normalized timeout values in seconds."""

    http_timeout_seconds: float = 30.0
    start_timeout_seconds: float = 30.0
    stream_timeout_seconds: float = 60.0

    def for_request(self) -> httpx.Timeout:
        """Timeout for a single request/response exchange."""
        return httpx.Timeout(self.http_timeout_seconds, connect=self.start_timeout_seconds)

    def for_stream(self) -> httpx.Timeout:
        """Timeout for a streamed response; ``read`` bounds the gap between chunks."""
        return httpx.Timeout(
            self.http_timeout_seconds,
            connect=self.start_timeout_seconds,
            read=self.stream_timeout_seconds,
        )


_CACHED: TimeoutConfig | None = None
_ENV_GUARD: str | None = None


def _parse_env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        val = float(raw)
    except ValueError:
        return default
    return val if val > 0 else default


def get_timeout_config() -> TimeoutConfig:
    """Return the process-cached :class:`TimeoutConfig`."""
    global _CACHED, _ENV_GUARD  # noqa: PLW0603 - module cache
    guard = "/".join(os.getenv(n, "") for n in _ENV_NAMES)
    if _CACHED is not None and _ENV_GUARD == guard:
        return _CACHED
    _CACHED = TimeoutConfig(
        http_timeout_seconds=_parse_env_float("PT_TIMEOUT_HTTP_SECONDS", 30.0),
        start_timeout_seconds=_parse_env_float("PT_TIMEOUT_START_SECONDS", 30.0),
        stream_timeout_seconds=_parse_env_float("PT_TIMEOUT_STREAM_SECONDS", 60.0),
    )
    _ENV_GUARD = guard
    return _CACHED


__all__ = ["TimeoutConfig", "get_timeout_config"]
