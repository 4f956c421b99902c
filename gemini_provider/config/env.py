"""gemini_provider.config.env
==========================

Environment variable names for provider credentials and helpers to read them.

Google keys historically live under several names. ``ENV_ALIASES`` lists
them with the canonical name first to establish precedence. Helpers never
raise on unknown providers or unset variables; they return ``None``.
"""

from __future__ import annotations

import os
from typing import Dict, Iterable, Mapping, Optional, Tuple

from .defaults import GOOGLE_API_TOKEN_KEY

ENV_MAP: Dict[str, str] = {
    "google": GOOGLE_API_TOKEN_KEY,
}

ENV_ALIASES: Dict[str, Tuple[str, ...]] = {
    "google": (GOOGLE_API_TOKEN_KEY, "GEMINI_API_KEY", "GOOGLE_API_KEY"),
}


def is_placeholder(val: Optional[str]) -> bool:
    """Return True if ``val`` looks like a placeholder rather than a real key.

    Heuristics (case-insensitive): contains ``placeholder``, ``changeme`` or
    ``your_``/``your-``, or starts with ``test_``.
    """
    if val is None:
        return False
    v = str(val).strip().lower()
    return (
        "placeholder" in v
        or "changeme" in v
        or v.startswith(("your_", "your-", "test_"))
    )


def get_env_var_name(provider: str) -> Optional[str]:
    """Return the canonical env var name for ``provider`` (case-insensitive)."""
    return ENV_MAP.get(provider.lower()) if provider else None


def get_env_var_candidates(provider: str) -> Iterable[str]:
    """Yield acceptable env var names for ``provider``, canonical first."""
    p = (provider or "").lower()
    canonical = ENV_MAP.get(p)
    if canonical:
        yield canonical
    for alias in ENV_ALIASES.get(p, ()):
        if alias != canonical:
            yield alias


def resolve_provider_key(
    provider: str, environ: Optional[Mapping[str, str]] = None
) -> Tuple[Optional[str], Optional[str]]:
    """Return ``(value, env_var_used)`` for the first usable key.

    Parameters
    ----------
    provider: str
        Provider identifier (case-insensitive).
    environ: Optional[Mapping[str, str]]
        Mapping to read from; defaults to ``os.environ``.

    Empty and placeholder values are skipped. ``(None, None)`` when nothing
    usable is set.
    """
    env = os.environ if environ is None else environ
    for name in get_env_var_candidates(provider):
        val = env.get(name)
        if val and not is_placeholder(val):
            return val, name
    return None, None


__all__ = [
    "ENV_MAP",
    "ENV_ALIASES",
    "is_placeholder",
    "get_env_var_name",
    "get_env_var_candidates",
    "resolve_provider_key",
]
