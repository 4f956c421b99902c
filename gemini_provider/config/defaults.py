"""gemini_provider.config.defaults
===============================

Constants for the Google provider adapter. No I/O; environment variables and
the optional config file override these through ``config.get_provider_config``.
"""

from __future__ import annotations

# ---- Provider identity ----
GOOGLE_PROVIDER_NAME = "Google"
GOOGLE_API_KEY_LINK = "https://aistudio.google.com/app/apikey"
# Name under which the front end / server env stores the API key.
GOOGLE_API_TOKEN_KEY = "GOOGLE_GENERATIVE_AI_API_KEY"

# ---- Endpoint ----
GOOGLE_DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com"
GOOGLE_DEFAULT_API_VERSION = "v1beta"
GOOGLE_BASE_URL_ENV = "GOOGLE_BASE_URL"
GOOGLE_API_VERSION_ENV = "GOOGLE_API_VERSION"

# ---- Model defaults ----
GOOGLE_DEFAULT_MODEL = "gemini-2.5-flash"

# ---- Dynamic discovery normalization ----
# Listings with an output limit at or below this are dropped.
MIN_OUTPUT_TOKEN_LIMIT = 8000
# Used when a listing omits inputTokenLimit.
DEFAULT_CONTEXT_WINDOW = 32000
# Used when a listing omits outputTokenLimit.
DEFAULT_COMPLETION_TOKENS = 8192
MAX_COMPLETION_TOKENS_CAP = 128000
# Context windows the listing under-reports for the 1.5 generation.
CONTEXT_WINDOW_OVERRIDES = (
    ("gemini-1.5-pro", 2_000_000),
    ("gemini-1.5-flash", 1_000_000),
)


__all__ = [
    "GOOGLE_PROVIDER_NAME",
    "GOOGLE_API_KEY_LINK",
    "GOOGLE_API_TOKEN_KEY",
    "GOOGLE_DEFAULT_BASE_URL",
    "GOOGLE_DEFAULT_API_VERSION",
    "GOOGLE_BASE_URL_ENV",
    "GOOGLE_API_VERSION_ENV",
    "GOOGLE_DEFAULT_MODEL",
    "MIN_OUTPUT_TOKEN_LIMIT",
    "DEFAULT_CONTEXT_WINDOW",
    "DEFAULT_COMPLETION_TOKENS",
    "MAX_COMPLETION_TOKENS_CAP",
    "CONTEXT_WINDOW_OVERRIDES",
]
