"""Error taxonomy parts. Prefer importing from ``gemini_provider.base.errors``."""

from .error_code import ErrorCode
from .provider_error import ProviderError
from .classification import classify_exception, code_for_status, is_retryable

__all__ = ["ErrorCode", "ProviderError", "classify_exception", "code_for_status", "is_retryable"]
