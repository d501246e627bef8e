"""
Exception hierarchy for the Gemini OAuth header stage.

All exceptions inherit from OAuthHeadersError, allowing the host pipeline
to catch every stage-specific error with a single except clause.

Example:
    >>> try:
    ...     transformer.evaluate(body, provider)
    ... except OAuthHeadersError as e:
    ...     print(f"Request aborted: {e}")
"""

from __future__ import annotations

from gemini_oauth_headers.core.error_types import ErrorType


class OAuthHeadersError(Exception):
    """Base exception for all header stage errors."""

    error_type: ErrorType | None = None


class ConfigurationError(OAuthHeadersError):
    """Raised when OAuth mode is requested but no access token is configured.

    This is the only fatal condition of the stage. It is raised synchronously
    so the host pipeline aborts the request before anything is sent upstream.

    Attributes:
        provider_name: Name of the misconfigured provider
        message: Human-readable explanation including the fix

    Example:
        >>> ConfigurationError("gemini", "OAuth token missing")
        ConfigurationError(provider_name='gemini', message='OAuth token missing')
    """

    error_type = ErrorType.CONFIGURATION_ERROR

    def __init__(self, provider_name: str, message: str) -> None:
        self.provider_name = provider_name
        self.message = message
        super().__init__(message)

    def __repr__(self) -> str:
        return f"ConfigurationError(provider_name={self.provider_name!r}, message={self.message!r})"


__all__ = [
    "OAuthHeadersError",
    "ConfigurationError",
]
