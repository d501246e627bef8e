"""Gemini OAuth header transformer.

Swaps the ``x-goog-api-key`` header for ``Authorization: Bearer <token>``
when a provider sets ``useOAuthToken`` to ``true``. The access token lives
in the provider's ``api_key`` slot. This stage runs after the base
``gemini`` transformer, which has already set ``x-goog-api-key`` from the
same slot.

Configuration example::

    {
      "Providers": [
        {
          "name": "gemini",
          "api_base_url": "https://generativelanguage.googleapis.com/v1beta/models/",
          "api_key": "ya29.a0AfB_byC...",
          "useOAuthToken": true,
          "models": ["gemini-2.5-flash", "gemini-2.5-pro"]
        }
      ]
    }
"""

from __future__ import annotations

from typing import Any

from gemini_oauth_headers.core.diagnostics import DiagnosticContext, DiagnosticSink
from gemini_oauth_headers.core.error_types import ErrorType
from gemini_oauth_headers.core.exceptions import ConfigurationError
from gemini_oauth_headers.core.provider_config import ProviderConfig
from gemini_oauth_headers.transformers.base import (
    HeaderPatch,
    ProviderTransformer,
    RemoveHeader,
    SetHeader,
    TransformOutcome,
)

AUTHORIZATION_HEADER = "Authorization"
API_KEY_HEADER = "x-goog-api-key"
GOOGLE_OAUTH_TOKEN_PREFIX = "ya29."
MAX_LOGGED_TOKEN_CHARS = 10


def token_log_prefix(token: str, max_chars: int = MAX_LOGGED_TOKEN_CHARS) -> str:
    """Return the part of a token that may appear in logs.

    At most ``max_chars`` characters and never more than half the token,
    so short tokens are not revealed in full.
    """
    return token[: min(max_chars, len(token) // 2)]


class GeminiOAuthHeadersTransformer(ProviderTransformer):
    """Replaces API-key authentication with OAuth Bearer authentication.

    The stage holds no per-request state. ``fallback_sink`` receives
    diagnostics when the caller passes no per-request log.
    """

    runs_after = ("gemini",)

    def __init__(
        self,
        fallback_sink: DiagnosticSink,
        *,
        token_prefix: str = GOOGLE_OAUTH_TOKEN_PREFIX,
        log_prefix_chars: int = MAX_LOGGED_TOKEN_CHARS,
    ) -> None:
        self._fallback_sink = fallback_sink
        self._token_prefix = token_prefix
        self._log_prefix_chars = log_prefix_chars

    @property
    def name(self) -> str:
        return "gemini-oauth-headers"

    def evaluate(
        self,
        request_body: Any,
        provider: ProviderConfig,
        context: DiagnosticContext | None = None,
    ) -> TransformOutcome:
        if not provider.uses_oauth:
            return TransformOutcome(body=request_body)

        token = provider.api_key
        if not token or not token.strip():
            raise ConfigurationError(
                provider.name,
                f'OAuth token missing for provider "{provider.name}". '
                f"Please set api_key to your OAuth access token "
                f"(e.g., from ~/.gemini/oauth_creds.json).",
            )

        sink = self._fallback_sink
        if context is not None and context.log is not None:
            sink = context.log

        token_prefix = token_log_prefix(token, self._log_prefix_chars)

        if not token.startswith(self._token_prefix):
            sink.warn(
                {
                    "provider": provider.name,
                    "error_type": ErrorType.ADVISORY_WARNING.value,
                    "tokenPrefix": token_prefix,
                    "tokenLength": len(token),
                },
                f'OAuth token for provider "{provider.name}" does not start with '
                f'"{self._token_prefix}" - this may not be a valid Google OAuth token.',
            )

        sink.info(
            {
                "provider": provider.name,
                "useOAuthToken": True,
                "tokenPrefix": token_prefix,
                "tokenLength": len(token),
            },
            f'Using OAuth Bearer token authentication for provider "{provider.name}": '
            f"{token_prefix}... ({len(token)} chars)",
        )

        return TransformOutcome(
            body=request_body,
            header_patch=HeaderPatch(
                headers={
                    AUTHORIZATION_HEADER: SetHeader(f"Bearer {token}"),
                    API_KEY_HEADER: RemoveHeader(),
                }
            ),
        )
