"""Header stage factory.

The composition root: wires the process-wide logging sink and the
environment settings into the otherwise self-contained stage.
"""

import logging

from gemini_oauth_headers.core.config import AdapterConfig, AdapterSettings
from gemini_oauth_headers.core.diagnostics import LoggerSink
from gemini_oauth_headers.core.logging import PACKAGE_LOGGER_NAME, ensure_fallback_handler
from gemini_oauth_headers.transformers.gemini_oauth_headers import GeminiOAuthHeadersTransformer


class TransformerFactory:
    """Factory for creating configured header stages."""

    @staticmethod
    def create_default(config: AdapterConfig | None = None) -> GeminiOAuthHeadersTransformer:
        """Create the stage with diagnostics routed to the package logger.

        When the process has no logging configured, the package logger gets a
        stderr handler at INFO so activation messages stay visible.

        Args:
            config: Settings to use. Loaded from the environment when omitted.

        Returns:
            A ready-to-use GeminiOAuthHeadersTransformer.
        """
        if config is None:
            config = AdapterSettings.load()

        logger = logging.getLogger(PACKAGE_LOGGER_NAME)
        ensure_fallback_handler(logger)
        return GeminiOAuthHeadersTransformer(
            LoggerSink(logger),
            token_prefix=config.token_prefix,
            log_prefix_chars=config.log_prefix_chars,
        )
