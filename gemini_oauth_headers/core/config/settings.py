"""Header stage configuration module.

Loads the OAuth header stage settings through the schema so that type
coercion and validation happen in one place.
"""

from dataclasses import dataclass

from gemini_oauth_headers.core.config.schema import ConfigSchema
from gemini_oauth_headers.core.config.validation import load_env_var


@dataclass(frozen=True)
class AdapterConfig:
    """Immutable settings for the OAuth header stage.

    Attributes:
        log_level: Root logging level name
        token_prefix: Expected access-token prefix for the advisory check
        log_prefix_chars: Maximum token characters exposed in diagnostics
        creds_file: Path of the local Gemini CLI credentials file
    """

    log_level: str = "INFO"
    token_prefix: str = "ya29."
    log_prefix_chars: int = 10
    creds_file: str = "~/.gemini/oauth_creds.json"


class AdapterSettings:
    """Manages header stage configuration from environment variables."""

    @staticmethod
    def load() -> AdapterConfig:
        """Load configuration using schema-based validation.

        Raises:
            ConfigError: If any environment variable fails validation
        """
        return AdapterConfig(
            log_level=load_env_var(ConfigSchema.LOG_LEVEL),
            token_prefix=load_env_var(ConfigSchema.GEMINI_OAUTH_TOKEN_PREFIX),
            log_prefix_chars=load_env_var(ConfigSchema.GEMINI_OAUTH_LOG_PREFIX_CHARS),
            creds_file=load_env_var(ConfigSchema.GEMINI_OAUTH_CREDS_FILE),
        )
