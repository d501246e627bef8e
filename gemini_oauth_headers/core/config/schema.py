"""Declarative schema for environment variable configuration.

This module provides a single source of truth for all environment variables,
including automatic type coercion, validation, and documentation generation.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class EnvVarSpec:
    """Specification for a single environment variable.

    Attributes:
        name: Environment variable name (e.g., "LOG_LEVEL")
        default: Default value if env var not set
        type_hint: Type for validation (int or str)
        description: Human-readable description for docs
        validator: Optional custom validation function
    """

    name: str
    default: Any
    type_hint: type
    description: str
    validator: Callable[[Any], bool] | None = None


class ConfigSchema:
    """Registry of all configuration environment variables."""

    # === Logging ===

    LOG_LEVEL = EnvVarSpec(
        name="LOG_LEVEL",
        default="INFO",
        type_hint=str,
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL); unknown values fall back to INFO",
    )

    # === OAuth Header Stage ===

    GEMINI_OAUTH_TOKEN_PREFIX = EnvVarSpec(
        name="GEMINI_OAUTH_TOKEN_PREFIX",
        default="ya29.",
        type_hint=str,
        description="Expected prefix of Google OAuth access tokens (advisory check only)",
        validator=lambda x: len(x) > 0,
    )

    GEMINI_OAUTH_LOG_PREFIX_CHARS = EnvVarSpec(
        name="GEMINI_OAUTH_LOG_PREFIX_CHARS",
        default=10,
        type_hint=int,
        description="Maximum number of token characters shown in diagnostics",
        validator=lambda x: 0 <= x <= 10,
    )

    GEMINI_OAUTH_CREDS_FILE = EnvVarSpec(
        name="GEMINI_OAUTH_CREDS_FILE",
        default="~/.gemini/oauth_creds.json",
        type_hint=str,
        description="Gemini CLI credentials file inspected by 'goh oauth token'",
    )

    @classmethod
    def all_specs(cls) -> dict[str, EnvVarSpec]:
        """Get all environment variable specifications.

        Returns:
            Dictionary mapping spec names to EnvVarSpec objects
        """
        return {
            name: getattr(cls, name)
            for name in dir(cls)
            if isinstance(getattr(cls, name), EnvVarSpec)
        }

    @classmethod
    def get_spec(cls, name: str) -> EnvVarSpec | None:
        """Get specification for a specific env var by name."""
        for spec in cls.all_specs().values():
            if spec.name == name:
                return spec
        return None
