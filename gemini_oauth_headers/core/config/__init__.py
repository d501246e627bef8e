from gemini_oauth_headers.core.config.schema import ConfigSchema, EnvVarSpec
from gemini_oauth_headers.core.config.settings import AdapterConfig, AdapterSettings
from gemini_oauth_headers.core.config.validation import ConfigError, load_env_var, validate_all

__all__ = [
    "AdapterConfig",
    "AdapterSettings",
    "ConfigError",
    "ConfigSchema",
    "EnvVarSpec",
    "load_env_var",
    "validate_all",
]
