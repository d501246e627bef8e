"""Shared pytest configuration and fixtures for Gemini OAuth Headers tests."""

from typing import Any

import pytest

from gemini_oauth_headers.core.provider_config import ProviderConfig
from gemini_oauth_headers.transformers import GeminiOAuthHeadersTransformer

pytest_plugins = ["tests.fixtures.mock_http"]

CONFIG_ENV_VARS = (
    "LOG_LEVEL",
    "GEMINI_OAUTH_TOKEN_PREFIX",
    "GEMINI_OAUTH_LOG_PREFIX_CHARS",
    "GEMINI_OAUTH_CREDS_FILE",
)

VALID_TOKEN = "ya29.ABCDEF1234567890"


class RecordingSink:
    """DiagnosticSink that keeps every emitted record for assertions."""

    def __init__(self) -> None:
        self.infos: list[tuple[dict[str, Any], str]] = []
        self.warnings: list[tuple[dict[str, Any], str]] = []

    def info(self, record, message: str) -> None:
        self.infos.append((dict(record), message))

    def warn(self, record, message: str) -> None:
        self.warnings.append((dict(record), message))

    def rendered(self) -> str:
        return "\n".join(
            f"{record} {message}" for record, message in [*self.infos, *self.warnings]
        )


@pytest.fixture
def fallback_sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def transformer(fallback_sink: RecordingSink) -> GeminiOAuthHeadersTransformer:
    return GeminiOAuthHeadersTransformer(fallback_sink)


@pytest.fixture
def oauth_provider() -> ProviderConfig:
    """Gemini provider with OAuth mode enabled and a Google-style token."""
    return ProviderConfig(
        name="gemini",
        api_key=VALID_TOKEN,
        use_oauth_token=True,
        api_base_url="https://generativelanguage.googleapis.com/v1beta/models/",
        models=("gemini-2.5-flash", "gemini-2.5-pro"),
    )


@pytest.fixture
def request_body() -> dict[str, Any]:
    return {"contents": [{"role": "user", "parts": [{"text": "Hello"}]}]}


@pytest.fixture(autouse=True)
def clean_config_environment(monkeypatch):
    """Keep tests independent of the developer's shell and .env file."""
    for name in CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def pytest_collection_modifyitems(config, items):
    """Add markers to tests based on their location."""
    for item in items:
        if "tests/unit/" in str(item.fspath) or "tests/cli/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
