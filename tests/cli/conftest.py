import pytest
from typer.testing import CliRunner


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture(autouse=True)
def root_logging_calls(monkeypatch) -> list[str]:
    """Keep the CLI callback from replacing the root handler; record requested levels."""
    calls: list[str] = []
    monkeypatch.setattr(
        "gemini_oauth_headers.core.logging.configure_root_logging", calls.append
    )
    return calls
