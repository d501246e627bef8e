"""Provider configuration commands."""

import json
from pathlib import Path
from typing import Any

import typer
from rich.console import Console
from rich.table import Table

from gemini_oauth_headers.core.config import ConfigError
from gemini_oauth_headers.core.exceptions import ConfigurationError
from gemini_oauth_headers.core.provider_config import ProviderConfig
from gemini_oauth_headers.transformers import SetHeader, TransformerFactory
from gemini_oauth_headers.transformers.gemini_oauth_headers import token_log_prefix

app = typer.Typer(help="Provider configuration checks")


def load_provider_entries(path: Path) -> list[dict[str, Any]]:
    """Read the ``Providers`` list from a JSON configuration file."""
    with path.open(encoding="utf-8") as f:
        data = json.load(f)
    entries = (data.get("Providers") or []) if isinstance(data, dict) else []
    return [entry for entry in entries if isinstance(entry, dict)]


def _describe_header(value: Any) -> str:
    if isinstance(value, SetHeader):
        scheme, _, secret = value.value.partition(" ")
        return f"{scheme} {token_log_prefix(secret)}..."
    return "[dim]<removed>[/dim]"


@app.command()
def check(
    providers_file: Path = typer.Argument(
        ..., exists=True, dir_okay=False, readable=True, help="JSON file with a 'Providers' list"
    ),
) -> None:
    """Show the header patch the OAuth stage produces for each provider.

    Example:
        goh providers check ~/.claude-code-router/config.json
    """
    console = Console()

    try:
        entries = load_provider_entries(providers_file)
    except json.JSONDecodeError as e:
        console.print(f"[red]Invalid JSON in {providers_file}: {e}[/red]")
        raise typer.Exit(1) from None

    if not entries:
        console.print(f"[yellow]No providers found in {providers_file}[/yellow]")
        raise typer.Exit(0)

    try:
        transformer = TransformerFactory.create_default()
    except ConfigError as e:
        console.print(f"[red]Configuration error: {e}[/red]")
        raise typer.Exit(1) from None

    table = Table(title="OAuth Header Stage")
    table.add_column("Provider", style="cyan")
    table.add_column("Mode")
    table.add_column("Header Patch")

    failed = False
    for entry in entries:
        try:
            provider = ProviderConfig.from_dict(entry)
        except ValueError as e:
            table.add_row("<unnamed>", "[red]error[/red]", str(e))
            failed = True
            continue

        try:
            outcome = transformer.evaluate(None, provider)
        except ConfigurationError as e:
            table.add_row(provider.name, "[red]error[/red]", e.message)
            failed = True
            continue

        if outcome.header_patch is None:
            table.add_row(provider.name, "pass-through", "[dim]-[/dim]")
            continue

        patch_lines = [
            f"{name}: {_describe_header(value)}"
            for name, value in outcome.header_patch.headers.items()
        ]
        table.add_row(provider.name, "[green]oauth[/green]", "\n".join(patch_lines))

    console.print(table)

    if failed:
        raise typer.Exit(1)
