"""OAuth credential commands.

Reads the credentials file written by the Gemini CLI. No network calls are
made and the full token is never printed.
"""

import json
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.panel import Panel

from gemini_oauth_headers.core.config import AdapterSettings, ConfigError
from gemini_oauth_headers.transformers.gemini_oauth_headers import token_log_prefix

app = typer.Typer(help="Local OAuth credential inspection")


@app.command()
def token(
    creds_file: Optional[Path] = typer.Option(
        None, "--creds-file", help="Credentials file (default: GEMINI_OAUTH_CREDS_FILE)"
    ),
) -> None:
    """Inspect the access token stored by the Gemini CLI.

    Example:
        goh oauth token --creds-file ~/.gemini/oauth_creds.json
    """
    console = Console()
    try:
        settings = AdapterSettings.load()
    except ConfigError as e:
        console.print(f"[red]Configuration error: {e}[/red]")
        raise typer.Exit(1) from None
    path = (creds_file or Path(settings.creds_file)).expanduser()

    if not path.exists():
        console.print(
            Panel(
                f"[yellow]No credentials file found at {path}[/yellow]\n\n"
                "Log in with the Gemini CLI first, then copy the access token "
                "into your provider's api_key.",
                title="Not Found",
                border_style="yellow",
            )
        )
        raise typer.Exit(1)

    try:
        creds = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        console.print(f"[red]Could not read {path}: {e}[/red]")
        raise typer.Exit(1) from None

    access_token = creds.get("access_token") if isinstance(creds, dict) else None
    if not isinstance(access_token, str) or not access_token.strip():
        console.print(f"[red]No access_token in {path}[/red]")
        raise typer.Exit(1)

    looks_valid = access_token.startswith(settings.token_prefix)
    prefix_status = (
        "[green]yes[/green]" if looks_valid else f"[yellow]no (expected {settings.token_prefix!r})[/yellow]"
    )
    console.print(
        Panel(
            f"Token prefix: {token_log_prefix(access_token, settings.log_prefix_chars)}...\n"
            f"Token length: {len(access_token)}\n"
            f"Google OAuth format: {prefix_status}\n"
            f"Expires (ms since epoch): {creds.get('expiry_date', 'Unknown')}",
            title="Gemini OAuth Token",
            border_style="green" if looks_valid else "yellow",
        )
    )
