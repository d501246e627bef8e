"""Main CLI entry point for gemini-oauth-headers."""

import typer
from rich.console import Console

from gemini_oauth_headers.cli.commands import oauth, providers

app = typer.Typer(
    name="goh",
    help="Gemini OAuth Headers CLI - inspect OAuth header rewriting for your providers",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

app.add_typer(providers.app, name="providers", help="Provider configuration checks")
app.add_typer(oauth.app, name="oauth", help="Local OAuth credential inspection")


@app.command()
def version() -> None:
    """Show version information."""
    from gemini_oauth_headers import __version__

    console = Console()
    console.print(f"[bold cyan]goh[/bold cyan] version [green]{__version__}[/green]")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
) -> None:
    """Gemini OAuth Headers CLI."""
    from gemini_oauth_headers.core.config import AdapterSettings, ConfigError
    from gemini_oauth_headers.core.logging import configure_root_logging

    try:
        settings = AdapterSettings.load()
    except ConfigError as e:
        Console().print(f"[red]Configuration error: {e}[/red]")
        raise typer.Exit(1) from None

    configure_root_logging("DEBUG" if verbose else settings.log_level)


if __name__ == "__main__":
    app()
