"""Main Compass admin CLI application."""

import typer
from rich.console import Console

from compass_admin import __version__
from compass_admin.commands import cards, themes


console = Console()

app = typer.Typer(
    name="compass-admin",
    help="Manage a tenant's onboarding cards and theme through the Compass API.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

# Register command groups
app.add_typer(cards.app, name="cards")
app.add_typer(themes.app, name="theme")


@app.callback(invoke_without_command=True)
def version_callback(
    version: bool = typer.Option(
        False, "--version", "-v", help="Show version and exit."
    ),
) -> None:
    """Compass admin CLI.

    Configure with COMPASS_API_URL, COMPASS_TOKEN and COMPASS_TENANT_ID.
    """
    if version:
        console.print(f"[bold cyan]compass-admin[/bold cyan] version {__version__}")
        raise typer.Exit()


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
