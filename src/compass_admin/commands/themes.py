"""Commands: compass-admin theme - inspect and change the tenant theme."""

import asyncio
import re
from typing import Any

import typer
from rich.console import Console
from rich.table import Table

from compass_admin import client as api
from compass_admin.client import CompassAPIError


console = Console()

_HEX_COLOR = re.compile(r"#[0-9a-fA-F]{6}")

app = typer.Typer(
    help="Show, apply and reset the tenant theme.",
    no_args_is_help=True,
)


def _fail(e: CompassAPIError) -> typer.Exit:
    console.print(f"[red]Error:[/red] {e.message} [dim]({e.code})[/dim]")
    return typer.Exit(1)


def show_theme() -> None:
    """Show the tenant's current theme."""

    async def run() -> tuple[dict[str, Any], bool]:
        async with api.get_client() as client:
            return await client.get_theme()

    try:
        theme, is_default = asyncio.run(run())
    except CompassAPIError as e:
        raise _fail(e) from e

    label = "[dim](default)[/dim]" if is_default else "[green](saved)[/green]"
    console.print(f"\n[bold cyan]{theme['name']}[/bold cyan] {label}  mode: {theme['mode']}\n")

    table = Table(title="Colors", show_header=True)
    table.add_column("Role", style="cyan", no_wrap=True)
    table.add_column("Value", no_wrap=True)
    table.add_column("Swatch", no_wrap=True)
    for role, value in theme["colors"].items():
        swatch = f"[on {value}]    [/]" if _HEX_COLOR.fullmatch(value) else ""
        table.add_row(role, value, swatch)

    console.print(table)
    if theme.get("customCSS"):
        console.print("\n[dim]Custom CSS is set.[/dim]")
    console.print()


def list_presets() -> None:
    """List built-in theme presets."""

    async def run() -> list[dict[str, Any]]:
        async with api.get_client() as client:
            return await client.list_presets()

    try:
        presets = asyncio.run(run())
    except CompassAPIError as e:
        raise _fail(e) from e

    table = Table(title="Theme Presets", show_header=True)
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Name")
    table.add_column("Mode", style="green", no_wrap=True)
    table.add_column("Primary", no_wrap=True)
    for preset in presets:
        table.add_row(preset["id"], preset["name"], preset["mode"], preset["colors"]["primary"])

    console.print()
    console.print(table)
    console.print()


def apply_preset(
    preset_id: str = typer.Argument(..., help="Preset to apply (see 'theme presets')"),
) -> None:
    """Save a preset as the tenant theme."""

    async def run() -> dict[str, Any]:
        async with api.get_client() as client:
            presets = {p["id"]: p for p in await client.list_presets()}
            if preset_id not in presets:
                raise typer.BadParameter(
                    f"unknown preset '{preset_id}'; choose from: {', '.join(presets)}"
                )
            theme = {k: v for k, v in presets[preset_id].items() if k != "id"}
            return await client.save_theme(theme)

    try:
        theme = asyncio.run(run())
    except CompassAPIError as e:
        raise _fail(e) from e
    console.print(f"[green]✓[/green] Applied preset '{preset_id}' as '{theme['name']}'")


def reset_theme(
    force: bool = typer.Option(False, "--force", "-f", help="Skip confirmation prompt"),
) -> None:
    """Discard the saved theme and use the default."""
    if not force:
        confirm = typer.confirm("Reset the theme to the default?")
        if not confirm:
            console.print("[yellow]Cancelled.[/yellow]")
            raise typer.Exit(0)

    async def run() -> None:
        async with api.get_client() as client:
            await client.reset_theme()

    try:
        asyncio.run(run())
    except CompassAPIError as e:
        raise _fail(e) from e
    console.print("[green]✓[/green] Theme reset to default")


app.command(name="show")(show_theme)
app.command(name="presets")(list_presets)
app.command(name="apply-preset")(apply_preset)
app.command(name="reset")(reset_theme)
