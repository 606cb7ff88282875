"""Commands: compass-admin cards - manage onboarding cards."""

import asyncio
from typing import Any

import typer
from rich.console import Console
from rich.table import Table

from compass_admin import client as api
from compass_admin.client import CompassAPIError
from compass_admin.ordering import OrderingController


console = Console()

app = typer.Typer(
    help="Create, edit, remove and reorder onboarding cards.",
    no_args_is_help=True,
)

CARD_TYPES = ("text", "image", "video")


def _fail(e: CompassAPIError) -> typer.Exit:
    console.print(f"[red]Error:[/red] {e.message} [dim]({e.code})[/dim]")
    return typer.Exit(1)


def _print_cards(cards: list[dict[str, Any]]) -> None:
    if not cards:
        console.print("[yellow]No cards yet.[/yellow] Add one with 'compass-admin cards add'.")
        return

    table = Table(title="Onboarding Cards", show_header=True)
    table.add_column("#", style="dim", justify="right", no_wrap=True)
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Type", style="green", no_wrap=True)
    table.add_column("Title")
    table.add_column("Media", overflow="fold")

    for position, card in enumerate(cards, start=1):
        table.add_row(
            str(position),
            str(card["id"]),
            card["type"],
            card.get("title") or "[dim]Untitled[/dim]",
            card.get("mediaUrl") or "",
        )

    console.print()
    console.print(table)
    console.print()


def list_cards() -> None:
    """List cards in display order."""

    async def run() -> list[dict[str, Any]]:
        async with api.get_client() as client:
            return await client.list_cards()

    try:
        cards = asyncio.run(run())
    except CompassAPIError as e:
        raise _fail(e) from e
    _print_cards(cards)


def add_card(
    card_type: str = typer.Option("text", "--type", "-t", help="Card type: text, image or video"),
    title: str | None = typer.Option(None, "--title", help="Card heading"),
    content: str | None = typer.Option(None, "--content", "-c", help="Body text (or video URL)"),
    media_url: str | None = typer.Option(None, "--media-url", "-m", help="Image or video URL"),
    media_mime_type: str | None = typer.Option(None, "--mime-type", help="MIME type of the media"),
) -> None:
    """Add a card to the end of the list."""
    if card_type not in CARD_TYPES:
        console.print(f"[red]Error:[/red] type must be one of: {', '.join(CARD_TYPES)}")
        raise typer.Exit(1)

    payload: dict[str, Any] = {"type": card_type}
    for key, value in (
        ("title", title),
        ("content", content),
        ("mediaUrl", media_url),
        ("mediaMimeType", media_mime_type),
    ):
        if value is not None:
            payload[key] = value

    async def run() -> dict[str, Any]:
        async with api.get_client() as client:
            return await client.create_card(payload)

    try:
        card = asyncio.run(run())
    except CompassAPIError as e:
        raise _fail(e) from e
    console.print(f"[green]✓[/green] Created card {card['id']} at position {card['order'] + 1}")


def edit_card(
    card_id: int = typer.Argument(..., help="ID of the card to edit"),
    card_type: str | None = typer.Option(None, "--type", "-t", help="New card type"),
    title: str | None = typer.Option(None, "--title", help="New heading"),
    content: str | None = typer.Option(None, "--content", "-c", help="New body text"),
    media_url: str | None = typer.Option(None, "--media-url", "-m", help="New media URL"),
    media_mime_type: str | None = typer.Option(None, "--mime-type", help="New media MIME type"),
) -> None:
    """Change selected fields of a card."""
    changes: dict[str, Any] = {}
    for key, value in (
        ("type", card_type),
        ("title", title),
        ("content", content),
        ("mediaUrl", media_url),
        ("mediaMimeType", media_mime_type),
    ):
        if value is not None:
            changes[key] = value

    if not changes:
        console.print("[yellow]Nothing to change.[/yellow]")
        raise typer.Exit(0)

    async def run() -> dict[str, Any]:
        async with api.get_client() as client:
            return await client.update_card(card_id, changes)

    try:
        asyncio.run(run())
    except CompassAPIError as e:
        raise _fail(e) from e
    console.print(f"[green]✓[/green] Updated card {card_id}: {', '.join(sorted(changes))}")


def remove_card(
    card_id: int = typer.Argument(..., help="ID of the card to remove"),
    force: bool = typer.Option(False, "--force", "-f", help="Skip confirmation prompt"),
) -> None:
    """Delete a card."""
    if not force:
        confirm = typer.confirm(f"Are you sure you want to delete card {card_id}?")
        if not confirm:
            console.print("[yellow]Cancelled.[/yellow]")
            raise typer.Exit(0)

    async def run() -> None:
        async with api.get_client() as client:
            await client.delete_card(card_id)

    try:
        asyncio.run(run())
    except CompassAPIError as e:
        raise _fail(e) from e
    console.print(f"[green]✓[/green] Deleted card {card_id}")


def move_card(
    source: int = typer.Argument(..., min=1, help="Current position (as shown by 'cards list')"),
    destination: int = typer.Argument(..., min=1, help="New position"),
) -> None:
    """Move the card at one position to another and save the new order."""

    async def run() -> OrderingController:
        async with api.get_client() as client:
            controller = OrderingController(
                tenant_id=client.tenant_id or "",
                reorder=client.reorder_cards,
                refetch=client.list_cards,
            )
            controller.load(await client.list_cards())
            size = len(controller.items)
            if source > size or destination > size:
                raise typer.BadParameter(f"positions must be between 1 and {size}")

            controller.begin_drag(source - 1)
            await controller.drop(destination - 1)
            return controller

    try:
        controller = asyncio.run(run())
    except CompassAPIError as e:
        raise _fail(e) from e

    if controller.last_error is not None:
        console.print("[yellow]Order was not saved; the previous order is unchanged.[/yellow]")
        raise _fail(controller.last_error)

    if source == destination:
        console.print("[yellow]Card is already at that position.[/yellow]")
    else:
        console.print(f"[green]✓[/green] Moved card from position {source} to {destination}")
    _print_cards(controller.items)


app.command(name="list")(list_cards)
app.command(name="add")(add_card)
app.command(name="edit")(edit_card)
app.command(name="remove")(remove_card)
app.command(name="move")(move_card)
