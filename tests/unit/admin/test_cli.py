"""Tests for compass-admin CLI commands."""

from typing import Any

import pytest
from typer.testing import CliRunner

from compass_admin import client as api
from compass_admin.cli import app
from compass_admin.client import CompassAPIError
from compass_admin.commands.cards import app as cards_app


runner = CliRunner()


class FakeClient:
    """In-memory stand-in for CompassClient."""

    def __init__(self) -> None:
        self.tenant_id = "biz_acme"
        self.cards: list[dict[str, Any]] = [
            {"id": 1, "order": 0, "type": "text", "title": "Welcome"},
            {"id": 2, "order": 1, "type": "image", "title": "Map", "mediaUrl": "https://cdn/m.png"},
            {"id": 3, "order": 2, "type": "video", "title": "Tour"},
        ]
        self.reorder_calls: list[list[int]] = []
        self.fail_reorder = False
        self.saved_theme: dict[str, Any] | None = None
        self.reset_called = False

    async def __aenter__(self) -> "FakeClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        return None

    async def list_cards(self) -> list[dict[str, Any]]:
        return list(self.cards)

    async def create_card(self, payload: dict[str, Any]) -> dict[str, Any]:
        card = {"id": 4, "order": len(self.cards), **payload}
        self.cards.append(card)
        return card

    async def update_card(self, card_id: int, changes: dict[str, Any]) -> dict[str, Any]:
        if card_id not in {c["id"] for c in self.cards}:
            raise CompassAPIError("Card not found", code="not_found", status_code=404)
        return {"id": card_id, **changes}

    async def delete_card(self, card_id: int) -> None:
        self.cards = [c for c in self.cards if c["id"] != card_id]

    async def reorder_cards(self, card_ids: list[int]) -> None:
        self.reorder_calls.append(card_ids)
        if self.fail_reorder:
            raise CompassAPIError("Database unavailable", code="upstream_error", status_code=500)
        positions = {card_id: index for index, card_id in enumerate(card_ids)}
        for card in self.cards:
            if card["id"] in positions:
                card["order"] = positions[card["id"]]
        self.cards.sort(key=lambda c: (c["order"], c["id"]))

    async def get_theme(self) -> tuple[dict[str, Any], bool]:
        return {
            "name": "Default Dark",
            "mode": "dark",
            "colors": {"primary": "#fa4616", "background": "#141212"},
        }, True

    async def list_presets(self) -> list[dict[str, Any]]:
        return [
            {
                "id": "minimal",
                "name": "Minimal",
                "mode": "light",
                "colors": {"primary": "#000000"},
            }
        ]

    async def save_theme(self, theme: dict[str, Any]) -> dict[str, Any]:
        self.saved_theme = theme
        return theme

    async def reset_theme(self) -> None:
        self.reset_called = True


@pytest.fixture
def fake_client(monkeypatch: pytest.MonkeyPatch) -> FakeClient:
    fake = FakeClient()
    monkeypatch.setattr(api, "get_client", lambda: fake)
    return fake


class TestCliRoot:
    """Tests for the top-level command."""

    def test_version(self) -> None:
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert "compass-admin" in result.stdout


class TestCardsCommands:
    """Tests for compass-admin cards."""

    def test_list_shows_cards(self, fake_client: FakeClient) -> None:
        result = runner.invoke(app, ["cards", "list"])

        assert result.exit_code == 0
        assert "Welcome" in result.stdout
        assert "Tour" in result.stdout

    def test_add_sends_only_given_fields(self, fake_client: FakeClient) -> None:
        result = runner.invoke(app, ["cards", "add", "--type", "text", "--title", "Rules"])

        assert result.exit_code == 0, result.stdout
        assert fake_client.cards[-1] == {"id": 4, "order": 3, "type": "text", "title": "Rules"}
        assert "position 4" in result.stdout

    def test_add_rejects_unknown_type(self, fake_client: FakeClient) -> None:
        result = runner.invoke(app, ["cards", "add", "--type", "audio"])

        assert result.exit_code == 1
        assert len(fake_client.cards) == 3

    def test_edit_missing_card_fails(self, fake_client: FakeClient) -> None:
        result = runner.invoke(app, ["cards", "edit", "99", "--title", "x"])

        assert result.exit_code == 1
        assert "Card not found" in result.stdout

    def test_edit_without_changes(self, fake_client: FakeClient) -> None:
        result = runner.invoke(app, ["cards", "edit", "1"])

        assert result.exit_code == 0
        assert "Nothing to change" in result.stdout

    def test_remove_with_force(self, fake_client: FakeClient) -> None:
        result = runner.invoke(app, ["cards", "remove", "2", "--force"])

        assert result.exit_code == 0
        assert [c["id"] for c in fake_client.cards] == [1, 3]

    def test_remove_cancelled(self, fake_client: FakeClient) -> None:
        result = runner.invoke(app, ["cards", "remove", "2"], input="n\n")

        assert result.exit_code == 0
        assert len(fake_client.cards) == 3

    def test_move_commits_new_order(self, fake_client: FakeClient) -> None:
        result = runner.invoke(cards_app, ["move", "3", "1"])

        assert result.exit_code == 0, result.stdout
        assert fake_client.reorder_calls == [[3, 1, 2]]

    def test_move_shows_saved_order(self, fake_client: FakeClient) -> None:
        list_calls = 0
        original_list = fake_client.list_cards

        async def counting_list() -> list[dict[str, Any]]:
            nonlocal list_calls
            list_calls += 1
            return await original_list()

        fake_client.list_cards = counting_list  # type: ignore[method-assign]

        result = runner.invoke(cards_app, ["move", "3", "1"])

        assert result.exit_code == 0, result.stdout
        assert list_calls == 2
        assert result.stdout.index("Tour") < result.stdout.index("Welcome")

    def test_move_same_position_makes_no_call(self, fake_client: FakeClient) -> None:
        result = runner.invoke(cards_app, ["move", "2", "2"])

        assert result.exit_code == 0
        assert fake_client.reorder_calls == []

    def test_move_failure_reports_error(self, fake_client: FakeClient) -> None:
        fake_client.fail_reorder = True

        result = runner.invoke(cards_app, ["move", "1", "3"])

        assert result.exit_code == 1
        assert "Database unavailable" in result.stdout
        assert fake_client.reorder_calls == [[2, 3, 1]]

    def test_move_out_of_range(self, fake_client: FakeClient) -> None:
        result = runner.invoke(cards_app, ["move", "1", "9"])

        assert result.exit_code != 0
        assert fake_client.reorder_calls == []


class TestThemeCommands:
    """Tests for compass-admin theme."""

    def test_show_default(self, fake_client: FakeClient) -> None:
        result = runner.invoke(app, ["theme", "show"])

        assert result.exit_code == 0
        assert "Default Dark" in result.stdout
        assert "default" in result.stdout

    def test_presets(self, fake_client: FakeClient) -> None:
        result = runner.invoke(app, ["theme", "presets"])

        assert result.exit_code == 0
        assert "minimal" in result.stdout

    def test_apply_preset_saves_without_id(self, fake_client: FakeClient) -> None:
        result = runner.invoke(app, ["theme", "apply-preset", "minimal"])

        assert result.exit_code == 0, result.stdout
        assert fake_client.saved_theme is not None
        assert "id" not in fake_client.saved_theme
        assert fake_client.saved_theme["name"] == "Minimal"

    def test_apply_unknown_preset(self, fake_client: FakeClient) -> None:
        result = runner.invoke(app, ["theme", "apply-preset", "neon"])

        assert result.exit_code != 0
        assert fake_client.saved_theme is None

    def test_reset_with_force(self, fake_client: FakeClient) -> None:
        result = runner.invoke(app, ["theme", "reset", "--force"])

        assert result.exit_code == 0
        assert fake_client.reset_called is True
