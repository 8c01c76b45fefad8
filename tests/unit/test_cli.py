"""Tests for the tagcraft command line."""

from __future__ import annotations

import json

import pytest
from rich.console import Console

import tagcraft
from tagcraft import cli


@pytest.fixture
def recorded(monkeypatch: pytest.MonkeyPatch) -> Console:
    """Swap the CLI console for a wide recording console."""
    console = Console(record=True, width=200, color_system=None)
    monkeypatch.setattr(cli, "console", console)
    # Keep run() from attaching handlers to the test process's root logger
    monkeypatch.setattr(tagcraft, "_logging_configured", True)
    return console


class TestExpand:
    """tagcraft expand."""

    def test_table_output(self, recorded: Console) -> None:
        assert cli.run(["expand", "<section.hero"]) == cli.EXIT_OK
        text = recorded.export_text()
        assert "section.hero" in text
        assert '<section className="hero">$0</section>' in text

    def test_cursor_option(self, recorded: Console) -> None:
        assert cli.run(["expand", "div.a(rest", "--cursor", "5"]) == cli.EXIT_OK
        assert '<div className="a">$0</div>' in recorded.export_text()

    def test_json_output(self, recorded: Console) -> None:
        assert cli.run(["expand", "img", "--json"]) == cli.EXIT_OK
        data = json.loads(recorded.export_text())
        assert data[-1]["insert_text"] == "<img />"
        assert data[-1]["replace_start"] == 0
        assert data[-1]["replace_end"] == 3
        assert data[-1]["kind"] == "snippet"

    def test_no_match(self, recorded: Console) -> None:
        assert cli.run(["expand", "a = "]) == cli.EXIT_NO_MATCH
        assert "No shorthand at offset 4" in recorded.export_text()

    def test_no_match_json(self, recorded: Console) -> None:
        assert cli.run(["expand", "a = ", "--json"]) == cli.EXIT_NO_MATCH
        assert json.loads(recorded.export_text()) == []

    def test_cursor_out_of_range(self, recorded: Console) -> None:
        assert cli.run(["expand", "div", "--cursor", "9"]) == cli.EXIT_USAGE
        assert "Error:" in recorded.export_text()

    def test_invalid_configuration(
        self, recorded: Console, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("MARKUP__DEFAULT_TAG", "1")
        assert cli.run(["expand", ".x"]) == cli.EXIT_USAGE
        assert "Invalid configuration" in recorded.export_text()


class TestKeywords:
    """tagcraft keywords."""

    def test_lists_catalog(self, recorded: Console) -> None:
        assert cli.run(["keywords"]) == cli.EXIT_OK
        text = recorded.export_text()
        for trigger in ("fun", "func", "greaterThan, sup", "void"):
            assert trigger in text


class TestParser:
    """Argument handling."""

    def test_command_required(self) -> None:
        with pytest.raises(SystemExit):
            cli.run([])

    def test_main_exits_with_status(
        self, recorded: Console, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setattr("sys.argv", ["tagcraft", "expand", "a = "])
        with pytest.raises(SystemExit) as exc_info:
            cli.main()
        assert exc_info.value.code == cli.EXIT_NO_MATCH
