"""Command-line front end for trying shorthand expansions from a terminal.

Usage:
    tagcraft expand 'return <section.hero#top' [--cursor N] [--json]
    tagcraft keywords
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import asdict

from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from tagcraft import __version__, setup_logging
from tagcraft.completion import Suggestion, provide_suggestions
from tagcraft.config import get_settings
from tagcraft.snippets.keywords import KEYWORD_SNIPPETS

logger = logging.getLogger(__name__)

console = Console()

EXIT_OK = 0
EXIT_NO_MATCH = 1
EXIT_USAGE = 2


def _build_parser() -> argparse.ArgumentParser:
    """Build argparse parser for tagcraft subcommands."""
    parser = argparse.ArgumentParser(
        prog="tagcraft",
        description="Expand tag shorthand such as section.hero#top into markup.",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    sub = parser.add_subparsers(dest="command", required=True)

    # expand
    expand_p = sub.add_parser("expand", help="Expand the shorthand at the cursor")
    expand_p.add_argument("line", help="Line of text containing the shorthand")
    expand_p.add_argument(
        "--cursor",
        type=int,
        default=None,
        help="Cursor offset into the line (default: end of line)",
    )
    expand_p.add_argument(
        "--json", action="store_true", help="Print suggestions as JSON"
    )

    # keywords
    sub.add_parser("keywords", help="List the keyword snippet catalog")

    return parser


def _suggestion_table(line: str, suggestions: list[Suggestion]) -> Table:
    """Render suggestions as a rich table."""
    table = Table(title="Suggestions", show_lines=True)
    table.add_column("Label", style="bold")
    table.add_column("Replaces", style="dim")
    table.add_column("Snippet")
    table.add_column("Detail", style="cyan")

    for suggestion in suggestions:
        replaced = line[suggestion.replace_start : suggestion.replace_end]
        table.add_row(
            Text(suggestion.label),
            Text(
                f"{replaced!r} [{suggestion.replace_start}:{suggestion.replace_end}]"
            ),
            Text(suggestion.insert_text.strip()),
            Text(suggestion.detail),
        )
    return table


def _cmd_expand(line: str, cursor: int | None, *, as_json: bool) -> int:
    offset = len(line) if cursor is None else cursor
    try:
        suggestions = provide_suggestions(line, offset)
    except ValueError as e:
        console.print(f"[red]Error:[/] {escape(str(e))}")
        return EXIT_USAGE

    if not suggestions:
        if as_json:
            console.print_json("[]")
        else:
            console.print(f"[yellow]No shorthand at offset {offset}.[/]")
        return EXIT_NO_MATCH

    if as_json:
        console.print_json(json.dumps([asdict(s) for s in suggestions]))
    else:
        console.print(_suggestion_table(line, suggestions))
    return EXIT_OK


def _cmd_keywords() -> int:
    table = Table(title="Keyword snippets")
    table.add_column("Triggers", style="bold")
    table.add_column("Match")
    table.add_column("Preview")
    table.add_column("Description", style="dim")

    for entry in KEYWORD_SNIPPETS:
        table.add_row(
            Text(", ".join(entry.triggers)),
            Text(entry.mode.value),
            Text(entry.preview),
            Text(entry.description),
        )
    console.print(table)
    return EXIT_OK


def run(argv: list[str]) -> int:
    """Parse ``argv`` and run the selected subcommand.

    Returns:
        Process exit status.
    """
    args = _build_parser().parse_args(argv)

    try:
        settings = get_settings()
    except ValidationError as e:
        console.print(
            Panel(Text(str(e)), title="Invalid configuration", border_style="red")
        )
        return EXIT_USAGE

    setup_logging(settings.logging)
    logger.debug("Running %s", args.command)

    match args.command:
        case "expand":
            return _cmd_expand(args.line, args.cursor, as_json=args.json)
        case "keywords":
            return _cmd_keywords()
    return EXIT_USAGE


def main() -> None:
    """Entry point for the ``tagcraft`` command."""
    sys.exit(run(sys.argv[1:]))
