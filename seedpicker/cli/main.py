"""Typer entry-point wiring for the SeedPicker CLI."""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler

from .. import stats
from ..cards import Card
from ..presence import render_presence_table
from ..table import build_word_table
from ..wordlist import load_wordlist, word_for
from .render import format_card_label, render_lookup, render_summary

app = typer.Typer(add_completion=False, rich_markup_mode="rich")
console = Console()
err_console = Console(stderr=True)

_LOG = logging.getLogger(__name__)


class LogLevel(str, Enum):
    """Logging levels accepted by ``--log-level``."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


def _configure_logging(level: LogLevel) -> None:
    logging.basicConfig(
        level=level.value,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _parse_card(code: str) -> Card:
    try:
        return Card.from_code(code)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc


@app.callback()
def cli(
    log_level: LogLevel = typer.Option(
        LogLevel.WARNING,
        "--log-level",
        envvar="LOG_LEVEL",
        case_sensitive=False,
        help="Logging level (defaults to $LOG_LEVEL or WARNING).",
    ),
) -> None:
    """Build and inspect the SeedPicker card tuple to seed word table."""

    _configure_logging(log_level)


@app.command()
def presence(
    output: Path | None = typer.Option(None, "--output", "-o", help="Write the table to this file instead of stdout."),
) -> None:
    """Print the 52x52 word presence table (``#`` word, ``.`` blank)."""

    text = render_presence_table(build_word_table())
    if output is None:
        typer.echo(text, nl=False)
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text, encoding="utf-8")
    _LOG.info("Wrote word presence table to %s", output)


@app.command()
def lookup(card: str = typer.Argument(..., help="First card, e.g. AS, 10H, Q♣.")) -> None:
    """Show the seed words for every second card drawn after CARD."""

    first = _parse_card(card)
    console.print(render_lookup(build_word_table(), load_wordlist(), first.index))


@app.command()
def word(
    first: str = typer.Argument(..., help="First card drawn."),
    second: str = typer.Argument(..., help="Second card drawn."),
) -> None:
    """Print the seed word for an ordered pair of cards."""

    first_card = _parse_card(first)
    second_card = _parse_card(second)
    result = word_for(build_word_table(), load_wordlist(), first_card.index, second_card.index)
    pair = f"{format_card_label(first_card)} {format_card_label(second_card)}"
    if result is None:
        console.print(f"{pair}: [dim]blank, draw again[/dim]")
    else:
        console.print(f"{pair}: [bold]{result}[/bold]")


@app.command("stats")
def stats_cli() -> None:
    """Summarise blanks and suited words per suit."""

    console.print(render_summary(stats.summarize(build_word_table())))


def main() -> None:
    """Entry-point for ``python -m seedpicker.cli``."""

    app()


if __name__ == "__main__":  # pragma: no cover - CLI invocation
    main()
