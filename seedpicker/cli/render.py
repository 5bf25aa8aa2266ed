"""Rendering helpers dedicated to the CLI experience."""

from __future__ import annotations

from typing import Sequence

from rich.console import RenderableType
from rich.panel import Panel

from ..cards import Card, card
from ..stats import TableSummary
from ..table import WordTable
from .views import LookupSheetView, SummaryView

_SUIT_STYLES = {
    "red": "red",
    "black": "bright_white",
}


def format_card(card_id: int) -> str:
    """Return a Rich-rendered label for ``card_id``."""

    return format_card_label(card(card_id))


def format_card_label(value: Card) -> str:
    style = _SUIT_STYLES[value.suit.color]
    return f"[{style}]{value.label()}[/{style}]"


def render_lookup(table: WordTable, words: Sequence[str], first: int) -> RenderableType:
    """Return a Rich panel holding the lookup sheet for one first card."""

    view = LookupSheetView(table=table, words=words, first=card(first), card_formatter=format_card_label)
    return Panel(view.render(), title=f"First card {format_card(first)}", padding=(0, 1), border_style="cyan")


def render_summary(summary: TableSummary) -> RenderableType:
    view = SummaryView(summary=summary, card_formatter=format_card_label)
    return Panel(view.render(), title="SeedPicker table", padding=(0, 1), border_style="cyan")
