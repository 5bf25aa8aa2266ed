"""Composable view primitives for the SeedPicker CLI."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Sequence

from rich import box
from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.table import Table

from ..cards import Card, Suit
from ..lookup import blank_placeholder, lookup_grid
from ..stats import TableSummary
from ..table import WordTable


@dataclass(slots=True)
class LookupSheetView:
    """Renderable listing the 52 second cards and their words for one first card."""

    table: WordTable
    words: Sequence[str]
    first: Card
    card_formatter: Callable[[Card], str]

    def render(self) -> RenderableType:
        blank_text = blank_placeholder(self.words)
        grid = Table(box=box.SIMPLE, show_header=False, expand=False)
        for _ in Suit.ordered():
            grid.add_column("Card", justify="right")
            grid.add_column("Word", justify="left", min_width=len(blank_text))

        for row in lookup_grid(self.table, self.words, self.first.index):
            cells: list[str] = []
            for entry in row:
                cells.append(self.card_formatter(entry.second))
                cells.append(f"[dim]{blank_text}[/dim]" if entry.is_blank else entry.word or "")
            grid.add_row(*cells)
        return grid


@dataclass(slots=True)
class SummaryView:
    """Renderable summarising blank and word counts per suit."""

    summary: TableSummary
    card_formatter: Callable[[Card], str]

    def _totals_panel(self) -> Panel:
        grid = Table.grid(expand=True)
        grid.add_column(justify="left")
        grid.add_row(f"[cyan]Words[/cyan]: {self.summary.word_count}")
        grid.add_row(f"[cyan]Blanks[/cyan]: {self.summary.blank_count}")
        grid.add_row(f"[cyan]Same-card blanks[/cyan]: {self.summary.same_card_blanks}")
        grid.add_row(f"[cyan]Suited blank pairs[/cyan]: {self.summary.suited_blank_pairs}")
        return Panel(grid, title="Totals", box=box.SQUARE, border_style="blue")

    def render(self) -> RenderableType:
        table = Table(box=box.ROUNDED, expand=True)
        table.add_column("Suit", justify="left", style="bold")
        table.add_column("Suited blanks", justify="right")
        table.add_column("Suited words", justify="right")
        table.add_column("Word tuples", justify="left")

        for breakdown in self.summary.suits:
            pairs = [
                f"{self.card_formatter(pair.first)}:{self.card_formatter(pair.second)}"
                for pair in self.summary.suited_words
                if pair.first.suit is breakdown.suit
            ]
            table.add_row(
                breakdown.suit.name.title(),
                str(breakdown.blank_tuples),
                str(breakdown.word_tuples),
                " ".join(pairs) or "-",
            )

        return Group(self._totals_panel(), table)
