"""Shape the printed lookup sheet: per first card, 13 rank rows by 4 suit columns."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from . import encoding
from .cards import Card, Suit, card, suit_cards
from .table import WordTable

__all__ = ["LookupEntry", "blank_placeholder", "lookup_grid", "sheet_cards"]


@dataclass(frozen=True, slots=True)
class LookupEntry:
    """One cell of the lookup sheet: a second card and the word it yields."""

    second: Card
    word_index: int | None
    word: str | None

    @property
    def is_blank(self) -> bool:
        return self.word_index is None


def blank_placeholder(words: Sequence[str]) -> str:
    """Return a run of dashes as wide as the longest word."""

    return "-" * max((len(word) for word in words), default=0)


def sheet_cards(suit: Suit) -> tuple[Card, ...]:
    """Return the first cards printed on the sheet for ``suit``."""

    return suit_cards(suit)


def lookup_grid(table: WordTable, words: Sequence[str], first: int) -> list[list[LookupEntry]]:
    """Return the entries for ``first`` as rows by rank, columns by suit."""

    encoding.validate_card_identifier(first)
    rows: list[list[LookupEntry]] = []
    for rank_idx in range(encoding.RANK_COUNT):
        row = []
        for suit_idx in range(encoding.SUIT_COUNT):
            second = encoding.encode_card(suit_idx, rank_idx)
            word_index = table.lookup(first, second)
            word = None if word_index is None else words[word_index]
            row.append(LookupEntry(card(second), word_index, word))
        rows.append(row)
    return rows
