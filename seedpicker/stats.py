"""Summary statistics describing how blanks are distributed over the table."""

from __future__ import annotations

from dataclasses import dataclass

from .cards import Suit
from .table import WordTable
from .tuples import CardTuple, iter_tuples

__all__ = ["SuitBreakdown", "TableSummary", "summarize"]


@dataclass(frozen=True, slots=True)
class SuitBreakdown:
    """Counts for the suited tuples of one suit."""

    suit: Suit
    blank_tuples: int
    word_tuples: int


@dataclass(frozen=True, slots=True)
class TableSummary:
    """Aggregate counts over the whole table."""

    word_count: int
    blank_count: int
    same_card_blanks: int
    suited_blank_pairs: int
    suits: tuple[SuitBreakdown, ...]
    suited_words: tuple[CardTuple, ...]


def summarize(table: WordTable) -> TableSummary:
    """Return a :class:`TableSummary` for ``table``."""

    blanks = {suit: 0 for suit in Suit}
    words = {suit: 0 for suit in Suit}
    suited_words: list[CardTuple] = []
    same_card = 0
    for pair in iter_tuples():
        if not pair.is_suited:
            continue
        if table.is_blank(pair.index):
            if pair.is_same_card:
                same_card += 1
            else:
                blanks[pair.first.suit] += 1
        else:
            words[pair.first.suit] += 1
            suited_words.append(pair)

    return TableSummary(
        word_count=table.word_count,
        blank_count=table.blank_count,
        same_card_blanks=same_card,
        suited_blank_pairs=sum(blanks.values()) // 2,
        suits=tuple(SuitBreakdown(suit, blanks[suit], words[suit]) for suit in Suit.ordered()),
        suited_words=tuple(suited_words),
    )
