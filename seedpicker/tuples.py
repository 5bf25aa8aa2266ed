"""Ordered card pairs ("tuples") and their enumeration order."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from . import encoding
from .cards import Card, card

__all__ = ["CardTuple", "card_tuple", "iter_tuples"]


@dataclass(frozen=True, slots=True)
class CardTuple:
    """An ordered pair of cards addressed by ``first.index * 52 + second.index``."""

    first: Card
    second: Card

    @property
    def index(self) -> int:
        return encoding.encode_tuple(self.first.index, self.second.index)

    @property
    def reverse(self) -> "CardTuple":
        return CardTuple(self.second, self.first)

    @property
    def is_same_card(self) -> bool:
        return self.first.index == self.second.index

    @property
    def is_suited(self) -> bool:
        return self.first.suit is self.second.suit

    @property
    def rank_distance(self) -> int:
        return encoding.rank_distance(self.first.index, self.second.index)

    def label(self) -> str:
        return f"{self.first.label()}:{self.second.label()}"


def card_tuple(tuple_index: int) -> CardTuple:
    """Return the tuple stored at ``tuple_index``."""

    first, second = encoding.decode_tuple(tuple_index)
    return CardTuple(card(first), card(second))


def iter_tuples() -> Iterator[CardTuple]:
    """Yield all 2704 tuples in ascending tuple index order.

    The order is row-major over ``(first, second)``; word indices are handed
    out in exactly this order, so it must never change.
    """

    for first in range(encoding.DECK_CARD_COUNT):
        for second in range(encoding.DECK_CARD_COUNT):
            yield CardTuple(card(first), card(second))
