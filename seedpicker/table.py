"""The tuple-to-word-index table and its structural invariants."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import AbstractSet, Iterator, Sequence

import numpy as np

from . import encoding
from .blanks import select_blanks
from .tuples import CardTuple, card_tuple, iter_tuples

__all__ = [
    "TableInvariantError",
    "WordTable",
    "assign_word_indices",
    "build_word_table",
    "verify_invariants",
]

_LOG = logging.getLogger(__name__)


class TableInvariantError(RuntimeError):
    """Raised when a constructed table breaks one of its structural guarantees."""


@dataclass(frozen=True, slots=True)
class WordTable:
    """Immutable mapping from tuple index to word index (``None`` for blanks)."""

    entries: tuple[int | None, ...]

    def __post_init__(self) -> None:
        if len(self.entries) != encoding.TUPLE_COUNT:
            raise ValueError(f"expected {encoding.TUPLE_COUNT} entries, got {len(self.entries)}")

    def __len__(self) -> int:
        return len(self.entries)

    def __getitem__(self, tuple_index: int) -> int | None:
        if not isinstance(tuple_index, (int, np.integer)):
            raise TypeError(f"tuple index must be an integer, not {type(tuple_index).__name__}")
        return self.word_index(int(tuple_index))

    def __iter__(self) -> Iterator[int | None]:
        return iter(self.entries)

    def word_index(self, tuple_index: int) -> int | None:
        encoding.validate_tuple_index(tuple_index)
        return self.entries[tuple_index]

    def lookup(self, first: int, second: int) -> int | None:
        """Return the word index for the cards ``(first, second)``."""

        return self.entries[encoding.encode_tuple(first, second)]

    def is_blank(self, tuple_index: int) -> bool:
        return self.word_index(tuple_index) is None

    @property
    def word_count(self) -> int:
        return sum(1 for entry in self.entries if entry is not None)

    @property
    def blank_count(self) -> int:
        return len(self.entries) - self.word_count

    def blank_indices(self) -> list[int]:
        return [index for index, entry in enumerate(self.entries) if entry is None]

    def tuple_for_word(self, word_index: int) -> CardTuple:
        """Return the tuple that yields ``word_index``."""

        if not 0 <= word_index < self.word_count:
            raise ValueError(f"word index {word_index} out of range")
        # Word indices ascend with tuple index, so the first match is the only one.
        for tuple_index, entry in enumerate(self.entries):
            if entry == word_index:
                return card_tuple(tuple_index)
        raise TableInvariantError(f"word index {word_index} is not assigned")

    def presence_matrix(self) -> np.ndarray:
        """Return a 52x52 boolean array, ``True`` where the tuple yields a word."""

        flags = np.fromiter((entry is not None for entry in self.entries), dtype=bool, count=len(self.entries))
        return flags.reshape(encoding.DECK_CARD_COUNT, encoding.DECK_CARD_COUNT)


def assign_word_indices(skip: AbstractSet[int], word_count: int = encoding.WORD_COUNT) -> WordTable:
    """Walk tuples in order, numbering every tuple not in ``skip``."""

    entries: list[int | None] = []
    next_word = 0
    for pair in iter_tuples():
        if pair.index in skip:
            entries.append(None)
        else:
            entries.append(next_word)
            next_word += 1

    if next_word != word_count:
        raise TableInvariantError(f"assigned {next_word} word indices, expected {word_count}")
    return WordTable(tuple(entries))


def verify_invariants(table: WordTable, word_count: int = encoding.WORD_COUNT) -> None:
    """Raise :class:`TableInvariantError` if ``table`` breaks a structural property."""

    words = [entry for entry in table.entries if entry is not None]
    if words != list(range(word_count)):
        raise TableInvariantError("word indices are not assigned 0..N-1 in tuple order")

    present = table.presence_matrix()
    if present.diagonal().any():
        raise TableInvariantError("a same-card tuple yields a word")
    if not np.array_equal(present, present.T):
        raise TableInvariantError("blanks are not reflexive")

    suits = np.arange(encoding.DECK_CARD_COUNT) // encoding.RANK_COUNT
    unsuited = suits[:, None] != suits[None, :]
    if not present[unsuited].all():
        raise TableInvariantError("an unsuited tuple is blank")

    for first in range(encoding.DECK_CARD_COUNT):
        _check_contiguous(first, present[first])


def _check_contiguous(first: int, row: Sequence[bool]) -> None:
    suit_start = first - first % encoding.RANK_COUNT
    blank_distances: list[int] = []
    word_distances: list[int] = []
    for second in range(suit_start, suit_start + encoding.RANK_COUNT):
        distance = encoding.rank_distance(first, second)
        if row[second]:
            word_distances.append(distance)
        else:
            blank_distances.append(distance)
    if blank_distances and word_distances and max(blank_distances) > min(word_distances):
        raise TableInvariantError(f"blanks for card {first} are not contiguous by rank distance")


@lru_cache(maxsize=None)
def build_word_table() -> WordTable:
    """Build, verify and cache the SeedPicker tuple table."""

    skip = select_blanks(encoding.WORD_COUNT)
    table = assign_word_indices(skip, encoding.WORD_COUNT)
    verify_invariants(table, encoding.WORD_COUNT)
    _LOG.debug("built word table: %d words, %d blanks", table.word_count, table.blank_count)
    return table
