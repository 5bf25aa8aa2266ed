"""Selection of the tuples that do not yield a seed word ("blanks").

There are 52 * 52 = 2704 tuples but only 2048 BIP39 words, so 656 tuples
stay blank. The 52 same-card tuples are always blank (they cannot be drawn
without replacement). The remaining 604 come from suited tuples, blanked in
reflexive pairs ``(A, B)`` and ``(B, A)`` starting with the closest ranks,
which leaves every unsuited tuple with a word.

The sweep visits rank distance first, then the starting rank, then the suit
(spades, hearts, diamonds, clubs) and stops as soon as the word budget is
met. With the fixed deck it stops at distance 11 after blanking ``A♠:Q♠``
and ``A♡:Q♡``, which leaves these 20 suited tuples yielding words::

    A♠ : K♠          A♡ : K♡          A♢ : Q♢ or K♢    A♣ : Q♣ or K♣
    2♠ : K♠          2♡ : K♡          2♢ : K♢          2♣ : K♣
    K♠ : A♠ or 2♠    K♡ : A♡ or 2♡    Q♢ : A♢          Q♣ : A♣
                                      K♢ : A♢ or 2♢    K♣ : A♣ or 2♣

Changing the iteration order produces a different table that still
satisfies every structural property but assigns different words, so the
order is part of the published format.
"""

from __future__ import annotations

import logging

from . import encoding

__all__ = ["same_card_blanks", "select_blanks"]

_LOG = logging.getLogger(__name__)


def same_card_blanks() -> set[int]:
    """Return the tuple indices of the 52 ``(A, A)`` tuples."""

    return {index * (encoding.DECK_CARD_COUNT + 1) for index in range(encoding.DECK_CARD_COUNT)}


def select_blanks(word_count: int = encoding.WORD_COUNT) -> frozenset[int]:
    """Return the set of tuple indices that receive no word index."""

    max_words = encoding.TUPLE_COUNT - encoding.DECK_CARD_COUNT
    suited_pairs = encoding.SUIT_COUNT * (encoding.RANK_COUNT * (encoding.RANK_COUNT - 1) // 2)
    # Unsuited tuples always keep their word, so the sweep cannot go lower.
    min_words = max_words - 2 * suited_pairs
    if not min_words <= word_count <= max_words:
        raise ValueError(f"word_count must be between {min_words} and {max_words}")

    skip = same_card_blanks()
    if encoding.TUPLE_COUNT - len(skip) > word_count:
        _sweep_suited_pairs(skip, word_count)

    _LOG.debug("selected %d blank tuples for %d words", len(skip), word_count)
    return frozenset(skip)


def _sweep_suited_pairs(skip: set[int], word_count: int) -> None:
    deck = encoding.DECK_CARD_COUNT
    for distance in range(1, encoding.RANK_COUNT):
        for row_offset in range(encoding.RANK_COUNT - distance):
            for suit_idx in range(encoding.SUIT_COUNT):
                row = suit_idx * encoding.RANK_COUNT + row_offset
                col = row + distance
                skip.add(row * deck + col)
                skip.add(col * deck + row)
                if encoding.TUPLE_COUNT - len(skip) <= word_count:
                    _LOG.debug(
                        "blank sweep stopped at distance %d, offset %d, suit %s",
                        distance,
                        row_offset,
                        encoding.SUITS[suit_idx],
                    )
                    return
