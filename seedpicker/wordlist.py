"""Binding between word indices and the BIP39 English wordlist."""

from __future__ import annotations

from functools import lru_cache
from typing import Sequence

from mnemonic import Mnemonic

from . import encoding
from .table import WordTable

__all__ = ["load_wordlist", "validate_wordlist", "word_for"]


def validate_wordlist(words: Sequence[str]) -> tuple[str, ...]:
    """Return ``words`` as a tuple, rejecting lists of the wrong length."""

    if len(words) != encoding.WORD_COUNT:
        raise ValueError(f"wordlist must contain exactly {encoding.WORD_COUNT} words, got {len(words)}")
    return tuple(words)


@lru_cache(maxsize=None)
def load_wordlist(language: str = "english") -> tuple[str, ...]:
    """Return the BIP39 wordlist for ``language`` from the ``mnemonic`` package."""

    return validate_wordlist(Mnemonic(language).wordlist)


def word_for(table: WordTable, words: Sequence[str], first: int, second: int) -> str | None:
    """Return the seed word yielded by ``(first, second)``, or ``None`` for a blank."""

    word_index = table.lookup(first, second)
    if word_index is None:
        return None
    return words[word_index]
