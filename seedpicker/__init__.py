"""Card tuple to BIP39 seed word table for SeedPicker Solitaire."""

from . import blanks, cards, encoding, table, tuples
from .table import WordTable, build_word_table

__all__ = [
    "WordTable",
    "blanks",
    "build_word_table",
    "cards",
    "encoding",
    "table",
    "tuples",
]
