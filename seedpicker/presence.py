"""Plain-text word presence table: one mark per tuple, ``#`` word, ``.`` blank."""

from __future__ import annotations

from . import encoding
from .table import WordTable

_RANK_CHARS = "A23456789XJQK"
_GROUP_GAP = "  "


def _header() -> list[str]:
    ranks = (_RANK_CHARS + _GROUP_GAP) * encoding.SUIT_COUNT
    suits = _GROUP_GAP.join(symbol * encoding.RANK_COUNT for symbol in encoding.SUIT_SYMBOLS)
    return [f"     {ranks}", f"     {suits}"]


def render_presence_table(table: WordTable) -> str:
    """Render ``table`` as four blocks of 13 rows, one block per first-card suit."""

    present = table.presence_matrix()
    lines: list[str] = []
    for row_suit, symbol in enumerate(encoding.SUIT_SYMBOLS):
        if row_suit:
            lines.append("")
        lines.extend(_header())
        for row_rank, rank_char in enumerate(_RANK_CHARS):
            first = encoding.encode_card(row_suit, row_rank)
            groups = []
            for col_suit in range(encoding.SUIT_COUNT):
                start = col_suit * encoding.RANK_COUNT
                marks = present[first, start : start + encoding.RANK_COUNT]
                groups.append("".join("#" if mark else "." for mark in marks))
            lines.append(f" {rank_char}{symbol}  " + _GROUP_GAP.join(groups))
    return "\n".join(lines) + "\n"
