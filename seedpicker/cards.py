"""Card abstractions for the fixed 52-card SeedPicker deck."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Final, Iterator

from . import encoding


class Suit(str, Enum):
    """Enumeration of the four suits in canonical deck order."""

    SPADES = "S"
    HEARTS = "H"
    DIAMONDS = "D"
    CLUBS = "C"

    @property
    def index(self) -> int:
        return encoding.SUIT_TO_IDX[self.value]

    @property
    def symbol(self) -> str:
        return encoding.SUIT_SYMBOLS[self.index]

    @property
    def color(self) -> str:
        """Return the printed colour of the suit."""

        return "red" if self in (Suit.HEARTS, Suit.DIAMONDS) else "black"

    @classmethod
    def ordered(cls) -> tuple["Suit", ...]:
        return (cls.SPADES, cls.HEARTS, cls.DIAMONDS, cls.CLUBS)


class Rank(str, Enum):
    """Enumeration of ranks ordered from Ace (low) to King (high)."""

    ACE = "A"
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    TEN = "10"
    JACK = "J"
    QUEEN = "Q"
    KING = "K"

    @property
    def index(self) -> int:
        return encoding.RANK_TO_IDX[self.value]

    @property
    def short(self) -> str:
        """Single-character rank label, with ``X`` standing in for ten."""

        return "X" if self is Rank.TEN else self.value

    @classmethod
    def ordered(cls) -> tuple["Rank", ...]:
        return tuple(cls(rank) for rank in encoding.RANKS)


_SUIT_ALIASES: Final[dict[str, Suit]] = {
    **{suit.value: suit for suit in Suit},
    "♠": Suit.SPADES,
    "♡": Suit.HEARTS,
    "♥": Suit.HEARTS,
    "♢": Suit.DIAMONDS,
    "♦": Suit.DIAMONDS,
    "♣": Suit.CLUBS,
    "♧": Suit.CLUBS,
}


@dataclass(frozen=True, slots=True)
class Card:
    """Value object describing one card of the canonical deck."""

    index: int
    suit: Suit
    rank: Rank

    @classmethod
    def from_index(cls, index: int) -> "Card":
        decoded = encoding.decode_card(index)
        return cls(index, Suit.ordered()[decoded.suit_idx], Rank.ordered()[decoded.rank_idx])

    @classmethod
    def from_code(cls, code: str) -> "Card":
        """Parse codes such as ``AS``, ``10h``, ``XD`` or ``Q♣``."""

        text = code.strip().upper()
        if len(text) < 2:
            raise ValueError(f"invalid card code '{code}'")
        rank_text, suit_text = text[:-1], text[-1]
        if rank_text in ("X", "T"):
            rank_text = "10"
        suit = _SUIT_ALIASES.get(suit_text)
        if suit is None or rank_text not in encoding.RANK_TO_IDX:
            raise ValueError(f"invalid card code '{code}'")
        return card(encoding.encode_card(suit.index, encoding.RANK_TO_IDX[rank_text]))

    def label(self) -> str:
        """Create a display label such as ``10♡``."""

        return f"{self.rank.value}{self.suit.symbol}"


CARDS: Final[tuple[Card, ...]] = tuple(Card.from_index(index) for index in range(encoding.DECK_CARD_COUNT))


def card(index: int) -> Card:
    """Return the unique card with canonical ``index``."""

    encoding.validate_card_identifier(index)
    return CARDS[index]


def iter_full_deck() -> Iterator[Card]:
    """Yield the 52 cards in canonical order (suit-major, Ace low)."""

    yield from CARDS


def suit_cards(suit: Suit) -> tuple[Card, ...]:
    """Return the 13 cards of ``suit`` ordered by rank."""

    start = suit.index * encoding.RANK_COUNT
    return CARDS[start : start + encoding.RANK_COUNT]
