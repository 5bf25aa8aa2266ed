"""Card and tuple identifier encoding utilities for SeedPicker."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

RANKS: Final[list[str]] = ["A", "2", "3", "4", "5", "6", "7", "8", "9", "10", "J", "Q", "K"]
SUITS: Final[list[str]] = ["S", "H", "D", "C"]
SUIT_SYMBOLS: Final[list[str]] = ["♠", "♡", "♢", "♣"]
RANK_TO_IDX: Final[dict[str, int]] = {rank: idx for idx, rank in enumerate(RANKS)}
SUIT_TO_IDX: Final[dict[str, int]] = {suit: idx for idx, suit in enumerate(SUITS)}

RANK_COUNT: Final[int] = len(RANKS)
SUIT_COUNT: Final[int] = len(SUITS)
DECK_CARD_COUNT: Final[int] = RANK_COUNT * SUIT_COUNT
TUPLE_COUNT: Final[int] = DECK_CARD_COUNT * DECK_CARD_COUNT
WORD_COUNT: Final[int] = 2048


@dataclass(frozen=True, slots=True)
class CardDecoding:
    """Typed container describing a decoded card identifier."""

    suit_idx: int
    rank_idx: int


def encode_card(suit_idx: int, rank_idx: int) -> int:
    """Encode a suit and rank index into a card identifier."""

    if not 0 <= suit_idx < SUIT_COUNT:
        raise ValueError("suit_idx out of range")
    if not 0 <= rank_idx < RANK_COUNT:
        raise ValueError("rank_idx out of range")
    return suit_idx * RANK_COUNT + rank_idx


def decode_card(card_identifier: int) -> CardDecoding:
    """Decode a card identifier into its suit and rank indices."""

    validate_card_identifier(card_identifier)
    return CardDecoding(card_identifier // RANK_COUNT, card_identifier % RANK_COUNT)


def validate_card_identifier(card_identifier: int) -> None:
    if card_identifier < 0 or card_identifier >= DECK_CARD_COUNT:
        raise ValueError(f"card identifier {card_identifier} out of range")


def validate_tuple_index(tuple_index: int) -> None:
    if tuple_index < 0 or tuple_index >= TUPLE_COUNT:
        raise ValueError(f"tuple index {tuple_index} out of range")


def encode_tuple(first: int, second: int) -> int:
    """Return the tuple index for the ordered pair ``(first, second)``."""

    validate_card_identifier(first)
    validate_card_identifier(second)
    return first * DECK_CARD_COUNT + second


def decode_tuple(tuple_index: int) -> tuple[int, int]:
    """Split a tuple index into its ``(first, second)`` card identifiers."""

    validate_tuple_index(tuple_index)
    return divmod(tuple_index, DECK_CARD_COUNT)


def same_suit(first: int, second: int) -> bool:
    """Return ``True`` when both card identifiers share a suit."""

    return first // RANK_COUNT == second // RANK_COUNT


def rank_distance(first: int, second: int) -> int:
    """Return the absolute rank distance between two card identifiers."""

    return abs(first % RANK_COUNT - second % RANK_COUNT)
