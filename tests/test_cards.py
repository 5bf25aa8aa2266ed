from __future__ import annotations

import pytest

from seedpicker.cards import CARDS, Card, Rank, Suit, card, iter_full_deck, suit_cards


def test_deck_has_52_unique_cards_in_canonical_order() -> None:
    deck = list(iter_full_deck())
    assert len(deck) == 52
    assert [c.index for c in deck] == list(range(52))
    assert len({(c.suit, c.rank) for c in deck}) == 52
    assert deck[0] == Card(0, Suit.SPADES, Rank.ACE)
    assert deck[12] == Card(12, Suit.SPADES, Rank.KING)
    assert deck[13] == Card(13, Suit.HEARTS, Rank.ACE)
    assert deck[51] == Card(51, Suit.CLUBS, Rank.KING)


def test_index_matches_suit_and_rank_positions() -> None:
    for value in CARDS:
        assert value.index == value.suit.index * 13 + value.rank.index


def test_suit_colours_and_symbols() -> None:
    assert [s.color for s in Suit.ordered()] == ["black", "red", "red", "black"]
    assert "".join(s.symbol for s in Suit.ordered()) == "♠♡♢♣"


def test_card_lookup_rejects_out_of_range() -> None:
    assert card(27) is CARDS[27]
    with pytest.raises(ValueError):
        card(52)


@pytest.mark.parametrize(
    ("code", "expected"),
    [
        ("AS", 0),
        ("as", 0),
        ("KS", 12),
        ("2h", 14),
        ("10D", 35),
        ("XD", 35),
        ("TD", 35),
        ("Q♣", 50),
        ("K♦", 38),
        ("A♡", 13),
    ],
)
def test_from_code(code: str, expected: int) -> None:
    assert Card.from_code(code).index == expected


@pytest.mark.parametrize("code", ["", "A", "1S", "AZ", "11H", "JOKER"])
def test_from_code_rejects_garbage(code: str) -> None:
    with pytest.raises(ValueError):
        Card.from_code(code)


def test_labels() -> None:
    assert card(0).label() == "A♠"
    assert card(22).label() == "10♡"
    assert Rank.TEN.short == "X"
    assert Rank.JACK.short == "J"


def test_suit_cards() -> None:
    diamonds = suit_cards(Suit.DIAMONDS)
    assert [c.rank for c in diamonds] == list(Rank.ordered())
    assert all(c.suit is Suit.DIAMONDS for c in diamonds)
