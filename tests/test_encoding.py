from __future__ import annotations

import pytest

from seedpicker import encoding


def test_deck_constants() -> None:
    assert encoding.DECK_CARD_COUNT == 52
    assert encoding.TUPLE_COUNT == 2704
    assert encoding.WORD_COUNT == 2048


@pytest.mark.parametrize(
    ("suit_idx", "rank_idx", "expected"),
    [
        (0, 0, 0),
        (0, 12, 12),
        (1, 0, 13),
        (3, 12, 51),
    ],
)
def test_encode_card_is_suit_major(suit_idx: int, rank_idx: int, expected: int) -> None:
    assert encoding.encode_card(suit_idx, rank_idx) == expected
    decoded = encoding.decode_card(expected)
    assert (decoded.suit_idx, decoded.rank_idx) == (suit_idx, rank_idx)


def test_neighbouring_identifiers() -> None:
    four_of_hearts = encoding.encode_card(1, 3)
    assert encoding.decode_card(four_of_hearts + 1).rank_idx == 4
    assert encoding.decode_card(four_of_hearts + 13) == encoding.CardDecoding(2, 3)
    assert encoding.decode_card(four_of_hearts - 13) == encoding.CardDecoding(0, 3)


@pytest.mark.parametrize("bad", [-1, 52, 100])
def test_card_identifier_out_of_range(bad: int) -> None:
    with pytest.raises(ValueError):
        encoding.decode_card(bad)


def test_encode_card_rejects_bad_components() -> None:
    with pytest.raises(ValueError):
        encoding.encode_card(4, 0)
    with pytest.raises(ValueError):
        encoding.encode_card(0, 13)


def test_tuple_round_trip() -> None:
    assert encoding.encode_tuple(0, 0) == 0
    assert encoding.encode_tuple(1, 0) == 52
    assert encoding.encode_tuple(51, 51) == 2703
    assert encoding.decode_tuple(2703) == (51, 51)
    assert encoding.decode_tuple(53) == (1, 1)


@pytest.mark.parametrize("bad", [-1, 2704])
def test_tuple_index_out_of_range(bad: int) -> None:
    with pytest.raises(ValueError):
        encoding.decode_tuple(bad)


def test_suit_and_distance_helpers() -> None:
    assert encoding.same_suit(0, 12)
    assert not encoding.same_suit(12, 13)
    assert encoding.rank_distance(0, 12) == 12
    assert encoding.rank_distance(13 + 5, 2) == 3
