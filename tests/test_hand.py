import pytest

from pokerhands.poker.cards import Card, Rank, Suit, parse_cards
from pokerhands.poker.hand import DuplicateCards, Hand, HandError, WrongCount, build_hand


def spades(*ranks):
    return [Card(rank, Suit.SPADES) for rank in ranks]


def test_too_few_cards_fail():
    with pytest.raises(WrongCount) as excinfo:
        build_hand(spades(Rank.SEVEN, Rank.EIGHT, Rank.NINE, Rank.TEN))
    assert excinfo.value.count == 4


def test_too_many_cards_fail():
    cards = spades(Rank.SEVEN, Rank.EIGHT, Rank.NINE, Rank.TEN, Rank.JACK, Rank.QUEEN)
    with pytest.raises(WrongCount) as excinfo:
        build_hand(cards)
    assert excinfo.value.count == 6


def test_empty_input_fails():
    with pytest.raises(WrongCount):
        build_hand([])


def test_non_unique_cards_fail():
    cards = spades(Rank.SEVEN, Rank.EIGHT, Rank.NINE, Rank.TEN, Rank.TEN)
    with pytest.raises(DuplicateCards) as excinfo:
        build_hand(cards)
    assert excinfo.value.distinct_count == 4


def test_duplicate_ace_of_spades_reports_four_distinct():
    cards = [
        Card(Rank.ACE, Suit.SPADES),
        Card(Rank.ACE, Suit.SPADES),
        Card(Rank.THREE, Suit.HEARTS),
        Card(Rank.FOUR, Suit.DIAMONDS),
        Card(Rank.FIVE, Suit.CLUBS),
    ]
    with pytest.raises(DuplicateCards) as excinfo:
        build_hand(cards)
    assert excinfo.value.distinct_count == 4


def test_all_the_same_card_reports_one_distinct():
    with pytest.raises(DuplicateCards) as excinfo:
        build_hand([Card(Rank.KING, Suit.HEARTS)] * 5)
    assert excinfo.value.distinct_count == 1


def test_hand_errors_are_value_errors():
    assert issubclass(WrongCount, HandError)
    assert issubclass(DuplicateCards, HandError)
    assert issubclass(HandError, ValueError)


def test_five_unique_cards_succeed():
    cards = spades(Rank.SEVEN, Rank.EIGHT, Rank.NINE, Rank.TEN, Rank.JACK)
    hand = build_hand(cards)

    assert len(hand) == 5
    assert sorted(hand.cards(), key=lambda c: c.rank) == cards


def test_accepts_any_iterable():
    hand = build_hand(card for card in parse_cards("1s,2s,3s,4s,5s"))
    assert len(list(hand.cards())) == 5


def test_count_ranks():
    hand = build_hand(parse_cards("1s,1h,7r,7k,7h"))
    assert hand.count_ranks() == {Rank.ACE: 2, Rank.SEVEN: 3}


def test_count_suits():
    hand = build_hand(parse_cards("1s,1h,7r,7k,7h"))
    assert hand.count_suits() == {
        Suit.SPADES: 1,
        Suit.HEARTS: 2,
        Suit.DIAMONDS: 1,
        Suit.CLUBS: 1,
    }


def test_counts_only_include_present_keys():
    hand = build_hand(parse_cards("2s,3s,4s,5s,6s"))
    assert hand.count_suits() == {Suit.SPADES: 5}
    assert set(hand.count_ranks()) == {Rank.TWO, Rank.THREE, Rank.FOUR, Rank.FIVE, Rank.SIX}


def test_order_does_not_affect_equality():
    first = build_hand(parse_cards("2s,3h,4r,5k,6s"))
    second = build_hand(parse_cards("6s,5k,4r,3h,2s"))

    assert first == second
    assert hash(first) == hash(second)


def test_hand_is_immutable():
    hand = build_hand(parse_cards("2s,3h,4r,5k,6s"))
    with pytest.raises(AttributeError):
        hand._cards = ()
    with pytest.raises(AttributeError):
        del hand._cards
    assert len(list(hand.cards())) == 5


def test_hand_does_not_follow_changes_to_its_input():
    cards = parse_cards("2s,3h,4r,5k,6s")
    hand = Hand(cards)
    cards[0] = Card(Rank.KING, Suit.CLUBS)

    assert Card(Rank.TWO, Suit.SPADES) in list(hand.cards())
