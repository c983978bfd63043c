from enum import IntEnum
from typing import Dict

from .cards import Rank, Suit
from .hand import Hand


# Hand categories from worst to best.
class HandCategory(IntEnum):
    HIGH_CARD = 1
    ONE_PAIR = 2
    TWO_PAIR = 3
    THREE_OF_A_KIND = 4
    STRAIGHT = 5
    FLUSH = 6
    FULL_HOUSE = 7
    FOUR_OF_A_KIND = 8
    STRAIGHT_FLUSH = 9

    @property
    def label(self) -> str:
        # HIGH_CARD -> "HighCard"
        return "".join(word.capitalize() for word in self.name.split("_"))


# Ace is rank 1, so this is the one straight that numeric adjacency misses.
TEN_TO_ACE = frozenset({Rank.TEN, Rank.JACK, Rank.QUEEN, Rank.KING, Rank.ACE})


def is_flush(suit_counts: Dict[Suit, int]) -> bool:
    return len(suit_counts) == 1


def is_straight(rank_counts: Dict[Rank, int]) -> bool:
    """Five distinct consecutive ranks, Ace low, plus Ten through Ace.

    No other run wraps around the Ace: King-Ace-Two-Three-Four is not a
    straight.
    """

    if len(rank_counts) != 5:
        return False
    ranks = sorted(rank_counts)
    if ranks[-1] - ranks[0] == 4:
        return True
    return set(ranks) == TEN_TO_ACE


def classify(hand: Hand) -> HandCategory:
    """Return the strongest category the hand satisfies.

    The checks run strongest first and several overlap (four of a kind also
    contains a pair), so their order decides the result.
    """

    rank_counts = hand.count_ranks()
    suit_counts = hand.count_suits()
    counts = sorted(rank_counts.values(), reverse=True)

    flush = is_flush(suit_counts)
    straight = is_straight(rank_counts)

    if straight and flush:
        return HandCategory.STRAIGHT_FLUSH

    if counts[0] == 4:
        return HandCategory.FOUR_OF_A_KIND

    if len(rank_counts) == 2 and counts[0] in (2, 3):
        return HandCategory.FULL_HOUSE

    if flush:
        return HandCategory.FLUSH

    if straight:
        return HandCategory.STRAIGHT

    if counts[0] == 3:
        return HandCategory.THREE_OF_A_KIND

    if counts.count(2) == 2:
        return HandCategory.TWO_PAIR

    if counts[0] == 2:
        return HandCategory.ONE_PAIR

    return HandCategory.HIGH_CARD
