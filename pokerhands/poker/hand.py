from collections import Counter
from typing import Dict, Iterable, Iterator, List

from .cards import Card, Rank, Suit

HAND_SIZE = 5


class HandError(ValueError):
    """Raised when a set of cards does not form a valid hand."""


class WrongCount(HandError):
    def __init__(self, count: int):
        self.count = count
        super().__init__(f"number of cards in hand ({count}) must be {HAND_SIZE}")


class DuplicateCards(HandError):
    def __init__(self, distinct_count: int):
        self.distinct_count = distinct_count
        super().__init__(f"got {distinct_count} unique cards, need {HAND_SIZE}")


class Hand:
    """Five distinct cards.

    The constructor validates its input, so every Hand that exists holds
    exactly five unique cards. Hands are read-only; card order does not
    matter for equality.
    """

    __slots__ = ("_cards",)

    def __init__(self, cards: Iterable[Card]):
        cards = tuple(cards)
        if len(cards) != HAND_SIZE:
            raise WrongCount(len(cards))

        distinct: List[Card] = []
        for card in cards:
            if card not in distinct:
                distinct.append(card)
        if len(distinct) != HAND_SIZE:
            raise DuplicateCards(len(distinct))

        object.__setattr__(self, "_cards", cards)

    def __setattr__(self, name, value):
        raise AttributeError("Hand is immutable")

    def __delattr__(self, name):
        raise AttributeError("Hand is immutable")

    def cards(self) -> Iterator[Card]:
        return iter(self._cards)

    def count_ranks(self) -> Dict[Rank, int]:
        return dict(Counter(card.rank for card in self._cards))

    def count_suits(self) -> Dict[Suit, int]:
        return dict(Counter(card.suit for card in self._cards))

    def __len__(self) -> int:
        return len(self._cards)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        return frozenset(self._cards) == frozenset(other._cards)

    def __hash__(self) -> int:
        return hash(frozenset(self._cards))

    def __repr__(self) -> str:
        return f"Hand({list(self._cards)})"


def build_hand(cards: Iterable[Card]) -> Hand:
    return Hand(cards)
