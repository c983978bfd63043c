from random import Random, SystemRandom
from typing import List, Optional, Tuple

from .cards import Card, Rank, Suit
from .hand import HAND_SIZE, Hand, HandError

# All 52 cards, built once at import.
FULL_DECK: Tuple[Card, ...] = tuple(Card(rank, suit) for suit in Suit for rank in Rank)


class Deck:
    def __init__(self, rng: Optional[Random] = None):
        self._rng = rng if rng is not None else SystemRandom()
        self._cards: List[Card] = []
        self.reset()

    def reset(self) -> None:
        """Restore all 52 cards and shuffle them."""
        self._cards = list(FULL_DECK)
        self.shuffle()

    def shuffle(self) -> None:
        self._rng.shuffle(self._cards)

    def deal_one(self) -> Card:
        if not self._cards:
            raise ValueError("Deck is empty")
        return self._cards.pop()

    def deal(self, count: int) -> List[Card]:
        if count > len(self._cards):
            raise ValueError(f"Cannot deal {count} cards, {len(self._cards)} remaining")
        return [self.deal_one() for _ in range(count)]

    def remaining(self) -> int:
        return len(self._cards)

    def __len__(self) -> int:
        return len(self._cards)


def draw_random_hand(rng: Optional[Random] = None) -> Hand:
    """Draw five distinct cards uniformly at random.

    Each call shuffles its own copy of the deck, so the only randomness shared
    between callers is whatever ``rng`` they pass in. Defaults to a fresh
    cryptographically secure RNG.
    """

    cards = Deck(rng).deal(HAND_SIZE)
    try:
        return Hand(cards)
    except HandError as exc:
        raise RuntimeError(f"deck dealt an invalid hand: {cards}") from exc
