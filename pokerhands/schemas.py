from pydantic import BaseModel
from typing import List

from pokerhands.poker.cards import Card
from pokerhands.poker.hand import Hand
from pokerhands.poker.hand_evaluator import HandCategory


# ---------- Cards ----------

class CardRead(BaseModel):
    rank: str
    suit: str
    code: str

    @classmethod
    def from_card(cls, card: Card) -> "CardRead":
        return cls(rank=card.rank.label, suit=card.suit.label, code=card.code())


# ---------- Hands ----------

class HandAnalysis(BaseModel):
    hand: List[CardRead]
    category: str

    @classmethod
    def from_hand(cls, hand: Hand, category: HandCategory) -> "HandAnalysis":
        return cls(
            hand=[CardRead.from_card(card) for card in hand.cards()],
            category=category.label,
        )
