from enum import Enum, IntEnum
from dataclasses import dataclass
from typing import List


class CardParseError(ValueError):
    """Raised when text cannot be parsed into a card."""


class InvalidLength(CardParseError):
    def __init__(self, length: int):
        self.length = length
        super().__init__(f"length of card text ({length}) must be 2")


class InvalidRank(CardParseError):
    def __init__(self, char: str):
        self.char = char
        super().__init__(f"{char!r} is not a valid rank")


class InvalidSuit(CardParseError):
    def __init__(self, char: str):
        self.char = char
        super().__init__(f"{char!r} is not a valid suit")


class Suit(Enum):
    CLUBS = "k"
    DIAMONDS = "r"
    HEARTS = "h"
    SPADES = "s"

    def short(self) -> str:
        return self.value

    @property
    def label(self) -> str:
        return self.name.capitalize()


class Rank(IntEnum):
    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13

    def short(self) -> str:
        return _RANK_CHARS[self]

    @property
    def label(self) -> str:
        return self.name.capitalize()


_RANK_CHARS = {
    Rank.ACE: "1",
    Rank.TWO: "2",
    Rank.THREE: "3",
    Rank.FOUR: "4",
    Rank.FIVE: "5",
    Rank.SIX: "6",
    Rank.SEVEN: "7",
    Rank.EIGHT: "8",
    Rank.NINE: "9",
    Rank.TEN: "t",
    Rank.JACK: "j",
    Rank.QUEEN: "q",
    Rank.KING: "k",
}
_RANKS_BY_CHAR = {char: rank for rank, char in _RANK_CHARS.items()}
_SUITS_BY_CHAR = {suit.value: suit for suit in Suit}


@dataclass(frozen=True)
class Card:
    rank: Rank
    suit: Suit

    def code(self) -> str:
        """Two-character text form, e.g. "tk" for the Ten of Clubs."""
        return f"{self.rank.short()}{self.suit.short()}"

    def __str__(self) -> str:
        return self.code()

    def __repr__(self) -> str:
        return str(self)


def parse_suit(char: str) -> Suit:
    try:
        return _SUITS_BY_CHAR[char]
    except KeyError:
        raise InvalidSuit(char) from None


def parse_rank(char: str) -> Rank:
    try:
        return _RANKS_BY_CHAR[char]
    except KeyError:
        raise InvalidRank(char) from None


def parse_card(text: str) -> Card:
    """Parse a card from its two-character code.

    The first character is the rank (``1``-``9``, ``t``, ``j``, ``q``, ``k``)
    and the second the suit (``r``, ``s``, ``k``, ``h``). Only lowercase is
    accepted and nothing is trimmed. ``k`` means King in the first position
    and Clubs in the second.
    """

    if len(text) != 2:
        raise InvalidLength(len(text))
    rank = parse_rank(text[0])
    suit = parse_suit(text[1])
    return Card(rank, suit)


def parse_cards(text: str) -> List[Card]:
    """Parse a comma-separated list of card codes, stopping at the first bad one."""

    return [parse_card(segment) for segment in text.split(",")]
