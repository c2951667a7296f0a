"""Card representation and deck operations."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable

import numpy as np
from treys import Card as TreysCard

from ..errors import InputViolation


class Rank(IntEnum):
    """Card ranks (2-14 where 14 is Ace)."""
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
    ACE = 14


class Suit(IntEnum):
    """Card suits."""
    SPADES = 0
    HEARTS = 1
    DIAMONDS = 2
    CLUBS = 3


# Mapping for string conversion
RANK_STR = {
    2: "2", 3: "3", 4: "4", 5: "5", 6: "6", 7: "7", 8: "8", 9: "9",
    10: "T", 11: "J", 12: "Q", 13: "K", 14: "A"
}
STR_RANK = {v: k for k, v in RANK_STR.items()}

SUIT_STR = {0: "s", 1: "h", 2: "d", 3: "c"}
STR_SUIT = {v: k for k, v in SUIT_STR.items()}
SUIT_SYMBOLS = {"♠": "s", "♥": "h", "♦": "d", "♣": "c"}
SYMBOL_FOR_SUIT = {v: k for k, v in SUIT_SYMBOLS.items()}


@dataclass(frozen=True)
class Card:
    """A playing card."""
    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        return f"{RANK_STR[self.rank]}{SUIT_STR[self.suit]}"

    def __repr__(self) -> str:
        return str(self)

    @property
    def pretty(self) -> str:
        """Display form with a suit symbol, e.g. 'A♠'."""
        return f"{RANK_STR[self.rank]}{SYMBOL_FOR_SUIT[SUIT_STR[self.suit]]}"

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Parse card from string like 'As', 'Th', '2c' or 'A♠'."""
        s = s.strip()
        if len(s) == 3 and s[:2] == "10":
            s = "T" + s[2]
        if len(s) != 2:
            raise InputViolation(f"Invalid card string: {s}")
        rank_char = s[0].upper()
        suit_char = SUIT_SYMBOLS.get(s[1], s[1].lower())

        if rank_char not in STR_RANK:
            raise InputViolation(f"Invalid rank: {rank_char}")
        if suit_char not in STR_SUIT:
            raise InputViolation(f"Invalid suit: {s[1]}")

        return cls(rank=Rank(STR_RANK[rank_char]), suit=Suit(STR_SUIT[suit_char]))

    def to_treys(self) -> int:
        """Convert to treys library card format."""
        return TreysCard.new(str(self))


def parse_cards(text: str) -> list[Card]:
    """
    Parse a run of cards.

    Accepts 'AsKh', 'As Kh' and 'As,Kh'. An empty string yields no cards.
    """
    compact = text.replace(",", "").replace(" ", "")
    compact = compact.replace("10", "T")
    if len(compact) % 2:
        raise InputViolation(f"Invalid card list: {text}")
    return [
        Card.from_string(compact[i:i + 2])
        for i in range(0, len(compact), 2)
    ]


def full_deck() -> list[Card]:
    """All 52 cards, ace high to deuce, spades/hearts/diamonds/clubs."""
    return [
        Card(rank, suit)
        for rank in sorted(Rank, reverse=True)
        for suit in Suit
    ]


def remove_cards(deck: Iterable[Card], used: Iterable[Card]) -> list[Card]:
    """Return deck without the used cards, keeping the original order."""
    used_set = set(used)
    return [c for c in deck if c not in used_set]


def shuffled_copy(deck: list[Card], rng: np.random.Generator) -> list[Card]:
    """Return a uniformly shuffled copy of deck drawn from rng."""
    order = rng.permutation(len(deck))
    return [deck[i] for i in order]
