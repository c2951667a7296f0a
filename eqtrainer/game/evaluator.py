"""Hand evaluation contract and the treys-backed implementation."""

from dataclasses import dataclass
from enum import IntEnum
from itertools import combinations
from typing import Optional, Protocol, Sequence

from treys import Evaluator

from .cards import Card
from .streets import GameVariant


# treys scores run from 1 (royal flush) to 7462 (seven high)
WORST_TREYS_SCORE = 7462


class HandCategory(IntEnum):
    """The nine canonical hand categories, weakest first."""
    HIGH_CARD = 0
    PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    FOUR_OF_A_KIND = 7
    STRAIGHT_FLUSH = 8

    @property
    def label(self) -> str:
        return CATEGORY_LABELS[self]

    @classmethod
    def from_treys_class(cls, rank_class: int) -> "HandCategory":
        """Map a treys rank class (1 = straight flush ... 9 = high card)."""
        # Newer treys releases report royal flushes as class 0
        return cls(9 - max(rank_class, 1))


CATEGORY_LABELS = {
    HandCategory.HIGH_CARD: "High Card",
    HandCategory.PAIR: "Pair",
    HandCategory.TWO_PAIR: "Two Pair",
    HandCategory.THREE_OF_A_KIND: "Three of a Kind",
    HandCategory.STRAIGHT: "Straight",
    HandCategory.FLUSH: "Flush",
    HandCategory.FULL_HOUSE: "Full House",
    HandCategory.FOUR_OF_A_KIND: "Four of a Kind",
    HandCategory.STRAIGHT_FLUSH: "Straight Flush",
}


@dataclass(frozen=True)
class HandResult:
    """An evaluated hand. Higher rank is better."""
    rank: int
    category: HandCategory

    def __str__(self) -> str:
        return self.category.label


class HandEvaluator(Protocol):
    """
    Capability the simulator needs from a hand ranking library.

    solve() returns None when the cards cannot be evaluated.
    winners() returns every result tied for the best rank.
    """

    def solve(
        self,
        hole_cards: Sequence[Card],
        board_cards: Sequence[Card],
        variant: GameVariant,
    ) -> Optional[HandResult]:
        ...

    def winners(self, results: Sequence[HandResult]) -> list[HandResult]:
        ...


class TreysEvaluator:
    """
    Hand evaluator built on the treys lookup tables.

    Hold'em uses the best five of all hole and board cards. Omaha
    takes exactly two hole cards and three board cards.
    """

    def __init__(self):
        self.evaluator = Evaluator()
        self._card_cache: dict[Card, int] = {}

    def _treys(self, cards: Sequence[Card]) -> list[int]:
        out = []
        for card in cards:
            value = self._card_cache.get(card)
            if value is None:
                value = card.to_treys()
                self._card_cache[card] = value
            out.append(value)
        return out

    def score(
        self,
        hole_cards: Sequence[Card],
        board_cards: Sequence[Card],
        variant: GameVariant,
    ) -> Optional[int]:
        """
        Raw treys score (lower is better), or None if not evaluable.
        """
        hole = self._treys(hole_cards)
        board = self._treys(board_cards)

        if variant is GameVariant.OMAHA:
            if len(hole) != 4 or not 3 <= len(board) <= 5:
                return None
            return min(
                self.evaluator.evaluate(list(pair), list(trio))
                for pair in combinations(hole, 2)
                for trio in combinations(board, 3)
            )

        if not 5 <= len(hole) + len(board) <= 7:
            return None
        return self.evaluator.evaluate(hole, board)

    def solve(
        self,
        hole_cards: Sequence[Card],
        board_cards: Sequence[Card],
        variant: GameVariant = GameVariant.HOLDEM,
    ) -> Optional[HandResult]:
        score = self.score(hole_cards, board_cards, variant)
        if score is None:
            return None
        category = HandCategory.from_treys_class(
            self.evaluator.get_rank_class(score)
        )
        return HandResult(rank=WORST_TREYS_SCORE + 1 - score, category=category)

    def winners(self, results: Sequence[HandResult]) -> list[HandResult]:
        if not results:
            return []
        best = max(r.rank for r in results)
        return [r for r in results if r.rank == best]
