"""Equity estimation against random opponents."""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Sequence, Union

import numpy as np

from ..config import EquityConfig
from ..errors import DeckExhaustion, InputViolation
from .cards import Card, full_deck, remove_cards, shuffled_copy
from .evaluator import HandCategory, HandEvaluator, HandResult, TreysEvaluator
from .streets import GameVariant, Street

logger = logging.getLogger(__name__)

RandomSource = Union[np.random.Generator, int, None]


class RolloutStrategy(Enum):
    """How the unknown board cards are covered."""
    EXACT_ROLLOUT = "exact_rollout"  # every possible final board
    MONTE_CARLO = "monte_carlo"      # boards sampled with the opponents


def select_strategy(missing: int) -> RolloutStrategy:
    """
    Pick the rollout strategy for a number of unknown board cards.

    With at most one card to come the final boards are few enough to
    enumerate; otherwise boards are sampled.
    """
    if missing <= 1:
        return RolloutStrategy.EXACT_ROLLOUT
    return RolloutStrategy.MONTE_CARLO


@dataclass
class HandRequest:
    """A spot to evaluate."""
    hero_cards: list[Card]
    board_cards: list[Card] = field(default_factory=list)
    variant: GameVariant = GameVariant.HOLDEM
    opponent_count: int = 1
    iterations: int = 4000
    street: Optional[Street] = None

    @property
    def missing(self) -> int:
        """Board cards still to come."""
        return 5 - len(self.board_cards)

    @property
    def used_cards(self) -> list[Card]:
        return list(self.hero_cards) + list(self.board_cards)

    def validate(self, max_opponents: int = 9) -> None:
        """Raise InputViolation if the request breaks an invariant."""
        needed = self.variant.hole_cards
        if len(self.hero_cards) != needed:
            raise InputViolation(
                f"{self.variant.value} needs {needed} hero cards, "
                f"got {len(self.hero_cards)}"
            )

        used = self.used_cards
        if len(set(used)) != len(used):
            raise InputViolation("Duplicate cards detected")

        if len(self.board_cards) > 5:
            raise InputViolation(
                f"Board has {len(self.board_cards)} cards, at most 5 allowed"
            )
        if self.street is not None and len(self.board_cards) > self.street.board_limit:
            raise InputViolation(
                f"Board has {len(self.board_cards)} cards, the "
                f"{self.street.name.lower()} allows {self.street.board_limit}"
            )

        if not 1 <= self.opponent_count <= max_opponents:
            raise InputViolation(
                f"Opponent count must be between 1 and {max_opponents}, "
                f"got {self.opponent_count}"
            )
        if self.iterations < 1:
            raise InputViolation(
                f"Iterations must be positive, got {self.iterations}"
            )


def check_deck_capacity(request: HandRequest, available: int) -> None:
    """Raise DeckExhaustion if a trial would run out of cards."""
    needed = request.opponent_count * request.variant.hole_cards
    needed += request.missing
    if needed > available:
        raise DeckExhaustion(needed, available)


@dataclass(frozen=True)
class EquityResult:
    """Outcome of an equity calculation."""
    equity: float
    tie_probability: float
    distribution: dict[HandCategory, float]
    trials: int
    strategy: RolloutStrategy

    @property
    def labeled_distribution(self) -> dict[str, float]:
        """Category label -> probability, weakest category first."""
        return {c.label: self.distribution[c] for c in HandCategory}


@dataclass
class _Tally:
    wins: int = 0
    ties: int = 0
    tie_credit: float = 0.0
    skipped: int = 0
    categories: dict[HandCategory, int] = field(
        default_factory=lambda: {c: 0 for c in HandCategory}
    )

    @property
    def valid(self) -> int:
        return sum(self.categories.values())


class EquityCalculator:
    """
    Equity of a hero hand against uniformly random opponents.

    With one or zero board cards to come every final board is
    enumerated and the iteration budget is split across them, each
    board getting at least one trial. Earlier streets are pure Monte
    Carlo. Trials where any hand cannot be evaluated are dropped.
    """

    def __init__(
        self,
        evaluator: Optional[HandEvaluator] = None,
        config: Optional[EquityConfig] = None,
    ):
        self.evaluator = evaluator or TreysEvaluator()
        self.config = config or EquityConfig()

    def compute(self, request: HandRequest, rng: RandomSource = None) -> EquityResult:
        """
        Calculate hero equity for a request.

        Args:
            request: Spot to evaluate
            rng: numpy Generator or seed; a fresh generator when None

        Returns:
            EquityResult with equity, tie probability and the hero's
            final hand category distribution
        """
        request.validate(self.config.max_opponents)
        remaining = remove_cards(full_deck(), request.used_cards)
        check_deck_capacity(request, len(remaining))

        rng = np.random.default_rng(rng)
        strategy = select_strategy(request.missing)
        tally = _Tally()

        if strategy is RolloutStrategy.EXACT_ROLLOUT:
            self._exact_rollout(request, remaining, rng, tally)
        else:
            self._monte_carlo(request, remaining, rng, tally)

        logger.debug(
            "%s: %d valid trials, %d skipped, %d wins, %d ties",
            strategy.value, tally.valid, tally.skipped, tally.wins, tally.ties,
        )
        return self._aggregate(tally, strategy)

    def _exact_rollout(
        self,
        request: HandRequest,
        remaining: list[Card],
        rng: np.random.Generator,
        tally: _Tally,
    ) -> None:
        board = list(request.board_cards)
        if request.missing == 0:
            candidates = [board]
        else:
            candidates = [board + [card] for card in remaining]

        trials = max(1, request.iterations // len(candidates))
        logger.debug(
            "Exact rollout over %d boards, %d trials each",
            len(candidates), trials,
        )

        for candidate in candidates:
            pool = remove_cards(remaining, candidate[len(board):])
            hero = self.evaluator.solve(request.hero_cards, candidate, request.variant)
            for _ in range(trials):
                dealt = shuffled_copy(pool, rng)
                opponents, _ = self._deal_opponents(dealt, request)
                self._play_trial(hero, opponents, candidate, request.variant, tally)

    def _monte_carlo(
        self,
        request: HandRequest,
        remaining: list[Card],
        rng: np.random.Generator,
        tally: _Tally,
    ) -> None:
        board = list(request.board_cards)
        missing = request.missing

        for _ in range(request.iterations):
            dealt = shuffled_copy(remaining, rng)
            opponents, rest = self._deal_opponents(dealt, request)
            full_board = board + rest[:missing]
            hero = self.evaluator.solve(request.hero_cards, full_board, request.variant)
            self._play_trial(hero, opponents, full_board, request.variant, tally)

    @staticmethod
    def _deal_opponents(
        dealt: list[Card], request: HandRequest
    ) -> tuple[list[list[Card]], list[Card]]:
        """Pop opponent hands off the front of a shuffled deck."""
        size = request.variant.hole_cards
        hands = [
            dealt[i * size:(i + 1) * size]
            for i in range(request.opponent_count)
        ]
        return hands, dealt[request.opponent_count * size:]

    def _play_trial(
        self,
        hero: Optional[HandResult],
        opponents: Sequence[Sequence[Card]],
        board: list[Card],
        variant: GameVariant,
        tally: _Tally,
    ) -> None:
        if hero is None:
            tally.skipped += 1
            return

        results = [hero]
        for hand in opponents:
            result = self.evaluator.solve(hand, board, variant)
            if result is None:
                tally.skipped += 1
                return
            results.append(result)

        best = self.evaluator.winners(results)
        if not best:
            tally.skipped += 1
            return

        tally.categories[hero.category] += 1
        if hero in best:
            if len(best) > 1:
                tally.ties += 1
                tally.tie_credit += 1.0 / len(best)
            else:
                tally.wins += 1

    def _aggregate(self, tally: _Tally, strategy: RolloutStrategy) -> EquityResult:
        total = tally.valid
        if total == 0:
            logger.warning(
                "No trial could be evaluated (%d skipped)", tally.skipped
            )
            return EquityResult(
                equity=0.0,
                tie_probability=0.0,
                distribution={c: 0.0 for c in HandCategory},
                trials=0,
                strategy=strategy,
            )

        if self.config.split_ties:
            credit = tally.tie_credit
        else:
            credit = 0.5 * tally.ties

        return EquityResult(
            equity=(tally.wins + credit) / total,
            tie_probability=tally.ties / total,
            distribution={
                c: tally.categories[c] / total for c in HandCategory
            },
            trials=total,
            strategy=strategy,
        )


def compute_equity(
    request: HandRequest,
    evaluator: Optional[HandEvaluator] = None,
    rng: RandomSource = None,
    config: Optional[EquityConfig] = None,
) -> EquityResult:
    """
    Calculate hero equity against random opponent(s).

    Convenience wrapper around EquityCalculator.

    Args:
        request: Spot to evaluate
        evaluator: Hand evaluator (treys by default)
        rng: numpy Generator or seed
        config: Engine configuration

    Returns:
        EquityResult
    """
    calculator = EquityCalculator(evaluator=evaluator, config=config)
    return calculator.compute(request, rng=rng)
