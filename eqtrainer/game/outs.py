"""Single-card improvement (outs) counting."""

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from ..config import EquityConfig
from ..errors import EvaluationFailure
from .cards import Card, full_deck, remove_cards
from .equity import HandRequest
from .evaluator import HandEvaluator, HandResult, TreysEvaluator
from .streets import GameVariant, Street

logger = logging.getLogger(__name__)

# Board sizes with exactly one more card to come
OUTS_BOARD_SIZES = (3, 4)

# Streets with no next card to scan
NO_OUTS_STREETS = (Street.PREFLOP, Street.RIVER)


@dataclass(frozen=True)
class OutsResult:
    """Cards that improve the hero's hand on the next street."""
    outs_count: int
    outs_percentage: float
    remaining: int = 0


NO_OUTS = OutsResult(outs_count=0, outs_percentage=0.0)


def current_best(
    hero: Sequence[Card],
    board: Sequence[Card],
    variant: GameVariant = GameVariant.HOLDEM,
    evaluator: Optional[HandEvaluator] = None,
) -> Optional[HandResult]:
    """
    Hero's made hand right now.

    Returns None before five cards are known.
    """
    if len(hero) + len(board) < 5:
        return None
    evaluator = evaluator or TreysEvaluator()
    return evaluator.solve(hero, board, variant)


def compute_outs(
    request: HandRequest,
    evaluator: Optional[HandEvaluator] = None,
    config: Optional[EquityConfig] = None,
) -> OutsResult:
    """
    Count the cards that lift the hero into a better hand category.

    Only flop and turn boards have a next card to scan; any other
    board size, and any request made on the preflop or river, gives
    zero outs. Every remaining card is tried, so the count is exact.

    Raises:
        InputViolation: request breaks a data model invariant
        EvaluationFailure: hero's current hand cannot be ranked
    """
    config = config or EquityConfig()
    request.validate(config.max_opponents)

    if request.street in NO_OUTS_STREETS:
        return NO_OUTS
    if len(request.board_cards) not in OUTS_BOARD_SIZES:
        return NO_OUTS

    evaluator = evaluator or TreysEvaluator()
    board = list(request.board_cards)
    baseline = evaluator.solve(request.hero_cards, board, request.variant)
    if baseline is None:
        raise EvaluationFailure(
            f"Cannot rank {len(request.hero_cards)} hero cards "
            f"with a {len(board)} card board"
        )

    remaining = remove_cards(full_deck(), request.used_cards)
    outs = 0
    for card in remaining:
        result = evaluator.solve(request.hero_cards, board + [card], request.variant)
        if result is not None and result.category > baseline.category:
            outs += 1

    logger.debug(
        "%d outs of %d over %s", outs, len(remaining), baseline.category.label
    )
    pct = outs / len(remaining) if remaining else 0.0
    return OutsResult(outs_count=outs, outs_percentage=pct, remaining=len(remaining))
