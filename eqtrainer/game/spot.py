"""Everything the trainer shows for the current selection."""

from dataclasses import dataclass
from typing import Optional

from ..config import EquityConfig
from .equity import EquityCalculator, EquityResult, RandomSource
from .evaluator import HandCategory, HandEvaluator, TreysEvaluator
from .outs import NO_OUTS, OutsResult, compute_outs, current_best
from .streets import Street, StreetFlow


@dataclass(frozen=True)
class SpotSummary:
    """Best hand, equity and outs for a StreetFlow snapshot."""
    street: Street
    best_category: Optional[HandCategory]
    equity: Optional[EquityResult]
    outs: OutsResult


def analyze_spot(
    flow: StreetFlow,
    opponent_count: int = 1,
    mode: str = "accurate",
    rng: RandomSource = None,
    evaluator: Optional[HandEvaluator] = None,
    config: Optional[EquityConfig] = None,
) -> SpotSummary:
    """
    Summarize the current spot.

    Nothing is computed preflop or while the hero hand is incomplete.
    Outs are only meaningful before the river.
    """
    config = config or EquityConfig()
    evaluator = evaluator or TreysEvaluator()

    if flow.street is Street.PREFLOP or not flow.hero_complete:
        return SpotSummary(
            street=flow.street, best_category=None, equity=None, outs=NO_OUTS
        )

    request = flow.to_request(
        opponent_count=opponent_count,
        iterations=config.iterations_for(mode),
    )
    calculator = EquityCalculator(evaluator=evaluator, config=config)
    equity = calculator.compute(request, rng=rng)

    best = current_best(flow.hero, flow.board, flow.variant, evaluator)
    if flow.street is Street.RIVER:
        outs = NO_OUTS
    else:
        outs = compute_outs(request, evaluator=evaluator, config=config)

    return SpotSummary(
        street=flow.street,
        best_category=best.category if best else None,
        equity=equity,
        outs=outs,
    )
