"""Game representation and estimation module."""

from .cards import Card, full_deck, remove_cards, shuffled_copy, parse_cards
from .streets import GameVariant, Street, StreetFlow, advance_street
from .evaluator import HandCategory, HandResult, HandEvaluator, TreysEvaluator
from .equity import (
    EquityCalculator, EquityResult, HandRequest, RolloutStrategy,
    compute_equity, select_strategy,
)
from .outs import OutsResult, compute_outs, current_best
from .spot import SpotSummary, analyze_spot

__all__ = [
    "Card",
    "full_deck",
    "remove_cards",
    "shuffled_copy",
    "parse_cards",
    "GameVariant",
    "Street",
    "StreetFlow",
    "advance_street",
    "HandCategory",
    "HandResult",
    "HandEvaluator",
    "TreysEvaluator",
    "EquityCalculator",
    "EquityResult",
    "HandRequest",
    "RolloutStrategy",
    "compute_equity",
    "select_strategy",
    "OutsResult",
    "compute_outs",
    "current_best",
    "SpotSummary",
    "analyze_spot",
]
