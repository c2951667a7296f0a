"""Pytest configuration and fixtures."""

import numpy as np
import pytest

from eqtrainer.game.cards import parse_cards
from eqtrainer.game.evaluator import TreysEvaluator


@pytest.fixture(scope="session")
def evaluator():
    """Shared treys-backed evaluator."""
    return TreysEvaluator()


@pytest.fixture
def rng():
    """Seeded random source so simulations are reproducible."""
    return np.random.default_rng(1234)


@pytest.fixture
def cards():
    """Parse a card string like 'AsKh' into a list of cards."""
    return parse_cards
