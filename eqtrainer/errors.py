"""Exceptions raised by the equity engine."""


class EquityError(ValueError):
    """Base class for recoverable engine errors."""


class InputViolation(EquityError):
    """A request or state machine move breaks a data model invariant."""


class DeckExhaustion(EquityError):
    """Not enough undealt cards for the opponents and the board runout."""

    def __init__(self, needed: int, available: int):
        self.needed = needed
        self.available = available
        super().__init__(
            f"Cannot deal {needed} cards, only {available} remaining"
        )


class EvaluationFailure(EquityError):
    """The hand evaluator could not rank a card combination."""
