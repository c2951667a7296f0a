"""Game variants, streets and the street flow state machine."""

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from ..errors import InputViolation
from .cards import Card

if TYPE_CHECKING:
    from .equity import HandRequest


class GameVariant(Enum):
    """Supported poker games."""
    HOLDEM = "holdem"
    OMAHA = "omaha"

    @classmethod
    def from_string(cls, s: str) -> "GameVariant":
        """Parse variant from string."""
        s = s.lower().strip().replace("'", "").replace("-", "").replace(" ", "")
        mapping = {
            "holdem": cls.HOLDEM,
            "nlhe": cls.HOLDEM,
            "texasholdem": cls.HOLDEM,
            "omaha": cls.OMAHA,
            "plo": cls.OMAHA,
        }
        if s in mapping:
            return mapping[s]
        raise InputViolation(f"Unknown game: {s}")

    @property
    def hole_cards(self) -> int:
        """Hole cards dealt to each player."""
        return 4 if self is GameVariant.OMAHA else 2


class Street(Enum):
    """Betting streets."""
    PREFLOP = 0
    FLOP = 1
    TURN = 2
    RIVER = 3

    @classmethod
    def from_string(cls, s: str) -> "Street":
        """Parse street from string."""
        s = s.upper().strip()
        mapping = {
            "PREFLOP": cls.PREFLOP,
            "PRE-FLOP": cls.PREFLOP,
            "FLOP": cls.FLOP,
            "TURN": cls.TURN,
            "RIVER": cls.RIVER,
        }
        if s in mapping:
            return mapping[s]
        raise InputViolation(f"Unknown street: {s}")

    @property
    def board_limit(self) -> int:
        """Community cards visible on this street."""
        return BOARD_LIMITS[self]


BOARD_LIMITS = {
    Street.PREFLOP: 0,
    Street.FLOP: 3,
    Street.TURN: 4,
    Street.RIVER: 5,
}

STREET_ORDER = [Street.PREFLOP, Street.FLOP, Street.TURN, Street.RIVER]


def advance_street(street: Street) -> Street:
    """Next street; the river is terminal."""
    idx = STREET_ORDER.index(street)
    if idx == len(STREET_ORDER) - 1:
        return street
    return STREET_ORDER[idx + 1]


def hero_card_count(variant: GameVariant) -> int:
    return variant.hole_cards


def board_limit(street: Street) -> int:
    return BOARD_LIMITS[street]


@dataclass
class StreetFlow:
    """
    Card selection state for one hand of the trainer.

    Tracks the active street and the cards assigned to the hero and
    the board. Picks that would break the card-count rules raise
    InputViolation and leave the state untouched.
    """
    variant: GameVariant = GameVariant.HOLDEM
    street: Street = Street.PREFLOP
    hero: list[Card] = field(default_factory=list)
    board: list[Card] = field(default_factory=list)

    @property
    def hero_needed(self) -> int:
        return hero_card_count(self.variant)

    @property
    def hero_complete(self) -> bool:
        return len(self.hero) >= self.hero_needed

    @property
    def board_complete(self) -> bool:
        return len(self.board) >= board_limit(self.street)

    @property
    def taken(self) -> list[Card]:
        """Cards already assigned to hero or board."""
        return self.hero + self.board

    def pick_hero(self, card: Card) -> None:
        """Assign a card to the hero's hand."""
        if card in self.taken:
            raise InputViolation(f"Card already selected: {card}")
        if self.hero_complete:
            raise InputViolation(
                f"Hero already has {self.hero_needed} cards"
            )
        self.hero.append(card)

    def pick_board(self, card: Card) -> None:
        """Assign a card to the board, up to the street's limit."""
        if not self.hero_complete:
            raise InputViolation("Select the hero's hand before the board")
        if card in self.taken:
            raise InputViolation(f"Card already selected: {card}")
        limit = board_limit(self.street)
        if len(self.board) >= limit:
            raise InputViolation(
                f"Board is limited to {limit} cards on the {self.street.name.lower()}"
            )
        self.board.append(card)

    def can_advance(self) -> bool:
        """Whether the current street's card requirements are met."""
        if self.street is Street.RIVER:
            return True
        if self.street is Street.PREFLOP:
            return self.hero_complete
        return self.hero_complete and self.board_complete

    def advance(self) -> Street:
        """Move to the next street. A no-op on the river."""
        if not self.can_advance():
            raise InputViolation(
                f"Cannot leave the {self.street.name.lower()} yet: "
                f"hero {len(self.hero)}/{self.hero_needed}, "
                f"board {len(self.board)}/{board_limit(self.street)}"
            )
        self.street = advance_street(self.street)
        return self.street

    def reset(self) -> None:
        """Clear the hand (fold) and go back to preflop."""
        self.hero = []
        self.board = []
        self.street = Street.PREFLOP

    def change_variant(self, variant: GameVariant) -> None:
        """Switch game; the current hand is discarded."""
        self.variant = variant
        self.reset()

    def to_request(
        self, opponent_count: int = 1, iterations: int = 4000
    ) -> "HandRequest":
        """Build a HandRequest from the current selection."""
        # equity imports this module
        from .equity import HandRequest

        return HandRequest(
            hero_cards=list(self.hero),
            board_cards=list(self.board),
            variant=self.variant,
            opponent_count=opponent_count,
            iterations=iterations,
            street=self.street,
        )
