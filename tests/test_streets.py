"""Tests for streets and the street flow state machine."""

import pytest

from eqtrainer.errors import InputViolation
from eqtrainer.game.cards import Card
from eqtrainer.game.equity import HandRequest
from eqtrainer.game.streets import (
    GameVariant, Street, StreetFlow, advance_street, board_limit, hero_card_count
)


class TestAdvanceStreet:
    def test_order(self):
        assert advance_street(Street.PREFLOP) is Street.FLOP
        assert advance_street(Street.FLOP) is Street.TURN
        assert advance_street(Street.TURN) is Street.RIVER

    def test_river_is_terminal(self):
        assert advance_street(Street.RIVER) is Street.RIVER

    def test_three_steps_reach_river(self):
        street = Street.PREFLOP
        for _ in range(3):
            street = advance_street(street)
        assert street is Street.RIVER


class TestLimits:
    def test_board_limits(self):
        assert [board_limit(s) for s in Street] == [0, 3, 4, 5]

    def test_hero_counts(self):
        assert hero_card_count(GameVariant.HOLDEM) == 2
        assert hero_card_count(GameVariant.OMAHA) == 4

    def test_parse(self):
        assert Street.from_string("Pre-Flop") is Street.PREFLOP
        assert GameVariant.from_string("PLO") is GameVariant.OMAHA
        assert GameVariant.from_string("Hold'em") is GameVariant.HOLDEM
        with pytest.raises(InputViolation):
            Street.from_string("showdown")


@pytest.fixture
def flow():
    return StreetFlow()


def _pick_hero(flow, cards, text):
    for card in cards(text):
        flow.pick_hero(card)


def _pick_board(flow, cards, text):
    for card in cards(text):
        flow.pick_board(card)


class TestStreetFlow:
    def test_initial_state(self, flow):
        assert flow.street is Street.PREFLOP
        assert flow.hero == []
        assert flow.board == []
        assert not flow.can_advance()

    def test_full_hand(self, flow, cards):
        _pick_hero(flow, cards, "AsAh")
        assert flow.advance() is Street.FLOP
        _pick_board(flow, cards, "AdKd2c")
        assert flow.advance() is Street.TURN
        _pick_board(flow, cards, "9h")
        assert flow.advance() is Street.RIVER
        _pick_board(flow, cards, "3s")

        assert len(flow.board) == 5
        assert flow.advance() is Street.RIVER

    def test_preflop_requires_hero(self, flow, cards):
        _pick_hero(flow, cards, "As")
        with pytest.raises(InputViolation, match="preflop"):
            flow.advance()
        assert flow.street is Street.PREFLOP

    def test_flop_requires_three_board_cards(self, flow, cards):
        _pick_hero(flow, cards, "AsAh")
        flow.advance()
        _pick_board(flow, cards, "AdKd")
        assert not flow.can_advance()
        with pytest.raises(InputViolation):
            flow.advance()

    def test_hero_limit(self, flow, cards):
        _pick_hero(flow, cards, "AsAh")
        with pytest.raises(InputViolation, match="already has"):
            flow.pick_hero(Card.from_string("Kd"))

    def test_duplicate_hero_card(self, flow):
        flow.pick_hero(Card.from_string("As"))
        with pytest.raises(InputViolation, match="already selected"):
            flow.pick_hero(Card.from_string("As"))

    def test_board_card_already_in_hero(self, flow, cards):
        _pick_hero(flow, cards, "AsAh")
        flow.advance()
        with pytest.raises(InputViolation, match="already selected"):
            flow.pick_board(Card.from_string("Ah"))

    def test_board_before_hero(self, flow):
        with pytest.raises(InputViolation):
            flow.pick_board(Card.from_string("Kd"))

    def test_board_ceiling(self, flow, cards):
        _pick_hero(flow, cards, "AsAh")
        with pytest.raises(InputViolation, match="limited to 0"):
            flow.pick_board(Card.from_string("Kd"))

        flow.advance()
        _pick_board(flow, cards, "AdKd2c")
        with pytest.raises(InputViolation, match="limited to 3"):
            flow.pick_board(Card.from_string("9h"))
        assert len(flow.board) == 3

    def test_reset(self, flow, cards):
        _pick_hero(flow, cards, "AsAh")
        flow.advance()
        _pick_board(flow, cards, "AdKd2c")
        flow.reset()

        assert flow.street is Street.PREFLOP
        assert flow.hero == []
        assert flow.board == []
        assert flow.variant is GameVariant.HOLDEM

    def test_change_variant(self, flow, cards):
        _pick_hero(flow, cards, "AsAh")
        flow.change_variant(GameVariant.OMAHA)

        assert flow.hero == []
        assert flow.hero_needed == 4
        _pick_hero(flow, cards, "AsAhKsKh")
        assert flow.can_advance()

    def test_to_request(self, flow, cards):
        _pick_hero(flow, cards, "AsAh")
        flow.advance()
        _pick_board(flow, cards, "AdKd2c")
        request = flow.to_request(opponent_count=3, iterations=100)

        assert isinstance(request, HandRequest)
        assert request.hero_cards == cards("AsAh")
        assert request.board_cards == cards("AdKd2c")
        assert request.street is Street.FLOP
        assert request.opponent_count == 3
        request.validate()

        # Request holds copies of the selection
        flow.reset()
        assert len(request.board_cards) == 3
