"""Tests for hand evaluation."""

import pytest

from eqtrainer.game.evaluator import HandCategory, HandResult
from eqtrainer.game.streets import GameVariant


class TestHoldemSolve:
    @pytest.mark.parametrize("hole,board,category", [
        ("As2h", "9c7d5s4hJc", HandCategory.HIGH_CARD),
        ("AsAh", "9c7d5s4hJc", HandCategory.PAIR),
        ("AsAh", "9c9d5s4hJc", HandCategory.TWO_PAIR),
        ("AsAh", "Ad9d5s4hJc", HandCategory.THREE_OF_A_KIND),
        ("6s8h", "9c7d5s4hJc", HandCategory.STRAIGHT),
        ("AsKs", "9s7s5d4hJs", HandCategory.FLUSH),
        ("AsAh", "AdKdKc", HandCategory.FULL_HOUSE),
        ("AsAh", "AdAcKc", HandCategory.FOUR_OF_A_KIND),
        ("9s8s", "7s6s5s", HandCategory.STRAIGHT_FLUSH),
    ])
    def test_categories(self, evaluator, cards, hole, board, category):
        result = evaluator.solve(cards(hole), cards(board), GameVariant.HOLDEM)
        assert result.category == category

    def test_royal_flush_is_straight_flush(self, evaluator, cards):
        result = evaluator.solve(cards("AsKs"), cards("QsJsTs"), GameVariant.HOLDEM)
        assert result.category == HandCategory.STRAIGHT_FLUSH

    def test_higher_rank_is_better(self, evaluator, cards):
        board = cards("Ks7d2c9h3s")
        trips = evaluator.solve(cards("KhKc"), board, GameVariant.HOLDEM)
        pair = evaluator.solve(cards("AsAh"), board, GameVariant.HOLDEM)
        assert trips.rank > pair.rank

    def test_kicker_breaks_ties_within_category(self, evaluator, cards):
        board = cards("Ks7d2c9h3s")
        ak = evaluator.solve(cards("AhKh"), board, GameVariant.HOLDEM)
        kq = evaluator.solve(cards("KdQh"), board, GameVariant.HOLDEM)
        assert ak.category == kq.category == HandCategory.PAIR
        assert ak.rank > kq.rank

    def test_too_few_cards(self, evaluator, cards):
        assert evaluator.solve(cards("AsAh"), cards("Kd"), GameVariant.HOLDEM) is None

    def test_too_many_cards(self, evaluator, cards):
        result = evaluator.solve(cards("AsAhKsKh"), cards("2c3c4c5d"), GameVariant.HOLDEM)
        assert result is None


class TestOmahaSolve:
    def test_needs_two_hole_cards_for_flush(self, evaluator, cards):
        # Four spades in hand but only two on board: no flush in Omaha
        result = evaluator.solve(
            cards("AsKsQsJs"), cards("2s3s7d8h9c"), GameVariant.OMAHA
        )
        assert result.category == HandCategory.HIGH_CARD

    def test_one_hole_card_cannot_complete_board_flush(self, evaluator, cards):
        result = evaluator.solve(
            cards("AhKcQdJc"), cards("2h5h7h9hTs"), GameVariant.OMAHA
        )
        assert result.category != HandCategory.FLUSH

    def test_two_hole_cards_make_flush(self, evaluator, cards):
        result = evaluator.solve(
            cards("AhKhQdJc"), cards("2h5h7hTsTd"), GameVariant.OMAHA
        )
        assert result.category == HandCategory.FLUSH

    def test_flop_board(self, evaluator, cards):
        result = evaluator.solve(cards("AsAhKdQc"), cards("Ad7c2s"), GameVariant.OMAHA)
        assert result.category == HandCategory.THREE_OF_A_KIND

    def test_wrong_hole_count(self, evaluator, cards):
        result = evaluator.solve(cards("AsAh"), cards("Ad7c2s"), GameVariant.OMAHA)
        assert result is None

    def test_short_board(self, evaluator, cards):
        result = evaluator.solve(cards("AsAhKdQc"), cards("Ad7c"), GameVariant.OMAHA)
        assert result is None


class TestWinners:
    def test_single_winner(self, evaluator):
        low = HandResult(rank=100, category=HandCategory.HIGH_CARD)
        high = HandResult(rank=5000, category=HandCategory.PAIR)
        assert evaluator.winners([low, high]) == [high]

    def test_tie(self, evaluator, cards):
        board = cards("AhKhQhJhTh")
        a = evaluator.solve(cards("2c3d"), board, GameVariant.HOLDEM)
        b = evaluator.solve(cards("4c5d"), board, GameVariant.HOLDEM)
        assert len(evaluator.winners([a, b])) == 2

    def test_empty(self, evaluator):
        assert evaluator.winners([]) == []


class TestHandCategory:
    def test_nine_categories(self):
        assert len(HandCategory) == 9

    def test_ordering(self):
        assert HandCategory.STRAIGHT_FLUSH > HandCategory.FOUR_OF_A_KIND > HandCategory.HIGH_CARD

    def test_labels(self):
        assert HandCategory.THREE_OF_A_KIND.label == "Three of a Kind"
        assert HandCategory.from_treys_class(9) == HandCategory.HIGH_CARD
        assert HandCategory.from_treys_class(1) == HandCategory.STRAIGHT_FLUSH
