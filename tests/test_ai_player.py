"""Tests for the easy and hard computer tiers."""

import random
from collections import Counter

import pytest

from reversi_lite.engine.ai_player import AIPlayer, choose_ai_move
from reversi_lite.engine.board import Board, Side
from reversi_lite.engine.registry import (
    Difficulty,
    build_strategy,
    get_tier_choices,
    resolve_difficulty,
    tier_label,
)
from reversi_lite.engine.rules import legal_moves
from reversi_lite.engine.strategies import HeuristicStrategy, RandomStrategy, is_corner, is_edge

# White can take the (0,0) corner flipping one disc, or flip three in the middle.
CORNER_OR_THREE = """
.BW.....
........
........
........
..BBBW..
........
........
........
"""


class TestRandomTier:
    def test_seeded_is_reproducible(self, start_board):
        first = [AIPlayer(Difficulty.EASY, random.Random(5)).choose_move(start_board, Side.BLACK) for _ in range(3)]
        second = [AIPlayer(Difficulty.EASY, random.Random(5)).choose_move(start_board, Side.BLACK) for _ in range(3)]
        assert first == second

    def test_covers_every_legal_move(self, start_board):
        player = AIPlayer(Difficulty.EASY, random.Random(11))
        picks = Counter(player.choose_move(start_board, Side.WHITE).coord for _ in range(400))
        assert set(picks) == set(legal_moves(start_board, Side.WHITE))
        # roughly uniform across the four opening replies
        assert min(picks.values()) > 50

    def test_move_carries_capture_set(self, start_board):
        move = AIPlayer(Difficulty.EASY, random.Random(1)).choose_move(start_board, Side.BLACK)
        assert list(move.captures) == legal_moves(start_board, Side.BLACK)[move.coord]


class TestHeuristicTier:
    def test_scores(self):
        board = Board.from_string(CORNER_OR_THREE)
        scores = dict(HeuristicStrategy().score_moves(board, Side.WHITE))
        # corner: 10 + 1000 + 50 - 5 * 1 reply; middle: 30 - 5 * 1 reply
        assert scores == {(0, 0): 1055, (4, 1): 25}

    def test_prefers_corner(self):
        board = Board.from_string(CORNER_OR_THREE)
        move = choose_ai_move(board, Side.WHITE, Difficulty.HARD)
        assert move.coord == (0, 0)
        assert move.captures == ((0, 1),)

    def test_deterministic(self, start_board):
        board = start_board.clone()
        board.grid[2][3] = Side.BLACK
        board.grid[3][3] = Side.BLACK
        picks = {choose_ai_move(board, Side.WHITE, Difficulty.HARD, random.Random(seed)).coord for seed in range(10)}
        assert len(picks) == 1

    def test_ties_go_to_scan_order(self, start_board):
        # all four opening moves are symmetric, so they tie
        assert choose_ai_move(start_board, Side.BLACK, Difficulty.HARD).coord == (2, 3)
        assert choose_ai_move(start_board, Side.WHITE, Difficulty.HARD).coord == (2, 4)

    def test_does_not_mutate_board(self, start_board):
        before = start_board.clone()
        choose_ai_move(start_board, Side.BLACK, Difficulty.HARD)
        assert start_board == before

    def test_edge_bonus(self):
        # Black flips one disc either way: on the top edge at (0,1) or inside at (1,3).
        board = Board.from_string("..WB...." + "........" + "...W...." + "...B...." + "." * 32)
        scores = dict(HeuristicStrategy().score_moves(board, Side.BLACK))
        # edge: 10 + 50 - 5 * 1 reply; inside: 10 - 5 * 2 replies
        assert scores == {(0, 1): 55, (1, 3): 0}


class TestNoMove:
    @pytest.mark.parametrize("tier", [Difficulty.EASY, Difficulty.HARD])
    def test_returns_none(self, corner_trap, tier):
        assert choose_ai_move(corner_trap, Side.BLACK, tier) is None

    @pytest.mark.parametrize("tier", [Difficulty.EASY, Difficulty.HARD])
    def test_full_board(self, full_board, tier):
        assert AIPlayer(tier).choose_move(full_board, Side.WHITE) is None


class TestRegistry:
    def test_choices(self):
        assert get_tier_choices() == ["easy", "hard"]

    def test_resolve(self):
        assert resolve_difficulty("HARD") == Difficulty.HARD
        assert resolve_difficulty(Difficulty.EASY) == Difficulty.EASY

    def test_unknown_tier(self):
        with pytest.raises(ValueError):
            resolve_difficulty("nightmare")

    def test_build_strategy(self):
        assert isinstance(build_strategy("easy"), RandomStrategy)
        assert isinstance(build_strategy(Difficulty.HARD), HeuristicStrategy)

    def test_label(self):
        assert tier_label("hard") == "Hard"

    def test_switch_difficulty(self):
        player = AIPlayer("easy")
        player.set_difficulty("hard")
        assert player.difficulty == Difficulty.HARD


class TestSquares:
    def test_corner_and_edge(self):
        assert is_corner((0, 7)) and is_edge((0, 7))
        assert is_edge((3, 0)) and not is_corner((3, 0))
        assert not is_edge((3, 3))
