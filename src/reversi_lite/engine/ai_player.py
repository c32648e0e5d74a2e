from __future__ import annotations

import random
from typing import Optional

from reversi_lite.engine.board import Board, Side
from reversi_lite.engine.moves import Move
from reversi_lite.engine.registry import Difficulty, build_strategy, resolve_difficulty
from reversi_lite.engine.rules import legal_moves


class AIPlayer:
    """Computer seat: picks moves with the strategy of its difficulty tier."""

    def __init__(self, difficulty: str | Difficulty = Difficulty.EASY, rng: random.Random | None = None):
        self._rng = rng or random.Random()
        self.set_difficulty(difficulty)

    def set_difficulty(self, difficulty: str | Difficulty):
        self.difficulty = resolve_difficulty(difficulty)
        self._strategy = build_strategy(self.difficulty, self._rng)

    def choose_move(self, board: Board, side: Side) -> Optional[Move]:
        snapshot = board.clone()
        valid_moves = legal_moves(snapshot, side)
        if not valid_moves:
            return None
        r, c = self._strategy._pick_move(snapshot, side, valid_moves)
        return Move(r, c, tuple(valid_moves[(r, c)]))


def choose_ai_move(
    board: Board,
    side: Side,
    tier: str | Difficulty,
    rng: random.Random | None = None,
) -> Optional[Move]:
    """One-shot move choice; None when `side` has no legal move."""
    return AIPlayer(tier, rng).choose_move(board, side)
