from __future__ import annotations

import logging
import random
from abc import ABC, abstractmethod
from typing import List, Tuple

from reversi_lite.engine.board import SIZE, Board, Coord, Side, opponent
from reversi_lite.engine.moves import simulate_move
from reversi_lite.engine.rules import LegalMoveTable, legal_moves

LOG = logging.getLogger("reversi_lite.ai")

CORNERS = frozenset([(0, 0), (0, SIZE - 1), (SIZE - 1, 0), (SIZE - 1, SIZE - 1)])


def is_corner(coord: Coord) -> bool:
    return coord in CORNERS


def is_edge(coord: Coord) -> bool:
    r, c = coord
    return r in (0, SIZE - 1) or c in (0, SIZE - 1)


class BaseStrategy(ABC):
    """Shared construction for move pickers."""

    def __init__(self, rng: random.Random | None = None):
        self._rng = rng or random.Random()

    @abstractmethod
    def _pick_move(self, board_snapshot: Board, side: Side, valid_moves: LegalMoveTable) -> Coord:
        """Return the chosen coordinate. `valid_moves` is never empty."""


class RandomStrategy(BaseStrategy):
    """Uniform random legal move, used for the easy tier."""

    def _pick_move(self, board_snapshot: Board, side: Side, valid_moves: LegalMoveTable) -> Coord:
        return self._rng.choice(list(valid_moves))


class HeuristicStrategy(BaseStrategy):
    """Greedy one-ply scorer for the hard tier.

    Each candidate earns points for the discs it flips, a large bonus for a
    corner and a smaller one for any edge cell, and loses points for every
    reply the opponent would have afterwards. Replies are counted on a clone,
    so the board passed in is never modified.
    """

    capture_weight = 10
    corner_bonus = 1000
    edge_bonus = 50
    mobility_penalty = 5

    def evaluate(self, board: Board, side: Side, coord: Coord, captures: List[Coord]) -> int:
        score = len(captures) * self.capture_weight
        if is_corner(coord):
            score += self.corner_bonus
        if is_edge(coord):
            score += self.edge_bonus
        child = simulate_move(board, coord[0], coord[1], side, captures)
        score -= len(legal_moves(child, opponent(side))) * self.mobility_penalty
        return score

    def score_moves(self, board: Board, side: Side) -> List[Tuple[Coord, int]]:
        return [
            (coord, self.evaluate(board, side, coord, captures))
            for coord, captures in legal_moves(board, side).items()
        ]

    def _pick_move(self, board_snapshot: Board, side: Side, valid_moves: LegalMoveTable) -> Coord:
        best_move = None
        best_score = None
        for coord, captures in valid_moves.items():
            score = self.evaluate(board_snapshot, side, coord, captures)
            LOG.debug("%s candidate %s scores %d", side.label, Board.coord_to_str(*coord), score)
            # strict: first move in scan order keeps ties
            if best_score is None or score > best_score:
                best_score = score
                best_move = coord
        return best_move
