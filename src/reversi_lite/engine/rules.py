from __future__ import annotations

from enum import Enum
from typing import Dict, List, Optional

from reversi_lite.engine.board import Board, Coord, Side, opponent

LegalMoveTable = Dict[Coord, List[Coord]]
Score = Dict[Side, int]

# N, NE, E, SE, S, SW, W, NW
DIRECTIONS = [
    (-1, 0), (-1, 1), (0, 1), (1, 1),
    (1, 0), (1, -1), (0, -1), (-1, -1),
]


class GamePhase(Enum):
    IN_PROGRESS = "IN_PROGRESS"
    PASSED = "PASSED"
    FINISHED = "FINISHED"


def capture_set(board: Board, r: int, c: int, side: Side) -> List[Coord]:
    """Opponent discs flipped if `side` plays at (r, c), in direction order."""
    if not board.is_on_board(r, c) or board.grid[r][c] is not Board.EMPTY:
        return []

    other = opponent(side)
    captures: List[Coord] = []
    for dr, dc in DIRECTIONS:
        nr, nc = r + dr, c + dc
        line = []
        while board.is_on_board(nr, nc) and board.grid[nr][nc] == other:
            line.append((nr, nc))
            nr += dr
            nc += dc
        if line and board.is_on_board(nr, nc) and board.grid[nr][nc] == side:
            captures.extend(line)
    return captures


def legal_moves(board: Board, side: Side) -> LegalMoveTable:
    """Map every playable cell, in row-major order, to its capture set."""
    moves: LegalMoveTable = {}
    for r in range(board.size):
        for c in range(board.size):
            captures = capture_set(board, r, c, side)
            if captures:
                moves[(r, c)] = captures
    return moves


def has_legal_move(board: Board, side: Side) -> bool:
    for r in range(board.size):
        for c in range(board.size):
            if capture_set(board, r, c, side):
                return True
    return False


def resolve_turn(board: Board, side: Side) -> GamePhase:
    if has_legal_move(board, side):
        return GamePhase.IN_PROGRESS
    if has_legal_move(board, opponent(side)):
        return GamePhase.PASSED
    return GamePhase.FINISHED


def score(board: Board) -> Score:
    return {Side.BLACK: board.count(Side.BLACK), Side.WHITE: board.count(Side.WHITE)}


def winner(scores: Score) -> Optional[Side]:
    black = scores.get(Side.BLACK, 0)
    white = scores.get(Side.WHITE, 0)
    if black > white:
        return Side.BLACK
    if white > black:
        return Side.WHITE
    return None
