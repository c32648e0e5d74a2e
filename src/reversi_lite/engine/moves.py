from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Tuple

from reversi_lite.engine.board import Board, Coord, Side


@dataclass(frozen=True)
class Move:
    row: int
    col: int
    captures: Tuple[Coord, ...]

    @property
    def coord(self) -> Coord:
        return self.row, self.col

    def __str__(self) -> str:
        return Board.coord_to_str(self.row, self.col)


def apply_move(board: Board, r: int, c: int, side: Side, captures: Iterable[Coord]) -> Board:
    """Place `side` at (r, c) and flip `captures`.

    The caller guarantees the captures came from `capture_set` on this exact
    board; nothing is re-checked here.
    """
    board.grid[r][c] = side
    for fr, fc in captures:
        board.grid[fr][fc] = side
    return board


def simulate_move(board: Board, r: int, c: int, side: Side, captures: Iterable[Coord]) -> Board:
    """Apply the move to a clone and return it, leaving `board` untouched."""
    return apply_move(board.clone(), r, c, side, captures)
