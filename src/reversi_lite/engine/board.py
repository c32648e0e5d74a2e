from __future__ import annotations

from enum import Enum
from typing import List, Optional, Tuple

SIZE = 8

Coord = Tuple[int, int]


class Side(str, Enum):
    BLACK = "BLACK"
    WHITE = "WHITE"

    @property
    def label(self) -> str:
        return self.value.capitalize()


def opponent(side: Side) -> Side:
    return Side.WHITE if side == Side.BLACK else Side.BLACK


_CELL_CHARS = {Side.BLACK: "B", Side.WHITE: "W", None: "."}
_CHAR_CELLS = {char: cell for cell, char in _CELL_CHARS.items()}


class Board:
    """8x8 grid of discs. Cells hold a Side or None for empty."""

    EMPTY = None

    def __init__(self):
        self.size = SIZE
        self.grid: List[List[Optional[Side]]] = [[self.EMPTY for _ in range(SIZE)] for _ in range(SIZE)]

    @classmethod
    def initial(cls) -> "Board":
        """Board with the standard 4 starting pieces."""
        board = cls()
        mid = SIZE // 2
        # D4 (3,3), E5 (4,4) -> WHITE
        # E4 (3,4), D5 (4,3) -> BLACK
        board.grid[mid-1][mid-1] = Side.WHITE
        board.grid[mid][mid] = Side.WHITE
        board.grid[mid-1][mid] = Side.BLACK
        board.grid[mid][mid-1] = Side.BLACK
        return board

    def is_on_board(self, r: int, c: int) -> bool:
        return 0 <= r < self.size and 0 <= c < self.size

    def get_piece(self, r: int, c: int) -> Optional[Side]:
        if self.is_on_board(r, c):
            return self.grid[r][c]
        return None

    def count(self, side: Optional[Side]) -> int:
        return sum(row.count(side) for row in self.grid)

    def empty_count(self) -> int:
        return self.count(self.EMPTY)

    def clone(self) -> "Board":
        copied = Board()
        copied.grid = [row[:] for row in self.grid]
        return copied

    def to_string(self) -> str:
        return "".join(_CELL_CHARS[cell] for row in self.grid for cell in row)

    @classmethod
    def from_string(cls, state: str) -> "Board":
        """Parse a 64-char row-major state string of B, W and '.'."""
        state = "".join(state.split())
        if len(state) != SIZE * SIZE:
            raise ValueError(f"State string must have {SIZE * SIZE} cells, got {len(state)}")
        board = cls()
        for idx, char in enumerate(state):
            if char not in _CHAR_CELLS:
                raise ValueError(f"Invalid cell character {char!r}")
            r, c = divmod(idx, SIZE)
            board.grid[r][c] = _CHAR_CELLS[char]
        return board

    @staticmethod
    def coord_to_str(r: int, c: int) -> str:
        return f"{chr(65+c)}{r+1}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.grid == other.grid

    def __repr__(self) -> str:
        return f"Board({self.to_string()!r})"

    def __str__(self) -> str:
        state = self.to_string()
        return "\n".join(state[r * SIZE:(r + 1) * SIZE] for r in range(SIZE))
