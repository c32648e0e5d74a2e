class ReversiError(Exception):
    """Base class for rule violations raised by the game core."""


class IllegalMoveError(ReversiError, ValueError):
    """Move target is occupied, off the board, or captures nothing."""

    def __init__(self, row: int, col: int, message: str | None = None):
        self.row = row
        self.col = col
        super().__init__(message or f"Illegal move at ({row}, {col})")


class OutOfTurnError(ReversiError):
    """Move submitted by a seat that is not to move, or after the game ended."""
