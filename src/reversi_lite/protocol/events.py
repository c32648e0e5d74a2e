from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional

from reversi_lite.engine.board import Coord, Side
from reversi_lite.engine.moves import Move


@dataclass(frozen=True)
class GameStarted:
    board_state: str
    side_to_move: Side


@dataclass(frozen=True)
class MovePlayed:
    side: Side
    move: Move
    by_computer: bool


@dataclass(frozen=True)
class TurnStarted:
    side: Side
    legal_moves: Dict[Coord, List[Coord]]
    by_computer: bool


@dataclass(frozen=True)
class TurnPassed:
    side: Side  # the side that had no legal move


@dataclass(frozen=True)
class GameOver:
    scores: Dict[Side, int]
    winner: Optional[Side]


GameEvent = GameStarted | MovePlayed | TurnStarted | TurnPassed | GameOver
