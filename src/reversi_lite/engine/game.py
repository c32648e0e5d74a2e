from __future__ import annotations

import logging
import random
from typing import Tuple

from reversi_lite.engine.ai_player import AIPlayer
from reversi_lite.engine.board import Board, Side, opponent
from reversi_lite.engine.errors import IllegalMoveError, OutOfTurnError
from reversi_lite.engine.moves import Move, apply_move
from reversi_lite.engine.registry import Difficulty
from reversi_lite.engine.rules import GamePhase, LegalMoveTable, Score, legal_moves, resolve_turn, score, winner
from reversi_lite.protocol.events import GameOver, GameStarted, MovePlayed, TurnPassed, TurnStarted
from reversi_lite.protocol.interface import EventEmitter

LOG = logging.getLogger("reversi_lite.game")

HUMAN_SIDE = Side.BLACK
COMPUTER_SIDE = Side.WHITE


def init_game() -> Tuple[Board, Side]:
    return Board.initial(), Side.BLACK


def submit_move(board: Board, r: int, c: int, side: Side) -> Tuple[Board, GamePhase]:
    """Validate and play a move, returning the board and the phase for the opponent.

    Raises IllegalMoveError when (r, c) is not in `legal_moves(board, side)`;
    the board is left untouched in that case.
    """
    captures = legal_moves(board, side).get((r, c))
    if not captures:
        raise IllegalMoveError(r, c)
    apply_move(board, r, c, side, captures)
    return board, resolve_turn(board, opponent(side))


class GameController(EventEmitter):
    """Drives a human (Black) versus computer (White) game.

    The controller owns the board and the turn. A human move arrives through
    `play_human_move`; whenever `awaiting_computer` is true the presentation
    layer waits out its thinking delay and then calls `play_computer_move`.
    Passes are applied automatically and reported as TurnPassed events.
    """

    def __init__(self, difficulty: str | Difficulty = Difficulty.EASY, rng: random.Random | None = None):
        super().__init__()
        self.ai = AIPlayer(difficulty, rng)
        self.board, self.current_turn = init_game()
        self.phase = GamePhase.IN_PROGRESS

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def new_game(self):
        self.board, self.current_turn = init_game()
        self.phase = GamePhase.IN_PROGRESS
        LOG.info("New game (%s)", self.ai.difficulty.value)
        self._emit(GameStarted(self.board.to_string(), self.current_turn))
        self._settle_turn()

    def set_difficulty(self, difficulty: str | Difficulty):
        self.ai.set_difficulty(difficulty)
        LOG.info("Difficulty set to %s", self.ai.difficulty.value)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @property
    def is_finished(self) -> bool:
        return self.phase == GamePhase.FINISHED

    @property
    def is_human_turn(self) -> bool:
        return not self.is_finished and self.current_turn == HUMAN_SIDE

    @property
    def awaiting_computer(self) -> bool:
        return not self.is_finished and self.current_turn == COMPUTER_SIDE

    def legal_moves(self) -> LegalMoveTable:
        if self.is_finished:
            return {}
        return legal_moves(self.board, self.current_turn)

    def score(self) -> Score:
        return score(self.board)

    # ------------------------------------------------------------------
    # Moves
    # ------------------------------------------------------------------
    def play_human_move(self, r: int, c: int) -> Move:
        if not self.is_human_turn:
            raise OutOfTurnError(f"Not {HUMAN_SIDE.label}'s turn")
        captures = legal_moves(self.board, HUMAN_SIDE).get((r, c))
        if not captures:
            raise IllegalMoveError(r, c)
        move = Move(r, c, tuple(captures))
        self._play(move, HUMAN_SIDE, by_computer=False)
        return move

    def play_computer_move(self) -> Move:
        if not self.awaiting_computer:
            raise OutOfTurnError(f"Not {COMPUTER_SIDE.label}'s turn")
        move = self.ai.choose_move(self.board, COMPUTER_SIDE)
        if move is None:
            # _settle_turn never leaves a side to move without legal moves
            raise OutOfTurnError(f"{COMPUTER_SIDE.label} has no legal move")
        self._play(move, COMPUTER_SIDE, by_computer=True)
        return move

    def _play(self, move: Move, side: Side, by_computer: bool):
        apply_move(self.board, move.row, move.col, side, move.captures)
        LOG.info("%s plays %s flipping %d", side.label, move, len(move.captures))
        self._emit(MovePlayed(side, move, by_computer))
        self.current_turn = opponent(side)
        self._settle_turn()

    def _settle_turn(self):
        self.phase = resolve_turn(self.board, self.current_turn)
        if self.phase == GamePhase.PASSED:
            passing = self.current_turn
            LOG.info("%s has no legal move, turn passes", passing.label)
            self.current_turn = opponent(passing)
            self.phase = GamePhase.IN_PROGRESS
            self._emit(TurnPassed(passing))
        if self.phase == GamePhase.FINISHED:
            final = self.score()
            LOG.info("Game over: Black %d, White %d", final[Side.BLACK], final[Side.WHITE])
            self._emit(GameOver(final, winner(final)))
            return
        self._emit(
            TurnStarted(
                self.current_turn,
                legal_moves(self.board, self.current_turn),
                by_computer=self.current_turn == COMPUTER_SIDE,
            )
        )
