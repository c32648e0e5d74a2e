"""Tests for the human versus computer game controller."""

import random

import pytest

from reversi_lite.engine.board import Board, Side
from reversi_lite.engine.errors import IllegalMoveError, OutOfTurnError, ReversiError
from reversi_lite.engine.game import GameController, init_game, submit_move
from reversi_lite.engine.moves import apply_move
from reversi_lite.engine.registry import Difficulty
from reversi_lite.engine.rules import GamePhase
from reversi_lite.protocol.events import GameOver, GameStarted, MovePlayed, TurnPassed, TurnStarted


@pytest.fixture
def events():
    return []


@pytest.fixture
def controller(events):
    game = GameController(Difficulty.HARD, random.Random(0))
    game.set_callback(events.append)
    game.new_game()
    return game


def _trap_controller(controller, corner_trap, events):
    controller.board = corner_trap
    controller.current_turn = Side.WHITE
    events.clear()
    return controller


class TestModuleApi:
    def test_init_game(self):
        board, side = init_game()
        assert board == Board.initial()
        assert side == Side.BLACK

    def test_submit_move(self, start_board):
        board, phase = submit_move(start_board, 2, 3, Side.BLACK)
        assert board is start_board
        assert phase == GamePhase.IN_PROGRESS
        assert board.count(Side.BLACK) == 4
        assert board.count(Side.WHITE) == 1

    def test_submit_illegal_move(self, start_board):
        before = start_board.clone()
        with pytest.raises(IllegalMoveError):
            submit_move(start_board, 3, 3, Side.BLACK)
        with pytest.raises(IllegalMoveError):
            submit_move(start_board, 0, 0, Side.BLACK)
        with pytest.raises(IllegalMoveError):
            submit_move(start_board, 9, 9, Side.BLACK)
        assert start_board == before

    def test_submit_reports_pass(self, corner_trap):
        _, phase = submit_move(corner_trap, 0, 2, Side.WHITE)
        assert phase == GamePhase.PASSED

    def test_submit_reports_finish(self, corner_trap):
        submit_move(corner_trap, 0, 2, Side.WHITE)
        _, phase = submit_move(corner_trap, 7, 2, Side.WHITE)
        assert phase == GamePhase.FINISHED

    def test_illegal_move_error_is_value_error(self):
        assert issubclass(IllegalMoveError, ValueError)
        assert issubclass(IllegalMoveError, ReversiError)


class TestNewGame:
    def test_events(self, controller, events):
        assert isinstance(events[0], GameStarted)
        assert events[0].side_to_move == Side.BLACK
        assert isinstance(events[1], TurnStarted)
        assert events[1].side == Side.BLACK
        assert not events[1].by_computer
        assert list(events[1].legal_moves) == [(2, 3), (3, 2), (4, 5), (5, 4)]

    def test_state(self, controller):
        assert controller.is_human_turn
        assert not controller.awaiting_computer
        assert controller.phase == GamePhase.IN_PROGRESS
        assert controller.score() == {Side.BLACK: 2, Side.WHITE: 2}

    def test_restart_resets(self, controller):
        controller.play_human_move(2, 3)
        controller.play_computer_move()
        controller.new_game()
        assert controller.board == Board.initial()
        assert controller.current_turn == Side.BLACK


class TestHumanMove:
    def test_legal_move(self, controller, events):
        events.clear()
        move = controller.play_human_move(2, 3)

        assert move.captures == ((3, 3),)
        assert controller.score() == {Side.BLACK: 4, Side.WHITE: 1}
        assert controller.current_turn == Side.WHITE
        assert controller.awaiting_computer
        assert isinstance(events[0], MovePlayed)
        assert events[0].side == Side.BLACK and not events[0].by_computer
        assert isinstance(events[1], TurnStarted)
        assert events[1].by_computer

    def test_illegal_move_leaves_board(self, controller):
        before = controller.board.clone()
        with pytest.raises(IllegalMoveError):
            controller.play_human_move(0, 0)
        assert controller.board == before
        assert controller.is_human_turn

    def test_rejected_during_computer_turn(self, controller):
        controller.play_human_move(2, 3)
        with pytest.raises(OutOfTurnError):
            controller.play_human_move(2, 2)


class TestComputerMove:
    def test_reply(self, controller):
        controller.play_human_move(2, 3)
        move = controller.play_computer_move()

        assert controller.board.get_piece(*move.coord) == Side.WHITE
        assert controller.current_turn == Side.BLACK
        assert controller.is_human_turn

    def test_rejected_on_human_turn(self, controller):
        with pytest.raises(OutOfTurnError):
            controller.play_computer_move()

    def test_difficulty_switch(self, controller):
        controller.set_difficulty("easy")
        assert controller.ai.difficulty == Difficulty.EASY


class TestPassAndGameOver:
    def test_human_pass_returns_turn_to_computer(self, controller, corner_trap, events):
        _trap_controller(controller, corner_trap, events)
        expected = apply_move(corner_trap.clone(), 0, 2, Side.WHITE, [(0, 1)])

        move = controller.play_computer_move()

        assert move.coord == (0, 2)
        assert controller.board == expected
        assert [type(e) for e in events] == [MovePlayed, TurnPassed, TurnStarted]
        assert events[1].side == Side.BLACK
        assert controller.current_turn == Side.WHITE
        assert controller.awaiting_computer
        assert controller.phase == GamePhase.IN_PROGRESS

    def test_game_over(self, controller, corner_trap, events):
        _trap_controller(controller, corner_trap, events)
        controller.play_computer_move()
        controller.play_computer_move()

        assert isinstance(events[-1], GameOver)
        assert events[-1].scores == {Side.BLACK: 0, Side.WHITE: 6}
        assert events[-1].winner == Side.WHITE
        assert controller.is_finished
        assert controller.legal_moves() == {}
        assert not controller.awaiting_computer
        with pytest.raises(OutOfTurnError):
            controller.play_human_move(2, 3)
        with pytest.raises(OutOfTurnError):
            controller.play_computer_move()

    def test_full_game_terminates(self, events):
        game = GameController(Difficulty.EASY, random.Random(42))
        game.set_callback(events.append)
        game.new_game()
        for _ in range(100):
            if game.is_finished:
                break
            if game.is_human_turn:
                r, c = next(iter(game.legal_moves()))
                game.play_human_move(r, c)
            else:
                game.play_computer_move()

        assert game.is_finished
        assert isinstance(events[-1], GameOver)
        total = game.score()
        assert total[Side.BLACK] + total[Side.WHITE] + game.board.empty_count() == 64
        assert sum(isinstance(e, GameOver) for e in events) == 1
