"""Tests for settings and the command line."""

import argparse

from reversi_lite.config import GameSettings
from reversi_lite.engine.registry import Difficulty
from reversi_lite.main import build_parser, run_duel, run_ui


class TestGameSettings:
    def test_defaults(self):
        settings = GameSettings()
        assert settings.difficulty == Difficulty.EASY
        assert settings.think_delay == 0.4
        assert settings.pass_delay == 0.3
        assert settings.seed is None

    def test_from_args(self):
        args = argparse.Namespace(difficulty="hard", think_delay=-1.0, seed=5)
        settings = GameSettings.from_args(args)
        assert settings.difficulty == Difficulty.HARD
        assert settings.think_delay == 0.0
        assert settings.flip_delay == GameSettings().flip_delay
        assert settings.seed == 5

    def test_missing_args_use_defaults(self):
        settings = GameSettings.from_args(argparse.Namespace(think_delay=None))
        assert settings == GameSettings()

    def test_seeded_rng(self):
        settings = GameSettings(seed=3)
        assert settings.make_rng().random() == settings.make_rng().random()


class TestParser:
    def test_ui_command(self):
        args = build_parser().parse_args(["ui", "--difficulty", "hard", "--seed", "2"])
        assert args.func is run_ui
        assert args.difficulty == "hard"
        assert args.seed == 2

    def test_duel_defaults(self):
        args = build_parser().parse_args(["duel"])
        assert args.func is run_duel
        assert args.black == "hard"
        assert args.white == "easy"
        assert args.log_level == "WARNING"

    def test_run_duel_prints_report(self, capsys):
        args = build_parser().parse_args(["duel", "--games", "3", "--seed", "1", "--show-moves"])
        run_duel(args)
        out = capsys.readouterr().out
        assert "Duel complete: 3 games" in out
        assert "Game 3:" in out
        assert "hard (black)" in out
