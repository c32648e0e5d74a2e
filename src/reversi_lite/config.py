from __future__ import annotations

import argparse
import random
from dataclasses import dataclass

from reversi_lite.engine.registry import Difficulty, resolve_difficulty


@dataclass(frozen=True)
class GameSettings:
    difficulty: Difficulty = Difficulty.EASY
    think_delay: float = 0.4
    pass_delay: float = 0.3
    flip_delay: float = 0.06
    seed: int | None = None
    cell_size: float = 60

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "GameSettings":
        defaults = cls()
        return cls(
            difficulty=resolve_difficulty(getattr(args, "difficulty", None) or defaults.difficulty),
            think_delay=max(0.0, _arg_or(args, "think_delay", defaults.think_delay)),
            pass_delay=max(0.0, _arg_or(args, "pass_delay", defaults.pass_delay)),
            flip_delay=max(0.0, _arg_or(args, "flip_delay", defaults.flip_delay)),
            seed=getattr(args, "seed", None),
        )

    def make_rng(self) -> random.Random:
        return random.Random(self.seed)


def _arg_or(args: argparse.Namespace, name: str, default: float) -> float:
    value = getattr(args, name, None)
    return default if value is None else value
