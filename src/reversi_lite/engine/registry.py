from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Type

from reversi_lite.engine.strategies import BaseStrategy, HeuristicStrategy, RandomStrategy


class Difficulty(str, Enum):
    EASY = "easy"
    HARD = "hard"


@dataclass(frozen=True)
class TierEntry:
    cls: Type[BaseStrategy]
    label: str
    description: str


TIER_REGISTRY: Dict[Difficulty, TierEntry] = {
    Difficulty.EASY: TierEntry(
        cls=RandomStrategy,
        label="Easy",
        description="Plays a uniformly random legal move.",
    ),
    Difficulty.HARD: TierEntry(
        cls=HeuristicStrategy,
        label="Hard",
        description="Prefers corners, edges and big captures while limiting your replies.",
    ),
}


def get_tier_choices() -> List[str]:
    """Return tier keys in display order."""
    return [tier.value for tier in TIER_REGISTRY]


def resolve_difficulty(name: str | Difficulty) -> Difficulty:
    try:
        return Difficulty(name.lower() if isinstance(name, str) else name)
    except ValueError as exc:
        raise ValueError(f"Unknown difficulty '{name}'") from exc


def tier_label(tier: str | Difficulty) -> str:
    return TIER_REGISTRY[resolve_difficulty(tier)].label


def build_strategy(tier: str | Difficulty, rng: random.Random | None = None) -> BaseStrategy:
    entry = TIER_REGISTRY[resolve_difficulty(tier)]
    return entry.cls(rng)
