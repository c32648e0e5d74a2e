from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from reversi_lite.engine.ai_player import AIPlayer
from reversi_lite.engine.board import Board, Side, opponent
from reversi_lite.engine.moves import apply_move
from reversi_lite.engine.registry import Difficulty, resolve_difficulty
from reversi_lite.engine.rules import GamePhase, resolve_turn, score, winner

LOG = logging.getLogger("reversi_lite.duel")

PASS = "PASS"


@dataclass
class PlayerSpec:
    difficulty: Difficulty
    label: str


@dataclass
class MatchResult:
    winner_color: Optional[Side]
    scores: Dict[Side, int]
    moves: List[Tuple[Side, str]]
    color_to_label: Dict[Side, str]


class EngineMatch:
    def __init__(self, black_spec: PlayerSpec, white_spec: PlayerSpec, rng: random.Random):
        self.specs = {Side.BLACK: black_spec, Side.WHITE: white_spec}
        self.players = {
            Side.BLACK: AIPlayer(black_spec.difficulty, rng),
            Side.WHITE: AIPlayer(white_spec.difficulty, rng),
        }

    def play(self) -> MatchResult:
        board = Board.initial()
        color = Side.BLACK
        move_log: List[Tuple[Side, str]] = []

        while True:
            phase = resolve_turn(board, color)
            if phase == GamePhase.FINISHED:
                break
            if phase == GamePhase.PASSED:
                move_log.append((color, PASS))
                color = opponent(color)
                continue

            move = self.players[color].choose_move(board, color)
            apply_move(board, move.row, move.col, color, move.captures)
            move_log.append((color, str(move)))
            color = opponent(color)

        scores = score(board)
        color_to_label = {side: spec.label for side, spec in self.specs.items()}
        return MatchResult(winner_color=winner(scores), scores=scores, moves=move_log, color_to_label=color_to_label)


class DuelStats:
    def __init__(self, labels: List[str]):
        self.labels = labels
        self.wins = {label: 0 for label in labels}
        self.draws = 0
        self.score_totals = {label: 0 for label in labels}
        self.score_diff_totals = {label: 0 for label in labels}
        self.games_played = {label: 0 for label in labels}
        self.total_games = 0
        self.total_moves = 0

    def record(self, result: MatchResult):
        self.total_games += 1
        self.total_moves += sum(1 for _, move in result.moves if move != PASS)
        for color in (Side.BLACK, Side.WHITE):
            label = result.color_to_label[color]
            self.games_played[label] += 1
            self.score_totals[label] += result.scores[color]
            self.score_diff_totals[label] += result.scores[color] - result.scores[opponent(color)]

        if result.winner_color is None:
            self.draws += 1
        else:
            self.wins[result.color_to_label[result.winner_color]] += 1

    def summary(self) -> Dict[str, object]:
        averages = {}
        for label in self.labels:
            games = max(1, self.games_played[label])
            averages[label] = {
                "avg_score": self.score_totals[label] / games,
                "avg_margin": self.score_diff_totals[label] / games,
                "wins": self.wins[label],
                "games": self.games_played[label],
            }
        return {
            "total_games": self.total_games,
            "draws": self.draws,
            "average_moves": self.total_moves / self.total_games if self.total_games else 0.0,
            "engines": averages,
        }


def build_player_spec(tier: str | Difficulty, seat: str) -> PlayerSpec:
    difficulty = resolve_difficulty(tier)
    return PlayerSpec(difficulty=difficulty, label=f"{difficulty.value} ({seat})")


def run_duel_series(
    black_spec: PlayerSpec,
    white_spec: PlayerSpec,
    games: int = 1,
    swap_colors: bool = True,
    seed: int | None = None,
) -> Tuple[DuelStats, List[MatchResult]]:
    labels = list(dict.fromkeys([black_spec.label, white_spec.label]))
    stats = DuelStats(labels)
    results: List[MatchResult] = []
    rng = random.Random(seed)

    for game_index in range(games):
        if swap_colors and game_index % 2 == 1:
            current_black, current_white = white_spec, black_spec
        else:
            current_black, current_white = black_spec, white_spec

        result = EngineMatch(current_black, current_white, rng).play()
        LOG.info(
            "Game %d finished: Black %d - White %d",
            game_index + 1,
            result.scores[Side.BLACK],
            result.scores[Side.WHITE],
        )
        stats.record(result)
        results.append(result)

    return stats, results
