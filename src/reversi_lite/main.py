import argparse
import logging
from typing import Any, cast

import flet as ft
from reversi_lite.cli.duel import build_player_spec, run_duel_series
from reversi_lite.config import GameSettings
from reversi_lite.engine.board import Side
from reversi_lite.engine.game import GameController
from reversi_lite.engine.registry import get_tier_choices
from reversi_lite.ui.app import ReversiApp

TIER_NAMES = get_tier_choices()


def run_ui(args: argparse.Namespace) -> None:
    settings = GameSettings.from_args(args)
    controller = GameController(settings.difficulty, settings.make_rng())
    app = ReversiApp(controller, settings)
    ft.app(target=app.main)


def run_duel(args: argparse.Namespace) -> None:
    black_spec = build_player_spec(args.black, "black")
    white_spec = build_player_spec(args.white, "white")

    stats, results = run_duel_series(
        black_spec=black_spec,
        white_spec=white_spec,
        games=max(1, args.games),
        swap_colors=not args.no_swap,
        seed=args.seed,
    )

    print("\nGame results:")
    for index, result in enumerate(results, start=1):
        black_label = result.color_to_label[Side.BLACK]
        white_label = result.color_to_label[Side.WHITE]
        if result.winner_color is None:
            verdict = "Draw"
        else:
            verdict = f"Winner: {result.color_to_label[result.winner_color]}"
        print(
            f"Game {index}: {black_label} (Black) {result.scores[Side.BLACK]} - "
            f"{white_label} (White) {result.scores[Side.WHITE]} | {verdict}"
        )
        if args.show_moves:
            print("  " + " ".join(f"{color.value[0]}:{move}" for color, move in result.moves))

    summary: dict[str, Any] = stats.summary()
    engines = cast(dict[str, Any], summary["engines"])
    print(f"\nDuel complete: {summary['total_games']} games, {summary['draws']} draws.")
    print(f"Average moves per game: {summary['average_moves']:.2f}")
    print("\nTier breakdown:")
    for label, data in engines.items():
        print(
            f"- {label}: {data['wins']} wins / {data['games']} games, "
            f"avg score {data['avg_score']:.2f}, avg margin {data['avg_margin']:+.2f}"
        )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Reversi against the computer")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    ui_parser = subparsers.add_parser("ui", help="Start the GUI")
    ui_parser.add_argument("--difficulty", choices=TIER_NAMES, default="easy", help="Computer difficulty")
    ui_parser.add_argument("--think-delay", type=float, default=None, help="Computer thinking delay in seconds")
    ui_parser.add_argument("--seed", type=int, default=None, help="Seed for the easy tier's random choices")
    ui_parser.set_defaults(func=run_ui)

    duel_parser = subparsers.add_parser("duel", help="Run computer vs computer games")
    duel_parser.add_argument("--games", type=int, default=2, help="Number of games to run (default: 2)")
    duel_parser.add_argument("--no-swap", action="store_true", help="Disable color swapping between games")
    duel_parser.add_argument("--black", choices=TIER_NAMES, default="hard", help="Tier playing black in the first game")
    duel_parser.add_argument("--white", choices=TIER_NAMES, default="easy", help="Tier playing white in the first game")
    duel_parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible series")
    duel_parser.add_argument("--show-moves", action="store_true", help="Print each game's move list")
    duel_parser.set_defaults(func=run_duel)
    return parser


def main() -> None:
    parser = build_parser()
    args = parser.parse_args()
    logging.basicConfig(level=getattr(logging, args.log_level, logging.WARNING))

    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
