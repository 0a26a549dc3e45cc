from __future__ import annotations

import argparse
import logging

from gridsnake.app import run
from gridsnake.config import (
    DEFAULT_COLS,
    DEFAULT_LENGTH,
    DEFAULT_ROWS,
    DEFAULT_TICK_MS,
    FoodPolicy,
    GameConfig,
    InvalidConfig,
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Play grid Snake")
    parser.add_argument("--grid", type=int, nargs=2, default=(DEFAULT_ROWS, DEFAULT_COLS), metavar=("ROWS", "COLS"))
    parser.add_argument("--length", type=int, default=DEFAULT_LENGTH, help="Initial snake length")
    parser.add_argument("--tick-ms", type=int, default=DEFAULT_TICK_MS, help="Milliseconds between moves")
    parser.add_argument("--cell-size", type=int, default=14)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument(
        "--food-policy",
        type=str,
        default=FoodPolicy.VACANT.value,
        choices=[policy.value for policy in FoodPolicy],
        help="'vacant' never drops food on the snake, 'single_draw' may",
    )
    parser.add_argument("--high-score-file", type=str, default="highscore.json")
    parser.add_argument("--log-level", type=str, default="INFO")
    return parser


def main() -> None:
    parser = build_parser()
    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    rows, cols = args.grid
    config = GameConfig(
        rows=rows,
        cols=cols,
        initial_length=args.length,
        tick_ms=args.tick_ms,
        food_policy=FoodPolicy(args.food_policy),
        seed=args.seed,
        cell_size=args.cell_size,
        high_score_path=args.high_score_file,
    )
    try:
        config.validate()
    except InvalidConfig as e:
        parser.error(str(e))

    high_score = run(config)
    print(f"High score: {high_score}")


if __name__ == "__main__":
    main()
