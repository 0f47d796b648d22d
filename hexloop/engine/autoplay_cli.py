"""CLI for headless self-play.

Usage::

    hexloop-autoplay --strategy greedy --games 20 --seed 0

    # Smaller board, shorter clear delay
    HEXLOOP_ROWS=3 HEXLOOP_COLS=10 python -m hexloop.engine.autoplay_cli \\
        --strategy random --games 100 --clear-delay 1
"""

from __future__ import annotations

import argparse
import logging
import sys

from hexloop.config import settings
from hexloop.engine.autoplay import run_autoplay
from hexloop.engine.strategy import STRATEGIES


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="hexloop self-play")
    parser.add_argument("--strategy", default="greedy", help="random or greedy")
    parser.add_argument("--games", type=int, default=10)
    parser.add_argument("--seed", type=int, default=0)
    parser.add_argument(
        "--max-placements",
        type=int,
        default=1_000,
        help="Stop a game after this many placements",
    )
    parser.add_argument(
        "--clear-delay",
        type=int,
        default=None,
        help="Override the clear countdown in ticks",
    )
    parser.add_argument("--log-level", default=settings.log_level)
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper())

    strategy_cls = STRATEGIES.get(args.strategy)
    if strategy_cls is None:
        print(
            f"Unknown strategy: {args.strategy!r}. "
            f"Available: {', '.join(STRATEGIES.keys())}",
            file=sys.stderr,
        )
        sys.exit(1)

    run_settings = settings
    if args.clear_delay is not None:
        run_settings = settings.model_copy(update={"clear_delay_ticks": args.clear_delay})

    print(
        f"Autoplay: {args.strategy}, {args.games} games on a "
        f"{run_settings.rows}x{run_settings.cols} board"
    )
    print()

    result = run_autoplay(
        strategy=strategy_cls(seed=args.seed),
        num_games=args.games,
        base_seed=args.seed,
        settings=run_settings,
        max_placements=args.max_placements,
        strategy_name=args.strategy,
        progress_callback=lambda done, total: print(
            f"\r  Game {done}/{total}", end="", flush=True
        ),
    )
    print()
    print()
    print(result.summary())


if __name__ == "__main__":
    main()
