#!/usr/bin/env python3
"""
Run the Monte Carlo AI on a fixed opening and print its statistics grid.

The opening below leaves O to move, constrained to board 0.

Usage:
    python scripts/run_monte_carlo_demo.py --think-time-ms 2000 --seed 1
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Add project root to path
SCRIPT_DIR = Path(__file__).parent
PROJECT_ROOT = SCRIPT_DIR.parent
sys.path.insert(0, str(PROJECT_ROOT))

from ultimate_ttt.ai.monte_carlo_ai import MonteCarloAI  # noqa: E402
from ultimate_ttt.display import render_game, render_stats  # noqa: E402
from ultimate_ttt.game_engine import Game  # noqa: E402
from ultimate_ttt.logging_config import setup_logging  # noqa: E402
from ultimate_ttt.models import AIConfig  # noqa: E402

OPENING = [(4, 4), (4, 0), (0, 8), (8, 1), (1, 1), (1, 0)]


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Monte Carlo statistics for a fixed opening")
    parser.add_argument("--think-time-ms", type=int, default=10000)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--verbose", "-v", action="store_true")
    args = parser.parse_args(argv)

    logger = setup_logging(
        "DEBUG" if args.verbose else "INFO",
        script_name="run_monte_carlo_demo",
    )

    game = Game.from_moves(OPENING)
    print(render_game(game))

    ai = MonteCarloAI(AIConfig(think_time=args.think_time_ms, rng_seed=args.seed))
    logger.info(f"Thinking for {args.think_time_ms}ms as {game.current_player.value}")
    best = ai.choose(game)

    stats = ai.last_results
    summary = stats.totals_summary()
    print(f"Games: {stats.runs}")
    print(render_stats(stats))
    print(
        f"Best move: board {best[0]}, cell {best[1]} "
        f"(win ratio {stats.stats(*best).win_ratio:.3f}; "
        f"overall {summary.win_ratio:.3f} won, {summary.loss_ratio:.3f} lost, "
        f"{summary.draw_ratio:.3f} drawn)"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
