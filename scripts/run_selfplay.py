#!/usr/bin/env python3
"""
Run AI-vs-AI self-play games and report win rates.

Plays until a game count or a wall-clock duration is reached. With the
default random-vs-random pairing this measures the first-move advantage;
pairing monte_carlo against random measures the AI's strength.

Usage:
    # Ten seconds of random-vs-random games
    python scripts/run_selfplay.py --duration 10

    # 20 games, Monte Carlo (O) vs random (X), 50ms per move
    python scripts/run_selfplay.py --games 20 --player-o monte_carlo --think-time-ms 50
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

# Add project root to path
SCRIPT_DIR = Path(__file__).parent
PROJECT_ROOT = SCRIPT_DIR.parent
sys.path.insert(0, str(PROJECT_ROOT))

from ultimate_ttt.ai.factory import create_ai  # noqa: E402
from ultimate_ttt.logging_config import setup_logging  # noqa: E402
from ultimate_ttt.models import AIConfig, AIType  # noqa: E402
from ultimate_ttt.selfplay import run_selfplay  # noqa: E402


def create_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Ultimate tic-tac-toe self-play win-rate study")
    parser.add_argument("--games", type=int, default=None, help="Number of games to play")
    parser.add_argument(
        "--duration",
        type=float,
        default=None,
        help="Wall-clock seconds to keep playing (default: 10 when --games is not set)",
    )
    choices = [t.value for t in AIType]
    parser.add_argument("--player-o", choices=choices, default=AIType.RANDOM.value)
    parser.add_argument("--player-x", choices=choices, default=AIType.RANDOM.value)
    parser.add_argument(
        "--think-time-ms",
        type=int,
        default=100,
        help="Monte Carlo budget per move in milliseconds",
    )
    parser.add_argument("--seed", type=int, default=None, help="Base RNG seed")
    parser.add_argument("--json", action="store_true", help="Print the summary as JSON")
    parser.add_argument("--verbose", "-v", action="store_true")
    parser.add_argument("--json-logs", action="store_true")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = create_argument_parser().parse_args(argv)
    logger = setup_logging(
        "DEBUG" if args.verbose else "INFO",
        json_logs=args.json_logs,
        script_name="run_selfplay",
    )

    duration = args.duration
    if args.games is None and duration is None:
        duration = 10.0

    # Distinct seeds per side so mirrored AIs do not play identical sequences.
    seed_o = args.seed
    seed_x = args.seed + 1 if args.seed is not None else None
    ai_o = create_ai(args.player_o, AIConfig(think_time=args.think_time_ms, rng_seed=seed_o))
    ai_x = create_ai(args.player_x, AIConfig(think_time=args.think_time_ms, rng_seed=seed_x))

    logger.info(f"Self-play: O={ai_o!r} vs X={ai_x!r}, games={args.games}, duration={duration}")
    summary = run_selfplay(ai_o, ai_x, num_games=args.games, duration=duration)

    if args.json:
        print(json.dumps(summary.to_dict(), indent=2))
        return 0

    print(f"Games: {summary.games} ({summary.games_per_second:.1f}/s)")
    print("Winners: ")
    print(f"    O: {summary.o_wins} {summary.o_win_pct:.1f}% (goes first)")
    print(f"    X: {summary.x_wins} {summary.x_win_pct:.1f}% (goes second)")
    print(f"Draws: {summary.draws} {summary.draw_pct:.1f}%")
    return 0


if __name__ == "__main__":
    sys.exit(main())
