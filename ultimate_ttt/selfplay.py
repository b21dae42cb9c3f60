"""AI-vs-AI self-play for win-rate studies.

``play_game`` runs one game to completion; ``run_selfplay`` repeats games
until a game count or a wall-clock duration is reached and tallies the
results. The first player (O) is ``ai_o``.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Tuple

from .ai.base import BaseAI
from .errors import InvariantViolationError
from .game_engine import Game
from .metrics import SELFPLAY_GAMES
from .models import Square

logger = logging.getLogger(__name__)


@dataclass
class GameRecord:
    """Result of one self-play game."""
    winner: Square
    moves: List[Tuple[int, int]] = field(default_factory=list)
    turn_count: int = 0
    duration_seconds: float = 0.0


@dataclass
class SelfplaySummary:
    """Aggregated results of a self-play run."""
    o_wins: int = 0
    x_wins: int = 0
    draws: int = 0
    elapsed_seconds: float = 0.0

    @property
    def games(self) -> int:
        return self.o_wins + self.x_wins + self.draws

    def _pct(self, count: int) -> float:
        return 100.0 * count / self.games if self.games else 0.0

    @property
    def o_win_pct(self) -> float:
        return self._pct(self.o_wins)

    @property
    def x_win_pct(self) -> float:
        return self._pct(self.x_wins)

    @property
    def draw_pct(self) -> float:
        return self._pct(self.draws)

    @property
    def games_per_second(self) -> float:
        if self.elapsed_seconds <= 0:
            return 0.0
        return self.games / self.elapsed_seconds

    def record(self, winner: Square) -> None:
        if winner is Square.O:
            self.o_wins += 1
        elif winner is Square.X:
            self.x_wins += 1
        else:
            self.draws += 1

    def to_dict(self) -> dict:
        return {
            "games": self.games,
            "o_wins": self.o_wins,
            "x_wins": self.x_wins,
            "draws": self.draws,
            "o_win_pct": round(self.o_win_pct, 2),
            "x_win_pct": round(self.x_win_pct, 2),
            "draw_pct": round(self.draw_pct, 2),
            "elapsed_seconds": round(self.elapsed_seconds, 3),
            "games_per_second": round(self.games_per_second, 2),
        }


def play_game(
    ai_o: BaseAI,
    ai_x: BaseAI,
    game: Optional[Game] = None,
    clock: Callable[[], float] = time.monotonic,
) -> GameRecord:
    """Play ``game`` (a fresh one by default) to completion.

    Raises:
        InvariantViolationError: an AI returned no move for a playable game.
        RulesViolationError: an AI returned an illegal move.
    """
    game = game or Game()
    start = clock()
    moves: List[Tuple[int, int]] = []

    while game.is_playable():
        ai = ai_o if game.current_player is Square.O else ai_x
        move = ai.choose(game)
        if move is None:
            raise InvariantViolationError(
                "AI returned no move for a playable game",
                context={"ai": repr(ai), "game": repr(game)},
            )
        game.play(*move)
        moves.append(move)

    outcome = "draw" if game.winner is Square.EMPTY else game.winner.value
    SELFPLAY_GAMES.labels(outcome=outcome).inc()
    return GameRecord(
        winner=game.winner,
        moves=moves,
        turn_count=game.turn_count,
        duration_seconds=clock() - start,
    )


def run_selfplay(
    ai_o: BaseAI,
    ai_x: BaseAI,
    num_games: Optional[int] = None,
    duration: Optional[float] = None,
    clock: Callable[[], float] = time.monotonic,
    log_every: int = 1000,
) -> SelfplaySummary:
    """Play games until ``num_games`` or ``duration`` seconds is reached.

    At least one game is always played. With neither limit set, one game
    is played.
    """
    summary = SelfplaySummary()
    start = clock()

    while True:
        record = play_game(ai_o, ai_x, clock=clock)
        summary.record(record.winner)

        if log_every and summary.games % log_every == 0:
            logger.info(
                "Played %d games (O %d, X %d, draws %d)",
                summary.games, summary.o_wins, summary.x_wins, summary.draws,
            )

        if num_games is not None and summary.games >= num_games:
            break
        if duration is not None and clock() - start >= duration:
            break
        if num_games is None and duration is None:
            break

    summary.elapsed_seconds = clock() - start
    return summary
