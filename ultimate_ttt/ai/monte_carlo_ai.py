"""Monte Carlo AI implementation for ultimate tic-tac-toe.

Each iteration clones the live game, plays one candidate first move drawn
uniformly from the legal moves, then finishes the game with uniformly random
moves. The outcome (win / loss / draw for the original mover) is recorded
against the candidate in a :class:`MegaBoardStats`. Iterations repeat until
the time budget has elapsed; the candidate with the best observed win ratio
is returned.

There is no tree, no reuse between iterations and no heuristic weighting:
every iteration is an independent full playout from a fresh clone. The
budget is checked between iterations, so at least one playout always runs
and the budget may be overrun by up to one playout (at most 81 moves).
"""

from __future__ import annotations

import logging
import time
from typing import Callable, Optional, Tuple

from ..config import get_config
from ..errors import ConfigurationError, InvariantViolationError, RulesViolationError
from ..game_engine import Game
from ..models import AIConfig, Square
from .base import BaseAI
from .playout_stats import MegaBoardStats, PlayoutOutcome

logger = logging.getLogger(__name__)


class MonteCarloAI(BaseAI):
    """AI that ranks first moves by random-playout win ratio."""

    def __init__(
        self,
        config: Optional[AIConfig] = None,
        time_limit: Optional[float] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        """
        Args:
            config: AI configuration; ``think_time`` (ms) sets the budget
                when ``time_limit`` is not given.
            time_limit: Budget in seconds. Falls back to ``config.think_time``
                and then to ``UTTT_DEFAULT_THINK_TIME_MS``.
            clock: Monotonic time source, in seconds.
        """
        super().__init__(config)
        if time_limit is None:
            think_time_ms = self.config.think_time
            if think_time_ms is None:
                think_time_ms = get_config().default_think_time_ms
            time_limit = think_time_ms / 1000.0
        if time_limit < 0:
            raise ConfigurationError(
                "time_limit must be non-negative",
                context={"time_limit": time_limit},
            )
        self.time_limit = time_limit
        self.clock = clock
        self.last_results: Optional[MegaBoardStats] = None

    def choose(self, game: Game) -> Optional[Tuple[int, int]]:
        """Pick the move with the best Monte Carlo win ratio.

        ``game`` is never mutated. The full statistics of this decision are
        kept in :attr:`last_results`.

        Returns:
            ``(board, cell)`` or ``None`` if the game is already decided.

        Raises:
            InvariantViolationError: a simulated legal move was rejected.
        """
        if not game.is_playable():
            return None

        stats = MegaBoardStats()
        me = game.current_player
        start = self.clock()

        while True:
            sim = game.clone()

            candidate = self.get_random_element(sim.legal_moves_for_current_player())
            self._play_simulated(sim, candidate, "candidate")

            while sim.is_playable():
                self._play_simulated(sim, sim.random_move(self.rng), "playout")

            stats.record(candidate[0], candidate[1], self._outcome(sim.winner, me))

            if self.clock() - start >= self.time_limit:
                break

        best = stats.best()
        self.last_results = stats
        self.move_count += 1

        if logger.isEnabledFor(logging.DEBUG):
            best_stats = stats.stats(*best)
            logger.debug(
                "MonteCarloAI: %d playouts in %.3fs, best=%s win_ratio=%.3f (%d/%d)",
                stats.runs,
                self.clock() - start,
                best,
                best_stats.win_ratio,
                best_stats.wins,
                best_stats.totals,
            )

        return best

    @staticmethod
    def _outcome(winner: Square, me: Square) -> PlayoutOutcome:
        if winner is me:
            return PlayoutOutcome.WIN
        if winner is not Square.EMPTY:
            return PlayoutOutcome.LOSS
        return PlayoutOutcome.DRAW

    @staticmethod
    def _play_simulated(
        sim: Game,
        move: Optional[Tuple[int, int]],
        stage: str,
    ) -> None:
        if move is None:
            raise InvariantViolationError(
                "Playable game produced no legal moves",
                context={"stage": stage, "game": repr(sim)},
            )
        try:
            sim.play(move[0], move[1])
        except RulesViolationError as e:
            raise InvariantViolationError(
                f"Simulated legal move was rejected: {e.message}",
                context={"stage": stage, "board": move[0], "cell": move[1]},
            ) from e
