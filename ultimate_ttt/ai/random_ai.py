"""Random AI implementation for ultimate tic-tac-toe.

This agent picks a board the way the rules allow (the mandated board, else a
uniformly random open one) and then a uniformly random open cell in it,
using the per-instance RNG on the :class:`BaseAI`. It is intended as a
baseline opponent and for fast bulk self-play, not competitive play.
"""

from __future__ import annotations

from ..game_engine import Game
from .base import BaseAI


class RandomAI(BaseAI):
    """AI that selects random valid moves."""

    def choose(self, game: Game) -> tuple[int, int] | None:
        """Select a random valid move for ``game``.

        Args:
            game: Current game.

        Returns:
            A random ``(board, cell)`` or ``None`` if the game is decided.
        """
        board_index = game.choose_board(self.rng)
        if board_index is None:
            return None

        cell_index = self.get_random_element(game.board(board_index).legal_moves())
        if cell_index is None:
            return None

        self.move_count += 1
        return board_index, cell_index
