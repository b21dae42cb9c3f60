"""Core game engine for ultimate tic-tac-toe.

:class:`Game` wraps a :class:`~ultimate_ttt.board_manager.MetaBoard` with
turn state and enforces the send-to rule: the cell index just played names
the local board the opponent must play in next, unless that board is no
longer playable, in which case the opponent may choose any open board.

States are ``InProgress(current_player, current_board)`` and
``Decided(winner)``. The initial state is ``InProgress(O, None)`` and the
only transitions are successful :meth:`Game.play` calls. A failed call
leaves the game, the meta board and every local board untouched.
"""

from __future__ import annotations

import random
from typing import Iterable, List, Optional, Tuple

from .board_manager import BOARD_SIZE, LocalBoard, MetaBoard
from .errors import (
    BoardAlreadyDecidedError,
    InvalidBoardError,
    WrongBoardError,
)
from .models import Square

__all__ = ["Game", "FIRST_PLAYER"]

FIRST_PLAYER = Square.O


class Game:
    """Ultimate tic-tac-toe game: meta board plus turn and targeting state."""

    __slots__ = ("_meta", "_current_player", "_current_board", "_turn_count")

    def __init__(self) -> None:
        self._meta = MetaBoard()
        self._current_player = FIRST_PLAYER
        self._current_board: Optional[int] = None
        self._turn_count = 0

    @classmethod
    def from_moves(cls, moves: Iterable[Tuple[int, int]]) -> "Game":
        """Replay ``moves`` from the initial position.

        The first rules violation propagates to the caller.
        """
        game = cls()
        for board_index, cell_index in moves:
            game.play(board_index, cell_index)
        return game

    def play(self, board_index: int, cell_index: int) -> bool:
        """
        Play the current player's move.

        Args:
            board_index: Local board to play in (0-8).
            cell_index: Cell within that board (0-8).

        Returns:
            True if the game is now decided.

        Raises:
            BoardAlreadyDecidedError: the game (or the target board) is decided.
            WrongBoardError: the send-to rule mandates another board.
            InvalidBoardError / InvalidCellError: index out of range.
            CellAlreadyOccupiedError: the cell has already been played.
        """
        if not self._meta.is_playable():
            raise BoardAlreadyDecidedError(
                "Game has already been decided",
                context={"winner": self._meta.winner.value},
            )
        if self._current_board is not None and self._current_board != board_index:
            raise WrongBoardError(board_index, self._current_board)

        # MetaBoard/LocalBoard validate everything before writing.
        if self._meta.apply(board_index, cell_index, self._current_player):
            return True

        next_board = self._meta.board(cell_index)
        self._current_board = cell_index if next_board.is_playable() else None

        self._current_player = self._current_player.opposite()
        self._turn_count += 1

        return False

    def legal_board(self) -> Optional[int]:
        """The board the current player must play in, or None for any open board."""
        return self._current_board

    def legal_moves_for_current_player(self) -> List[Tuple[int, int]]:
        """All legal ``(board, cell)`` moves in ascending order."""
        if not self._meta.is_playable():
            return []
        if self._current_board is not None:
            boards = [self._current_board]
        else:
            boards = self._meta.legal_moves()
        meta = self._meta
        return [(b, c) for b in boards for c in meta.board(b).legal_moves()]

    def choose_board(self, rng: random.Random) -> Optional[int]:
        """The constrained board, else a uniformly random open board.

        Returns None when the game is decided.
        """
        if not self._meta.is_playable():
            return None
        if self._current_board is not None:
            return self._current_board
        return rng.choice(self._meta.legal_moves())

    def random_move(self, rng: random.Random) -> Optional[Tuple[int, int]]:
        """A move drawn uniformly from :meth:`legal_moves_for_current_player`."""
        moves = self.legal_moves_for_current_player()
        if not moves:
            return None
        return rng.choice(moves)

    def is_playable(self) -> bool:
        return self._meta.is_playable()

    @property
    def winner(self) -> Square:
        return self._meta.winner

    @property
    def current_player(self) -> Square:
        """The player whose turn it is."""
        return self._current_player

    @property
    def current_board(self) -> Optional[int]:
        return self._current_board

    @property
    def turn_count(self) -> int:
        return self._turn_count

    @property
    def meta_board(self) -> MetaBoard:
        return self._meta

    def board(self, board_index: int) -> LocalBoard:
        return self._meta.board(board_index)

    def square(self, board_index: int, cell_index: int) -> Square:
        if not 0 <= board_index < BOARD_SIZE:
            raise InvalidBoardError(board_index)
        return self._meta.board(board_index).cell(cell_index)

    def clone(self) -> "Game":
        """Create a deep copy; playing on the clone never affects this game."""
        new_game = Game.__new__(Game)
        new_game._meta = self._meta.copy()
        new_game._current_player = self._current_player
        new_game._current_board = self._current_board
        new_game._turn_count = self._turn_count
        return new_game

    def __getitem__(self, board_index: int) -> LocalBoard:
        return self._meta[board_index]

    def __repr__(self) -> str:
        return (
            f"Game(current_player={self._current_player.value}, "
            f"current_board={self._current_board}, "
            f"turn_count={self._turn_count}, winner={self.winner.value})"
        )
