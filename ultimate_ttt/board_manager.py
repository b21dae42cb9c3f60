"""Board-level helpers for the ultimate tic-tac-toe rules engine.

Both levels of the game share one addressing scheme and one win check:

- cells inside a :class:`LocalBoard` and local boards inside the
  :class:`MetaBoard` use row-major indices ``0..8``, where index ``i`` is
  ``(col, row) = (i % 3, i // 3)``;
- :func:`find_line_winner` scans the same eight lines over nine "owners",
  which are raw cells for a local board and local-board winners for the
  meta board.

Winners are cached and updated incrementally on every mutation so reads are
O(1); the Monte Carlo AI reads them in its inner loop.
"""
from __future__ import annotations

from typing import Final, List, Sequence, Tuple, Union

from .errors import (
    BoardAlreadyDecidedError,
    CellAlreadyOccupiedError,
    InvalidBoardError,
    InvalidCellError,
)
from .models import Square

__all__ = [
    "BOARD_SIZE",
    "LocalBoard",
    "MetaBoard",
    "WIN_LINES",
    "coords_to_index",
    "find_line_winner",
    "index_to_coords",
]

BOARD_SIZE: Final[int] = 9

# Rows, then columns, then diagonals. The first complete line wins.
WIN_LINES: Final[Tuple[Tuple[int, int, int], ...]] = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
)

Index = Union[int, Tuple[int, int]]


def index_to_coords(index: int) -> Tuple[int, int]:
    """Convert a row-major index into ``(col, row)``."""
    return index % 3, index // 3


def coords_to_index(col: int, row: int) -> int:
    """Convert ``(col, row)`` into a row-major index."""
    return row * 3 + col


def find_line_winner(owners: Sequence[Square]) -> Square:
    """Return the owner of the first complete line, or ``Square.EMPTY``.

    Args:
        owners: Nine effective owners in row-major order.

    Returns:
        The player owning all three squares of a line, scanning rows,
        columns and diagonals in that order.
    """
    for a, b, c in WIN_LINES:
        first = owners[a]
        if first is not Square.EMPTY and first is owners[b] and first is owners[c]:
            return first
    return Square.EMPTY


def _resolve_index(index: Index) -> int:
    if isinstance(index, tuple):
        col, row = index
        if not (0 <= col < 3 and 0 <= row < 3):
            return -1
        return coords_to_index(col, row)
    return index


class LocalBoard:
    """One 3x3 grid.

    Tracks the still-open cells (ascending, no duplicates) and a cached
    winner. A cell index is open iff the cell is empty and the board has
    no winner.
    """

    __slots__ = ("_cells", "_open", "_winner")

    def __init__(self, cells: Sequence[Square] | None = None):
        if cells is None:
            self._cells: List[Square] = [Square.EMPTY] * BOARD_SIZE
        else:
            if len(cells) != BOARD_SIZE:
                raise ValueError(f"a board needs {BOARD_SIZE} cells, got {len(cells)}")
            self._cells = list(cells)
        self._winner = find_line_winner(self._cells)
        if self._winner is Square.EMPTY:
            self._open = [i for i, sq in enumerate(self._cells) if sq is Square.EMPTY]
        else:
            self._open = []

    def apply(self, cell: int, player: Square) -> bool:
        """
        Play ``player`` at ``cell``.

        Args:
            cell: Cell index (0-8).
            player: Square.O or Square.X.

        Returns:
            True if the board is now decided (won, or no open cells left).

        Raises:
            InvalidCellError: ``cell`` is out of range.
            CellAlreadyOccupiedError: the cell is not empty.
            BoardAlreadyDecidedError: the board already has a winner.
        """
        if not 0 <= cell < BOARD_SIZE:
            raise InvalidCellError(cell)
        if self._cells[cell] is not Square.EMPTY:
            raise CellAlreadyOccupiedError(cell)
        if self._winner is not Square.EMPTY:
            raise BoardAlreadyDecidedError(
                "Board has already been won",
                context={"winner": self._winner.value},
            )

        self._cells[cell] = player
        self._winner = find_line_winner(self._cells)
        if self._winner is Square.EMPTY:
            self._open.remove(cell)
        else:
            self._open.clear()

        return self._winner is not Square.EMPTY or not self._open

    def legal_moves(self) -> List[int]:
        """Open cell indices in ascending order."""
        return list(self._open)

    def is_playable(self) -> bool:
        return bool(self._open) and self._winner is Square.EMPTY

    @property
    def winner(self) -> Square:
        return self._winner

    @property
    def cells(self) -> Tuple[Square, ...]:
        return tuple(self._cells)

    def cell(self, index: int) -> Square:
        """Return the square at ``index``, raising InvalidCellError if out of range."""
        if not 0 <= index < BOARD_SIZE:
            raise InvalidCellError(index)
        return self._cells[index]

    def copy(self) -> "LocalBoard":
        """Create an independent copy of this board."""
        new_board = LocalBoard.__new__(LocalBoard)
        new_board._cells = list(self._cells)
        new_board._open = list(self._open)
        new_board._winner = self._winner
        return new_board

    def __getitem__(self, index: Index) -> Square:
        return self.cell(_resolve_index(index))

    def __len__(self) -> int:
        return BOARD_SIZE

    def __repr__(self) -> str:
        grid = "".join(sq.symbol if sq is not Square.EMPTY else "." for sq in self._cells)
        return f"LocalBoard({grid!r}, winner={self._winner.value})"


class MetaBoard:
    """A 3x3 grid of :class:`LocalBoard`.

    A board index is open iff its local board is undecided and the meta
    board itself has no winner. Once removed, an index never comes back.
    """

    __slots__ = ("_boards", "_open", "_winner")

    def __init__(self) -> None:
        self._boards: List[LocalBoard] = [LocalBoard() for _ in range(BOARD_SIZE)]
        self._open: List[int] = list(range(BOARD_SIZE))
        self._winner = Square.EMPTY

    def apply(self, board_index: int, cell: int, player: Square) -> bool:
        """
        Play ``player`` at ``cell`` of local board ``board_index``.

        Errors from the local board propagate unchanged.

        Returns:
            True if the meta board is now decided (won, or no open boards).

        Raises:
            InvalidBoardError: ``board_index`` is out of range.
            BoardAlreadyDecidedError: the meta board (or the local board)
                is already decided.
        """
        if not 0 <= board_index < BOARD_SIZE:
            raise InvalidBoardError(board_index)
        if not self.is_playable():
            raise BoardAlreadyDecidedError(
                "Game has already been decided",
                context={"winner": self._winner.value},
            )

        if self._boards[board_index].apply(cell, player):
            # Sub-board finished; the meta board may now be won.
            self._winner = find_line_winner([b.winner for b in self._boards])
            if self._winner is Square.EMPTY:
                self._open.remove(board_index)
            else:
                self._open.clear()

        return self._winner is not Square.EMPTY or not self._open

    def legal_moves(self) -> List[int]:
        """Open board indices in ascending order."""
        return list(self._open)

    def is_playable(self) -> bool:
        return bool(self._open) and self._winner is Square.EMPTY

    @property
    def winner(self) -> Square:
        return self._winner

    def board_winners(self) -> List[Square]:
        return [b.winner for b in self._boards]

    def board(self, index: int) -> LocalBoard:
        """Return local board ``index``, raising InvalidBoardError if out of range."""
        if not 0 <= index < BOARD_SIZE:
            raise InvalidBoardError(index)
        return self._boards[index]

    def copy(self) -> "MetaBoard":
        """Create a deep, fully independent copy."""
        new_meta = MetaBoard.__new__(MetaBoard)
        new_meta._boards = [b.copy() for b in self._boards]
        new_meta._open = list(self._open)
        new_meta._winner = self._winner
        return new_meta

    def __getitem__(self, index: Index) -> LocalBoard:
        return self.board(_resolve_index(index))

    def __len__(self) -> int:
        return BOARD_SIZE
