"""Per-move playout statistics for Monte Carlo move selection.

:class:`MegaBoardStats` keeps three 9x9 counter matrices keyed by
``(board, cell)``: wins, losses and totals of the playouts whose first move
was that key. Draws are ``totals - wins - losses``. Two stats objects merge
by field-wise addition, so independently sharded playout loops can be
combined after the fact.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

import numpy as np

from ..board_manager import BOARD_SIZE

__all__ = ["MegaBoardStats", "MoveStats", "PlayoutOutcome"]

_SHAPE = (BOARD_SIZE, BOARD_SIZE)


class PlayoutOutcome(Enum):
    """Result of a playout from the mover's point of view."""
    WIN = "win"
    LOSS = "loss"
    DRAW = "draw"


@dataclass(frozen=True)
class MoveStats:
    """Counters for a single candidate move (or a sum of them)."""
    wins: int = 0
    losses: int = 0
    totals: int = 0

    @property
    def draws(self) -> int:
        return self.totals - self.wins - self.losses

    @property
    def win_ratio(self) -> float:
        if self.totals == 0:
            return 0.0
        return self.wins / self.totals

    @property
    def loss_ratio(self) -> float:
        if self.totals == 0:
            return 0.0
        return self.losses / self.totals

    @property
    def draw_ratio(self) -> float:
        if self.totals == 0:
            return 0.0
        return 1.0 - (self.wins + self.losses) / self.totals


class MegaBoardStats:
    """9x9 matrix of win/loss/total counters plus a global run counter."""

    def __init__(self) -> None:
        self.wins = np.zeros(_SHAPE, dtype=np.int64)
        self.losses = np.zeros(_SHAPE, dtype=np.int64)
        self.totals = np.zeros(_SHAPE, dtype=np.int64)
        self.runs = 0

    def record(self, board: int, cell: int, outcome: PlayoutOutcome) -> None:
        """Record one playout whose first move was ``(board, cell)``."""
        if outcome is PlayoutOutcome.WIN:
            self.wins[board, cell] += 1
        elif outcome is PlayoutOutcome.LOSS:
            self.losses[board, cell] += 1
        self.totals[board, cell] += 1
        self.runs += 1

    def stats(self, board: int, cell: int) -> MoveStats:
        return MoveStats(
            wins=int(self.wins[board, cell]),
            losses=int(self.losses[board, cell]),
            totals=int(self.totals[board, cell]),
        )

    def win_ratios(self) -> np.ndarray:
        """``wins / totals`` per key, 0 where a key was never tried."""
        ratios = np.zeros(_SHAPE, dtype=np.float64)
        np.divide(self.wins, self.totals, out=ratios, where=self.totals > 0)
        return ratios

    def best(self) -> Optional[Tuple[int, int]]:
        """The explored key with the highest win ratio.

        Ties go to the first key in ascending (board, cell) order. Keys that
        were never tried are not eligible, so the result is always a move
        that was actually played from the root. Returns None before any run.
        """
        if self.runs == 0:
            return None
        ratios = np.where(self.totals > 0, self.win_ratios(), -1.0)
        # argmax returns the first maximum in row-major (board, cell) order.
        board, cell = np.unravel_index(int(np.argmax(ratios)), _SHAPE)
        return int(board), int(cell)

    def totals_summary(self) -> MoveStats:
        """Field-wise sum over every key."""
        return MoveStats(
            wins=int(self.wins.sum()),
            losses=int(self.losses.sum()),
            totals=int(self.totals.sum()),
        )

    def candidates(self) -> List[Tuple[Tuple[int, int], MoveStats]]:
        """Explored keys with their stats, in ascending (board, cell) order."""
        boards, cells = np.nonzero(self.totals)
        return [
            ((int(b), int(c)), self.stats(int(b), int(c)))
            for b, c in zip(boards, cells)
        ]

    def merge(self, other: "MegaBoardStats") -> "MegaBoardStats":
        """Return a new stats object holding the field-wise sum."""
        merged = MegaBoardStats()
        merged.wins = self.wins + other.wins
        merged.losses = self.losses + other.losses
        merged.totals = self.totals + other.totals
        merged.runs = self.runs + other.runs
        return merged

    def __add__(self, other: "MegaBoardStats") -> "MegaBoardStats":
        if not isinstance(other, MegaBoardStats):
            return NotImplemented
        return self.merge(other)

    def copy(self) -> "MegaBoardStats":
        new_stats = MegaBoardStats()
        new_stats.wins = self.wins.copy()
        new_stats.losses = self.losses.copy()
        new_stats.totals = self.totals.copy()
        new_stats.runs = self.runs
        return new_stats

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MegaBoardStats):
            return NotImplemented
        return (
            self.runs == other.runs
            and np.array_equal(self.wins, other.wins)
            and np.array_equal(self.losses, other.losses)
            and np.array_equal(self.totals, other.totals)
        )

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        summary = self.totals_summary()
        return (
            f"MegaBoardStats(runs={self.runs}, wins={summary.wins}, "
            f"losses={summary.losses}, totals={summary.totals})"
        )
