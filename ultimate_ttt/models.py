"""
Pydantic Models for Ultimate Tic-Tac-Toe
Shared value types for the rules engine, the AIs and the service boundary.
"""

from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel, Field


class Square(str, Enum):
    """Contents of a cell, and the winner of a board or game"""
    EMPTY = "empty"
    O = "O"
    X = "X"

    @property
    def symbol(self) -> str:
        """Single character used when rendering boards."""
        return " " if self is Square.EMPTY else self.value

    def opposite(self) -> "Square":
        """Get the other player. EMPTY has no opposite."""
        if self is Square.O:
            return Square.X
        if self is Square.X:
            return Square.O
        return Square.EMPTY

    def __str__(self) -> str:
        return self.symbol


class AIType(str, Enum):
    """AI type enumeration"""
    RANDOM = "random"
    MONTE_CARLO = "monte_carlo"


class Move(BaseModel):
    """A (board, cell) pair.

    Indices are not range-checked here; the rules engine rejects bad
    indices with typed errors so callers get the same contract everywhere.
    """
    board: int
    cell: int

    class Config:
        frozen = True

    @classmethod
    def from_tuple(cls, move: Tuple[int, int]) -> "Move":
        board, cell = move
        return cls(board=board, cell=cell)

    def to_tuple(self) -> Tuple[int, int]:
        return (self.board, self.cell)


class AIConfig(BaseModel):
    """AI configuration"""
    think_time: Optional[int] = Field(None, ge=0, alias="thinkTime")
    rng_seed: Optional[int] = Field(None, ge=0, alias="rngSeed")

    class Config:
        populate_by_name = True
