"""
Ultimate Tic-Tac-Toe Error Hierarchy

Unified exception hierarchy for the rules engine, the AIs and the service.
All custom exceptions inherit from UltimateTTTError for easy catching and
filtering.

Usage:
    from ultimate_ttt.errors import RulesViolationError, WrongBoardError

    try:
        game.play(board, cell)
    except RulesViolationError as e:
        logger.warning(f"Invalid move: {e.message} ({e.code})")
"""

from typing import Any

__all__ = [
    # AI errors
    "AIError",
    "BoardAlreadyDecidedError",
    "CellAlreadyOccupiedError",
    "ConfigurationError",
    "InvalidBoardError",
    "InvalidCellError",
    "InvariantViolationError",
    # Game rules errors
    "RulesViolationError",
    # Base error
    "UltimateTTTError",
    "WrongBoardError",
]


class UltimateTTTError(Exception):
    """Base exception for all ultimate tic-tac-toe errors.

    Attributes:
        code: Machine-readable error code for categorization
        message: Human-readable error description
        context: Additional context for debugging
    """
    code: str = "ULTIMATE_TTT_ERROR"

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        if code:
            self.code = code
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            ctx = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"[{self.code}] {self.message} ({ctx})"
        return f"[{self.code}] {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "code": self.code,
            "message": self.message,
            "context": self.context,
        }


# =============================================================================
# Game Rules Errors
# =============================================================================


class RulesViolationError(UltimateTTTError):
    """Invalid move per game rules.

    Every rule violation is a caller-input or state-precondition problem.
    None of them are transient, so callers must not retry.
    """
    code: str = "RULES_VIOLATION"


class InvalidBoardError(RulesViolationError):
    """Board index outside 0..8."""
    code: str = "INVALID_BOARD"

    def __init__(self, board: int, context: dict[str, Any] | None = None):
        super().__init__("Invalid board position", context=context)
        self.board = board
        self.context["board"] = board


class InvalidCellError(RulesViolationError):
    """Cell index outside 0..8."""
    code: str = "INVALID_CELL"

    def __init__(self, cell: int, context: dict[str, Any] | None = None):
        super().__init__("Invalid cell position", context=context)
        self.cell = cell
        self.context["cell"] = cell


class CellAlreadyOccupiedError(RulesViolationError):
    """Target cell has already been played."""
    code: str = "CELL_ALREADY_OCCUPIED"

    def __init__(self, cell: int, context: dict[str, Any] | None = None):
        super().__init__("Cell has already been played", context=context)
        self.cell = cell
        self.context["cell"] = cell


class BoardAlreadyDecidedError(RulesViolationError):
    """Board (local or the whole game) already has a winner or is drawn out."""
    code: str = "BOARD_ALREADY_DECIDED"

    def __init__(
        self,
        message: str = "Board has already been decided",
        context: dict[str, Any] | None = None,
    ):
        super().__init__(message, context=context)


class WrongBoardError(RulesViolationError):
    """Move targets a board other than the one the send-to rule mandates."""
    code: str = "WRONG_BOARD"

    def __init__(
        self,
        board: int,
        expected_board: int,
        context: dict[str, Any] | None = None,
    ):
        super().__init__("Wrong board", context=context)
        self.board = board
        self.expected_board = expected_board
        self.context["board"] = board
        self.context["expected_board"] = expected_board


# =============================================================================
# AI Errors
# =============================================================================


class AIError(UltimateTTTError):
    """Base class for AI-related errors."""
    code: str = "AI_ERROR"


class InvariantViolationError(AIError):
    """A move drawn from the legal-move sets was rejected by the rules.

    Simulated moves are always legal by construction, so this indicates a
    bug in the engine or the AI rather than bad input.
    """
    code: str = "INVARIANT_VIOLATION"


# =============================================================================
# Validation Errors
# =============================================================================


class ConfigurationError(UltimateTTTError):
    """Invalid configuration (environment, AI type, etc.)."""
    code: str = "CONFIGURATION_ERROR"
