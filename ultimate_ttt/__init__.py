"""
Ultimate Tic-Tac-Toe
====================
Rules engine for the nested (3x3 of 3x3) tic-tac-toe variant, plus a
Monte Carlo move-selection AI and a uniform-random baseline.

    from ultimate_ttt import Game
    from ultimate_ttt.ai import MonteCarloAI

    game = Game()
    board, cell = MonteCarloAI(time_limit=0.5).choose(game)
    game.play(board, cell)
"""

from .board_manager import LocalBoard, MetaBoard
from .game_engine import Game
from .models import AIConfig, AIType, Move, Square

__version__ = "1.0.0"

__all__ = [
    "AIConfig",
    "AIType",
    "Game",
    "LocalBoard",
    "MetaBoard",
    "Move",
    "Square",
]
