"""
Base AI Player class for ultimate tic-tac-toe
Abstract base class that all AI implementations inherit from
"""

from abc import ABC, abstractmethod
from typing import Any, List, Optional, Tuple
import random

from ..game_engine import Game
from ..models import AIConfig


class BaseAI(ABC):
    """Abstract base class for all AI implementations"""

    def __init__(self, config: Optional[AIConfig] = None):
        """
        Initialize AI player

        Args:
            config: AI configuration settings
        """
        self.config = config or AIConfig()
        self.move_count = 0

        # Per-instance RNG used for all stochastic behaviour (candidate
        # moves, playouts, random baselines). A fixed rng_seed makes every
        # choice reproducible; without one the RNG is seeded from OS entropy.
        self.rng_seed: Optional[int] = self.config.rng_seed
        self.rng: random.Random = random.Random(self.rng_seed)

    @abstractmethod
    def choose(self, game: Game) -> Optional[Tuple[int, int]]:
        """
        Select a move for the player whose turn it is

        Args:
            game: Current game (never mutated)

        Returns:
            ``(board, cell)`` or None if the game is decided
        """
        pass

    def get_random_element(self, items: List[Any]) -> Optional[Any]:
        """
        Get random element from list using the per-instance RNG.

        Args:
            items: List of items

        Returns:
            Random item or None if list is empty
        """
        if not items:
            return None
        return self.rng.choice(items)

    def __repr__(self) -> str:
        """String representation of AI"""
        return f"{self.__class__.__name__}(rng_seed={self.rng_seed})"
