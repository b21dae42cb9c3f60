"""AI implementations for ultimate tic-tac-toe.

    from ultimate_ttt.ai import create_ai, AIType

    ai = create_ai(AIType.MONTE_CARLO, AIConfig(think_time=500))
    board, cell = ai.choose(game)

Architecture:
- base.py: BaseAI abstract base class (per-instance seeded RNG)
- factory.py: AIFactory for creating AI instances
- random_ai.py: uniform-random baseline
- monte_carlo_ai.py: random-playout win-ratio move selection
- playout_stats.py: per-(board, cell) playout counters
"""

from ..models import AIType
from .base import BaseAI
from .factory import AIFactory, create_ai
from .monte_carlo_ai import MonteCarloAI
from .playout_stats import MegaBoardStats, MoveStats, PlayoutOutcome
from .random_ai import RandomAI

__all__ = [
    "AIFactory",
    "AIType",
    "BaseAI",
    "MegaBoardStats",
    "MonteCarloAI",
    "MoveStats",
    "PlayoutOutcome",
    "RandomAI",
    "create_ai",
]
