"""
Shared pytest fixtures for ultimate tic-tac-toe tests.

Game fixtures are function-scoped to keep tests isolated.
"""

from pathlib import Path
import random
import sys
from typing import Callable

import pytest

# Ensure the project root is on sys.path so `import ultimate_ttt` works when
# running pytest without installing the package.
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from ultimate_ttt.game_engine import Game  # noqa: E402
from tests.helpers import FakeClock  # noqa: E402


@pytest.fixture
def game() -> Game:
    return Game()


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def fake_clock() -> Callable[..., FakeClock]:
    """Factory for FakeClock instances."""
    return FakeClock


@pytest.fixture
def finished_game() -> Game:
    """A game played to completion by seeded uniform-random moves."""
    r = random.Random(99)
    g = Game()
    while g.is_playable():
        g.play(*g.random_move(r))
    return g
