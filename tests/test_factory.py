"""Tests for AIFactory."""

import pytest

from ultimate_ttt.ai.factory import AIFactory, create_ai
from ultimate_ttt.ai.monte_carlo_ai import MonteCarloAI
from ultimate_ttt.ai.random_ai import RandomAI
from ultimate_ttt.errors import ConfigurationError
from ultimate_ttt.models import AIConfig, AIType


class TestAIFactory:
    """Tests for AI construction and the custom registry."""

    def test_create_builtin_types(self) -> None:
        assert isinstance(AIFactory.create(AIType.RANDOM), RandomAI)
        assert isinstance(AIFactory.create(AIType.MONTE_CARLO), MonteCarloAI)

    def test_create_from_string(self) -> None:
        ai = create_ai("monte_carlo", AIConfig(think_time=50, rng_seed=3))
        assert isinstance(ai, MonteCarloAI)
        assert ai.time_limit == 0.05
        assert ai.rng_seed == 3

    def test_kwargs_are_forwarded(self) -> None:
        ai = create_ai(AIType.MONTE_CARLO, time_limit=1.5)
        assert ai.time_limit == 1.5

    def test_unknown_type(self) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            create_ai("minimax")
        assert exc_info.value.context["ai_type"] == "minimax"

    def test_register_custom(self) -> None:
        def build(config, **kwargs):
            """Seeded random opponent."""
            return RandomAI(config)

        AIFactory.register("seeded_random", build)
        try:
            ai = create_ai("seeded_random", AIConfig(rng_seed=11))
            assert isinstance(ai, RandomAI)
            assert ai.rng_seed == 11
            listing = AIFactory.list_registered()
            assert listing["seeded_random"] == "Custom: Seeded random opponent."
            assert listing["random"] == "Built-in: RANDOM"
        finally:
            assert AIFactory.unregister("seeded_random") is True
        assert AIFactory.unregister("seeded_random") is False
        assert "seeded_random" not in AIFactory.list_registered()
