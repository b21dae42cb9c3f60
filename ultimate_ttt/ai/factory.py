"""AI Factory for ultimate tic-tac-toe.

Central place for turning an :class:`AIType` (from a request, a CLI flag or
a config file) into a configured AI instance.

Usage:
    from ultimate_ttt.ai.factory import AIFactory, create_ai

    ai = create_ai(AIType.MONTE_CARLO, AIConfig(think_time=500, rng_seed=7))
    move = ai.choose(game)
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from ..errors import ConfigurationError
from ..models import AIConfig, AIType
from .base import BaseAI

logger = logging.getLogger(__name__)


class AIFactory:
    """Centralized factory for creating AI instances.

    Supports the built-in AI types plus custom constructors registered at
    runtime under a string identifier.
    """

    # Maps string identifiers to callables that create AI instances
    _custom_registry: dict[str, Callable[..., BaseAI]] = {}

    @classmethod
    def register(
        cls,
        identifier: str,
        constructor: Callable[..., BaseAI],
    ) -> None:
        """Register a custom AI implementation.

        Args:
            identifier: Unique string identifier for the AI type
            constructor: Callable accepting ``(config, **kwargs)``.
        """
        if identifier in cls._custom_registry:
            logger.warning(f"Overwriting existing custom AI: {identifier}")
        cls._custom_registry[identifier] = constructor
        logger.debug(f"Registered custom AI: {identifier}")

    @classmethod
    def unregister(cls, identifier: str) -> bool:
        """Unregister a custom AI; returns True if it was registered."""
        if identifier in cls._custom_registry:
            del cls._custom_registry[identifier]
            logger.debug(f"Unregistered custom AI: {identifier}")
            return True
        return False

    @classmethod
    def list_registered(cls) -> dict[str, str]:
        """Map every known identifier to a short description."""
        result = {}

        for ai_type in AIType:
            result[ai_type.value] = f"Built-in: {ai_type.name}"

        for identifier, constructor in cls._custom_registry.items():
            doc = getattr(constructor, "__doc__", None) or "Custom AI"
            result[identifier] = f"Custom: {doc.split(chr(10))[0]}"

        return result

    @classmethod
    def _get_ai_class(cls, ai_type: AIType) -> type[BaseAI]:
        if ai_type == AIType.RANDOM:
            from .random_ai import RandomAI
            return RandomAI
        if ai_type == AIType.MONTE_CARLO:
            from .monte_carlo_ai import MonteCarloAI
            return MonteCarloAI
        raise ConfigurationError(
            "Unsupported AI type",
            context={"ai_type": str(ai_type)},
        )

    @classmethod
    def create(
        cls,
        ai_type: AIType | str,
        config: Optional[AIConfig] = None,
        **kwargs: Any,
    ) -> BaseAI:
        """Create an AI instance.

        Args:
            ai_type: An :class:`AIType`, its string value, or a registered
                custom identifier.
            config: AI configuration (defaults to ``AIConfig()``).
            **kwargs: Extra constructor arguments (e.g. ``time_limit``,
                ``clock`` for :class:`MonteCarloAI`).

        Raises:
            ConfigurationError: the type is unknown.
        """
        config = config or AIConfig()

        if isinstance(ai_type, str) and ai_type in cls._custom_registry:
            return cls._custom_registry[ai_type](config, **kwargs)

        try:
            resolved = AIType(ai_type)
        except ValueError as e:
            raise ConfigurationError(
                "Unsupported AI type",
                context={"ai_type": str(ai_type)},
            ) from e

        ai_class = cls._get_ai_class(resolved)
        return ai_class(config, **kwargs)


def create_ai(
    ai_type: AIType | str,
    config: Optional[AIConfig] = None,
    **kwargs: Any,
) -> BaseAI:
    """Shorthand for :meth:`AIFactory.create`."""
    return AIFactory.create(ai_type, config, **kwargs)
