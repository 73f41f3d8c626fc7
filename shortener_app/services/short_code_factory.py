"""
Factory for creating short code generation strategies.
Uses caching to avoid creating multiple instances.
"""

import logging
from enum import Enum

from shortener_app.services.short_code_strategies import (
    ShortCodeStrategy,
    HashidsShortCodeStrategy,
    Base62ShortCodeStrategy
)
from shortener_app.config import settings

logger = logging.getLogger(__name__)


class ShortCodeStrategyType(Enum):
    """Available short code generation strategies"""
    HASHIDS = "hashids"
    BASE62 = "base62"


class ShortCodeFactory:
    """Factory for creating short code generation strategies with caching"""

    _instances = {}  # Cache for strategy instances

    @classmethod
    def create_strategy(
        cls,
        strategy_type: ShortCodeStrategyType = None
    ) -> ShortCodeStrategy:
        """
        Create or return cached short code generation strategy.

        Args:
            strategy_type: Type of strategy to create.
                          If None, uses value from settings.

        Returns:
            A cached instance of a ShortCodeStrategy

        Raises:
            ValueError: If strategy_type is unknown
        """
        if strategy_type is None:
            strategy_type = ShortCodeStrategyType(settings.short_code_strategy)

        if strategy_type in cls._instances:
            return cls._instances[strategy_type]

        if strategy_type == ShortCodeStrategyType.HASHIDS:
            instance = HashidsShortCodeStrategy(
                salt=settings.hashids_salt,
                min_length=settings.short_code_min_length
            )
        elif strategy_type == ShortCodeStrategyType.BASE62:
            instance = Base62ShortCodeStrategy(
                salt=settings.short_code_salt,
                min_length=settings.short_code_min_length
            )
        else:
            raise ValueError(f"Unknown strategy type: {strategy_type}")

        logger.info("Short code strategy initialized: %s", strategy_type.value)
        cls._instances[strategy_type] = instance
        return instance
