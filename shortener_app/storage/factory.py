"""
Factory for creating URL store instances.
Simple, clean factory with singleton caching.
"""

import logging
from enum import Enum

from .strategies import URLStore, InMemoryURLStore

logger = logging.getLogger(__name__)


class StorageBackend(Enum):
    """Available storage backends"""
    MEMORY = "memory"


class URLStoreFactory:
    """
    Simple factory for creating URL store instances.

    Uses Singleton Pattern - the whole process shares one store.
    """

    _instance: URLStore = None  # Single cached instance

    @classmethod
    def create(cls, backend: StorageBackend) -> URLStore:
        """
        Create or return cached store instance.

        Args:
            backend: Type of storage backend (from enum)

        Returns:
            Singleton store instance
        """
        if cls._instance is not None:
            return cls._instance

        if backend == StorageBackend.MEMORY:
            cls._instance = InMemoryURLStore()
            logger.info("In-memory URL store initialized")
        else:
            raise ValueError(f"Unknown storage backend: {backend}")

        return cls._instance

    @classmethod
    def clear_instance(cls):
        """Clear cached instance (for testing)"""
        cls._instance = None
