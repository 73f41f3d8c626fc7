"""
Storage module for short URLs and their click analytics.

This module implements the Strategy Pattern for pluggable storage.
"""

from .locks import ReadWriteLock
from .strategies import URLStore, InMemoryURLStore
from .factory import URLStoreFactory, StorageBackend

__all__ = [
    "ReadWriteLock",
    "URLStore",
    "InMemoryURLStore",
    "URLStoreFactory",
    "StorageBackend",
]
