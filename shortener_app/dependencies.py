"""
FastAPI dependencies for dependency injection.

This module provides the process-wide store and the clock that are
injected into services and routes.

Pattern: Dependency Injection
- Loose coupling between components
- Easy to test (override with app.dependency_overrides)
- Flexible (swap implementations via config)
"""

from functools import lru_cache

from fastapi import Depends

from shortener_app.config import settings
from shortener_app.services.url_service import Clock, URLService, utc_now
from shortener_app.storage.factory import StorageBackend, URLStoreFactory
from shortener_app.storage.strategies import URLStore


@lru_cache()
def get_store() -> URLStore:
    """
    Get store instance (singleton).

    Factory gets config from settings internally.
    @lru_cache ensures this is called only once.

    Returns:
        URLStore instance based on settings
    """
    backend = StorageBackend(settings.storage_backend)
    return URLStoreFactory.create(backend)


def get_clock() -> Clock:
    """Current-time source (tests override this to freeze or advance time)"""
    return utc_now


def get_url_service(
    store: URLStore = Depends(get_store),
    clock: Clock = Depends(get_clock)
) -> URLService:
    """
    Get URLService with all dependencies injected.

    Controllers depend on the service; the service depends on the store.
    """
    return URLService(store=store, clock=clock)
