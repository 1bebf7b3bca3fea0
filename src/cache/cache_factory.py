# src/cache/cache_factory.py — v3
"""Factory for cache store instantiation."""

from __future__ import annotations

from docinsight.cache.base_cache_store import BaseCacheStore
from docinsight.cache.lru_store import LRUCacheStore
from docinsight.config.settings import Settings


def create_cache_store(settings: Settings | None = None) -> BaseCacheStore | None:
    """Instantiate the configured cache backend.

    Args:
        settings: Application settings. Defaults to a 128-entry LRU.

    Returns:
        Configured BaseCacheStore, or None when caching is disabled.
    """
    if settings is None:
        return LRUCacheStore()
    if not settings.cache_enabled:
        return None
    return LRUCacheStore(capacity=settings.cache_capacity)
