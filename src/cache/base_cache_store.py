# src/cache/base_cache_store.py — v2
"""Abstract cache store interface for memoized insight results."""

from __future__ import annotations

from abc import ABC, abstractmethod

from docinsight.core.models import Insight


class BaseCacheStore(ABC):
    """Unified interface for insight cache backends.

    Keys are document identities produced by ``cache.fingerprint``; values
    are the insight lists returned by the pipeline for that document.
    """

    @abstractmethod
    def get(self, key: str) -> list[Insight] | None:
        """Retrieve cached insights, or None on a miss."""

    @abstractmethod
    def put(self, key: str, insights: list[Insight]) -> None:
        """Store insights under ``key``, replacing any previous value."""

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove a cache entry if present."""

    @abstractmethod
    def clear(self) -> None:
        """Drop every entry."""

    @abstractmethod
    def __len__(self) -> int:
        """Number of cached entries."""

    def insert(self, key: str, insights: list[Insight]) -> None:
        """Alias of put()."""
        self.put(key, insights)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.peek(key) is not None

    def peek(self, key: str) -> list[Insight] | None:
        """Look up ``key`` without affecting eviction order (defaults to get)."""
        return self.get(key)
