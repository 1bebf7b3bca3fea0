# src/cache/lru_store.py — v1
"""In-memory LRU cache store (the default backend).

Capacity-bounded; inserting a new key when full evicts the least recently
used entry. A lock serialises every structural mutation, and LRU reads
reorder the map, so reads take it as well. Values are lists of frozen Insight
objects; callers get a shallow copy so they cannot mutate the cached list.
"""

from __future__ import annotations

import logging
import threading
from collections import OrderedDict

from docinsight.cache.base_cache_store import BaseCacheStore
from docinsight.core.models import Insight

logger = logging.getLogger(__name__)


class LRUCacheStore(BaseCacheStore):
    """Fixed-capacity least-recently-used insight cache."""

    def __init__(self, capacity: int = 128) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be > 0")
        self._capacity = capacity
        self._entries: OrderedDict[str, list[Insight]] = OrderedDict()
        self._lock = threading.Lock()
        self.hits = 0
        self.misses = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    def get(self, key: str) -> list[Insight] | None:
        with self._lock:
            value = self._entries.get(key)
            if value is None:
                self.misses += 1
                return None
            self._entries.move_to_end(key)
            self.hits += 1
            return list(value)

    def peek(self, key: str) -> list[Insight] | None:
        with self._lock:
            value = self._entries.get(key)
            return None if value is None else list(value)

    def put(self, key: str, insights: list[Insight]) -> None:
        with self._lock:
            if key in self._entries:
                self._entries.move_to_end(key)
            self._entries[key] = list(insights)
            if len(self._entries) > self._capacity:
                evicted, _ = self._entries.popitem(last=False)
                logger.debug("Evicted cache entry %s", evicted)

    def delete(self, key: str) -> None:
        with self._lock:
            self._entries.pop(key, None)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def keys(self) -> list[str]:
        """Keys from least to most recently used."""
        with self._lock:
            return list(self._entries)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
