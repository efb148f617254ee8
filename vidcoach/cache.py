"""
vidcoach.cache - Keyed cache with per-entry time-to-live.

Entries go stale lazily: nothing is evicted in the background, a stale
entry is simply reported as a miss until the caller overwrites it.
"""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

T = TypeVar("T")

DEFAULT_TTL_SECONDS = 30 * 60


@dataclass(frozen=True)
class CacheEntry(Generic[T]):
    payload: T
    fetched_at: float


@dataclass(frozen=True)
class CacheHit(Generic[T]):
    """A payload served from the cache, with its age in seconds."""

    payload: T
    age: float


class TTLCache(Generic[T]):
    """Thread-safe keyed cache whose entries are valid for `ttl` seconds after being set."""

    def __init__(
        self,
        ttl: float = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if ttl <= 0:
            raise ValueError("ttl must be positive")
        self.ttl = ttl
        self._clock = clock
        self._entries: dict[str, CacheEntry[T]] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> CacheHit[T] | None:
        """Return the cached payload for `key`, or None if absent or stale.

        An entry is stale once its age reaches the TTL.
        """
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            age = self._clock() - entry.fetched_at
            if age >= self.ttl:
                return None
            return CacheHit(payload=entry.payload, age=age)

    def set(self, key: str, payload: T) -> None:
        """Store `payload` under `key`, replacing any existing entry."""
        with self._lock:
            self._entries[key] = CacheEntry(payload=payload, fetched_at=self._clock())
