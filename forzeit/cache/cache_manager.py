"""
In-memory cache manager with TTL support and lazy expiry.

Features:
- TTL-based entry expiration, checked on every read (lazy expiry)
- Explicit per-key invalidation
- Thread-safe operations with RLock
- Read-only statistics snapshot (valid vs expired entries)
- Injectable clock so tests can advance time deterministically
"""

import logging
import threading
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CacheEntry:
    """Stored value plus the moment it was written and how long it lives."""

    value: Any
    inserted_at: float
    ttl: float

    def is_expired(self, now: float) -> bool:
        return now - self.inserted_at > self.ttl


@dataclass
class CacheStats:
    """Cache statistics."""

    total_entries: int = 0
    valid_entries: int = 0
    expired_entries: int = 0

    def to_dict(self) -> dict:
        """Convert to dict."""
        return {
            "totalEntries": self.total_entries,
            "validEntries": self.valid_entries,
            "expiredEntries": self.expired_entries,
        }


class CacheManager:
    """Thread-safe in-memory cache with TTL and lazy expiry."""

    def __init__(self, default_ttl: float = 60, clock: Callable[[], float] = time.monotonic):
        """
        Initialize cache manager.

        Args:
            default_ttl: Default TTL in seconds. Defaults to 60.
            clock: Returns the current time in seconds. Defaults to time.monotonic.
        """
        self._cache: dict[str, CacheEntry] = {}
        self._lock = threading.RLock()
        self._default_ttl = default_ttl
        self._clock = clock

    def get(self, key: str) -> Any | None:
        """
        Get value from cache.

        A stale entry is deleted as a side effect. Returns None if the key is
        unknown or the entry has expired.
        """
        with self._lock:
            entry = self._cache.get(key)
            if entry is None:
                return None

            if entry.is_expired(self._clock()):
                del self._cache[key]
                return None

            return entry.value

    def has(self, key: str) -> bool:
        """True if key holds a live value. Triggers lazy expiry like get()."""
        return self.get(key) is not None

    def set(self, key: str, value: Any, ttl_seconds: float | None = None) -> None:
        """
        Set value in cache with TTL. Replacing a key resets its clock.

        Args:
            key: Cache key
            value: Value to cache
            ttl_seconds: TTL in seconds. If None, uses default_ttl.
        """
        if ttl_seconds is None:
            ttl_seconds = self._default_ttl

        with self._lock:
            self._cache[key] = CacheEntry(value=value, inserted_at=self._clock(), ttl=ttl_seconds)

    def delete(self, key: str) -> bool:
        """
        Delete specific key from cache.

        Returns:
            True if the key was present
        """
        with self._lock:
            return self._cache.pop(key, None) is not None

    def clear(self) -> None:
        """Clear entire cache."""
        with self._lock:
            self._cache.clear()

    def stats(self) -> CacheStats:
        """Classify entries as valid or expired without evicting anything."""
        with self._lock:
            now = self._clock()
            expired = sum(1 for entry in self._cache.values() if entry.is_expired(now))
            return CacheStats(
                total_entries=len(self._cache),
                valid_entries=len(self._cache) - expired,
                expired_entries=expired,
            )

    def cleanup_expired(self) -> int:
        """
        Clean up all expired entries.

        Returns:
            Number of expired entries removed
        """
        with self._lock:
            now = self._clock()
            expired_keys = [key for key, entry in self._cache.items() if entry.is_expired(now)]

            for key in expired_keys:
                del self._cache[key]

        if expired_keys:
            logger.info(f"Cache cleanup: removed {len(expired_keys)} expired entries")
        return len(expired_keys)

    def __len__(self) -> int:
        with self._lock:
            return len(self._cache)
