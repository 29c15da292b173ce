"""
In-memory cache layer for Forzeit.

Provides:
- CacheManager: TTL-based cache with lazy expiry and per-key invalidation
- CacheStats: valid/expired entry snapshot
- CacheSweeper: background eviction of expired entries
"""

from .cache_manager import CacheEntry, CacheManager, CacheStats
from .sweeper import CacheSweeper

__all__ = [
    "CacheEntry",
    "CacheManager",
    "CacheStats",
    "CacheSweeper",
]
