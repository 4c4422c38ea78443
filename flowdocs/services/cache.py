"""
CacheManager - Async-compatible in-memory cache with TTL expiry.

Features:
- Memory-based cache with oldest-first eviction once max_size is reached
- TTL (Time To Live) per entry, expired entries are dropped lazily on read
- Optional sweep of expired entries via cleanup_expired()
- Coroutine-safe operations guarded by a single asyncio.Lock
"""

import asyncio
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any, Callable, Generic, TypeVar

from loguru import logger

T = TypeVar("T")

Clock = Callable[[], datetime]


@dataclass
class CacheEntry(Generic[T]):
    """Stored payload with its absolute expiry."""

    key: str
    value: T
    created_at: datetime
    expires_at: datetime

    def is_expired(self, now: datetime) -> bool:
        """True once the clock has reached expires_at."""
        return now >= self.expires_at


class CacheManager:
    """
    Process-wide key/value cache with per-entry TTL.

    Usage:
        cache = CacheManager(max_size=500)

        cached = await cache.get("react-flow-hook-usenodes")
        if cached is not None:
            return cached

        result = render_hook("usenodes")
        await cache.set("react-flow-hook-usenodes", result, timedelta(minutes=30))
    """

    def __init__(
        self,
        max_size: int = 500,
        clock: Clock = datetime.now,
        debug: bool = False,
    ):
        self._memory: dict[str, CacheEntry[Any]] = {}
        self._max_size = max_size
        self._clock = clock
        self._debug = debug
        self._lock = asyncio.Lock()
        self._stats = CacheStats()

    async def get(self, key: str) -> Any | None:
        """
        Get value from cache.

        Returns the stored value while the entry is live, None otherwise.
        """
        async with self._lock:
            entry = self._memory.get(key)
            if entry is None:
                self._stats.misses += 1
                self._log(f"MISS: {key[:50]}")
                return None

            if entry.is_expired(self._clock()):
                del self._memory[key]
                self._stats.misses += 1
                self._log(f"EXPIRED: {key[:50]}")
                return None

            self._stats.hits += 1
            self._log(f"HIT: {key[:50]}")
            return entry.value

    async def set(self, key: str, value: Any, ttl: timedelta) -> None:
        """
        Set value in cache, replacing any previous entry for the key.

        Args:
            key: Cache key
            value: Payload to cache
            ttl: Time to live, supplied by the caller
        """
        now = self._clock()
        entry = CacheEntry(key=key, value=value, created_at=now, expires_at=now + ttl)

        async with self._lock:
            if len(self._memory) >= self._max_size and key not in self._memory:
                self._evict_oldest()

            self._memory[key] = entry
            self._log(f"SET: {key[:50]} (TTL: {ttl.total_seconds()}s)")

    async def delete(self, key: str) -> bool:
        """Drop one key. Returns True if it was present."""
        async with self._lock:
            if key in self._memory:
                del self._memory[key]
                self._log(f"DELETE: {key[:50]}")
                return True
            return False

    async def clear(self) -> None:
        """Drop every entry."""
        async with self._lock:
            count = len(self._memory)
            self._memory.clear()
            self._log(f"CLEAR: {count} entries removed")

    async def cleanup_expired(self) -> int:
        """Sweep expired entries and return how many were dropped."""
        async with self._lock:
            now = self._clock()
            expired_keys = [k for k, v in self._memory.items() if v.is_expired(now)]
            for key in expired_keys:
                del self._memory[key]

            if expired_keys:
                self._log(f"CLEANUP: {len(expired_keys)} expired entries removed")

            return len(expired_keys)

    def _evict_oldest(self) -> None:
        """Evict the oldest entry. Caller holds the lock."""
        if not self._memory:
            return

        oldest_key = min(
            self._memory.keys(),
            key=lambda k: self._memory[k].created_at,
        )
        del self._memory[oldest_key]
        self._stats.evictions += 1
        self._log(f"EVICT: {oldest_key[:50]}")

    def __len__(self) -> int:
        return len(self._memory)

    def get_stats(self) -> "CacheStats":
        """Get cache statistics."""
        self._stats.size = len(self._memory)
        self._stats.max_size = self._max_size
        return self._stats

    def _log(self, message: str) -> None:
        """Emit a debug line when the cache was built with debug=True."""
        if self._debug:
            logger.debug(f"[CacheManager] {message}")


@dataclass
class CacheStats:
    """Hit, miss and eviction counters for a CacheManager."""

    hits: int = 0
    misses: int = 0
    evictions: int = 0
    size: int = 0
    max_size: int = 0

    @property
    def hit_rate(self) -> float:
        """Share of lookups served from the cache."""
        total = self.hits + self.misses
        if total == 0:
            return 0.0
        return self.hits / total

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "hits": self.hits,
            "misses": self.misses,
            "evictions": self.evictions,
            "size": self.size,
            "max_size": self.max_size,
            "hit_rate": f"{self.hit_rate:.2%}",
        }
