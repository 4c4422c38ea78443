"""Unit tests for the TTL cache."""

from datetime import timedelta

from flowdocs.services.cache import CacheManager

TTL = timedelta(minutes=30)


async def test_get_returns_value_set_before_expiry(cache):
    await cache.set("k", {"v": 1}, TTL)

    assert await cache.get("k") == {"v": 1}


async def test_get_returns_none_for_unknown_key(cache):
    assert await cache.get("missing") is None


async def test_entry_expires_after_ttl(cache, clock):
    await cache.set("k", "value", TTL)

    clock.advance(minutes=29, seconds=59)
    assert await cache.get("k") == "value"

    clock.advance(seconds=1)
    assert await cache.get("k") is None
    assert len(cache) == 0


async def test_set_overwrites_previous_entry(cache):
    await cache.set("k", "v1", TTL)
    await cache.set("k", "v2", TTL)

    assert await cache.get("k") == "v2"
    assert len(cache) == 1


async def test_overwrite_resets_expiry(cache, clock):
    await cache.set("k", "v1", timedelta(minutes=1))
    clock.advance(seconds=50)
    await cache.set("k", "v2", timedelta(minutes=1))
    clock.advance(seconds=50)

    assert await cache.get("k") == "v2"


async def test_delete_and_clear(cache):
    await cache.set("a", 1, TTL)
    await cache.set("b", 2, TTL)

    assert await cache.delete("a") is True
    assert await cache.delete("a") is False
    assert await cache.get("a") is None

    await cache.clear()
    assert await cache.get("b") is None
    assert len(cache) == 0


async def test_cleanup_expired_removes_only_stale_entries(cache, clock):
    await cache.set("short", 1, timedelta(minutes=1))
    await cache.set("long", 2, timedelta(minutes=60))
    clock.advance(minutes=5)

    assert await cache.cleanup_expired() == 1
    assert await cache.get("long") == 2


async def test_oldest_entry_evicted_at_capacity(clock):
    cache = CacheManager(max_size=2, clock=clock)
    await cache.set("first", 1, TTL)
    clock.advance(seconds=1)
    await cache.set("second", 2, TTL)
    clock.advance(seconds=1)
    await cache.set("third", 3, TTL)

    assert await cache.get("first") is None
    assert await cache.get("second") == 2
    assert await cache.get("third") == 3
    assert cache.get_stats().evictions == 1


async def test_stats_track_hits_and_misses(cache):
    await cache.set("k", "v", TTL)
    await cache.get("k")
    await cache.get("nope")

    stats = cache.get_stats()
    assert stats.hits == 1
    assert stats.misses == 1
    assert stats.hit_rate == 0.5
    assert stats.to_dict()["size"] == 1
