"""
Unit tests for InMemoryCache.
"""

import pytest

from cftools_client.caching import InMemoryCache


class FakeClock:
    def __init__(self, now: float = 0.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


class TestInMemoryCache:
    """Test cases for InMemoryCache."""

    @pytest.fixture
    def clock(self):
        return FakeClock()

    @pytest.fixture
    def cache(self, clock):
        return InMemoryCache(clock=clock)

    def test_set_and_get(self, cache):
        cache.set("key", "value", 10)

        assert cache.get("key") == "value"
        assert cache.contains("key")
        assert "key" in cache

    def test_get_missing_key(self, cache):
        assert cache.get("nonexistent") is None
        assert cache.get("nonexistent", "fallback") == "fallback"
        assert not cache.contains("nonexistent")

    def test_none_is_a_stored_value(self, cache):
        """A stored None is distinguishable from absence."""
        marker = object()
        cache.set("key", None, 10)

        assert cache.get("key", marker) is None
        assert cache.contains("key")

    def test_entry_expires_after_ttl(self, cache, clock):
        cache.set("key", "value", 10)

        clock.now = 10
        assert cache.get("key") == "value"

        clock.now = 10.5
        assert cache.get("key") is None
        assert not cache.contains("key")
        assert len(cache) == 0

    def test_set_overwrites_and_resets_expiry(self, cache, clock):
        cache.set("key", "old", 10)
        clock.now = 8
        cache.set("key", "new", 10)
        clock.now = 15

        assert cache.get("key") == "new"

    def test_zero_ttl_expires_on_next_tick(self, cache, clock):
        cache.set("key", "value", 0)
        assert cache.get("key") == "value"

        clock.now = 0.001
        assert cache.get("key") is None

    def test_delete_and_clear(self, cache):
        cache.set("a", 1, 10)
        cache.set("b", 2, 10)

        assert cache.delete("a") is True
        assert cache.delete("a") is False
        assert len(cache) == 1

        cache.clear()
        assert len(cache) == 0

    def test_purge_expired(self, cache, clock):
        cache.set("short", 1, 5)
        cache.set("long", 2, 50)

        clock.now = 10
        assert cache.purge_expired() == 1
        assert len(cache) == 1
        assert cache.get("long") == 2

    def test_default_clock(self):
        cache = InMemoryCache()
        cache.set("key", "value", 60)

        assert cache.get("key") == "value"
