"""Tests for InMemoryCacheStore."""

from datetime import timedelta

import pytest

from productcache import CacheConfig, CacheStoreError, ExpirationPolicy
from productcache.infrastructure.backends.memory import InMemoryCacheStore


class TestInMemoryCacheStore:
    """Tests for basic store operations."""

    @pytest.fixture
    def store(self, clock) -> InMemoryCacheStore:
        """Create a store driven by the fake clock."""
        return InMemoryCacheStore(maxsize=100, stripes=4, timer=clock)

    async def test_set_and_get(self, store: InMemoryCacheStore) -> None:
        """Test basic set and get operations."""
        await store.set("key1", {"id": 1})
        result = await store.get("key1")
        assert result == {"id": 1}

    async def test_get_missing_key(self, store: InMemoryCacheStore) -> None:
        """Test getting a missing key returns None."""
        assert await store.get("nonexistent") is None

    async def test_overwrite(self, store: InMemoryCacheStore) -> None:
        """Test that set overwrites an existing value."""
        await store.set("key1", "old")
        await store.set("key1", "new")

        assert await store.get("key1") == "new"
        assert len(store) == 1

    async def test_delete(self, store: InMemoryCacheStore) -> None:
        """Test deleting a key."""
        await store.set("key1", "value1")

        assert await store.delete("key1") is True
        assert await store.get("key1") is None

        # Deleting again is a no-op
        assert await store.delete("key1") is False

    async def test_delete_missing_key(self, store: InMemoryCacheStore) -> None:
        """Test deleting a key that was never set."""
        assert await store.delete("never-set") is False

    async def test_exists(self, store: InMemoryCacheStore) -> None:
        """Test checking if key exists."""
        await store.set("key1", "value1")

        assert await store.exists("key1") is True
        assert await store.exists("nonexistent") is False

    async def test_typed_get(self, store: InMemoryCacheStore) -> None:
        """Test that a value of the wrong type reads as absent."""
        await store.set("key1", "a string")

        assert await store.get("key1", int) is None
        assert await store.get("key1", str) == "a string"
        assert store.stats["misses"] == 1
        assert store.stats["hits"] == 1

    async def test_clear(self, store: InMemoryCacheStore) -> None:
        """Test clearing all keys."""
        await store.set("key1", 1)
        await store.set("key2", 2)
        await store.get("key1")

        await store.clear()

        assert len(store) == 0
        assert store.stats == {"hits": 0, "misses": 0, "total": 0, "entries": 0}

    async def test_stats(self, store: InMemoryCacheStore) -> None:
        """Test hit and miss accounting."""
        await store.set("key1", 1)
        await store.get("key1")
        await store.get("key1")
        await store.get("key2")

        assert store.stats == {"hits": 2, "misses": 1, "total": 3, "entries": 1}

    async def test_lru_eviction(self, clock) -> None:
        """Test LRU eviction when maxsize is reached."""
        store = InMemoryCacheStore(maxsize=3, stripes=1, timer=clock)

        await store.set("key1", 1)
        await store.set("key2", 2)
        await store.set("key3", 3)

        # Access key1 to make it recently used
        await store.get("key1")

        # Add key4, should evict key2 (least recently used)
        await store.set("key4", 4)

        assert await store.get("key1") == 1
        assert await store.get("key2") is None
        assert await store.get("key3") == 3
        assert await store.get("key4") == 4

    async def test_value_too_large(self, clock) -> None:
        """Test that a value bigger than the store can hold is rejected."""
        store = InMemoryCacheStore(maxsize=8, stripes=1, timer=clock, getsizeof=len)
        await store.set("small", "abc")

        with pytest.raises(CacheStoreError):
            await store.set("big", "x" * 100)

        assert await store.get("big") is None
        assert await store.get("small") == "abc"

    async def test_getsizeof_bounds_total_size(self, clock) -> None:
        """Test that eviction honours value sizes rather than entry counts."""
        store = InMemoryCacheStore(maxsize=10, stripes=1, timer=clock, getsizeof=len)

        await store.set("a", "xxxx")
        await store.set("b", "yyyy")
        await store.set("c", "zzzz")

        assert await store.get("a") is None
        assert await store.get("b") == "yyyy"
        assert await store.get("c") == "zzzz"

    def test_from_config(self) -> None:
        """Test building a store from configuration."""
        config = CacheConfig(max_size=500, sliding_expiration=timedelta(seconds=5))
        store = InMemoryCacheStore.from_config(config)

        assert store.maxsize == 500
        assert store.default_policy == config.policy

    @pytest.mark.parametrize("kwargs", [{"maxsize": 0}, {"stripes": 0}])
    def test_invalid_sizes(self, kwargs: dict[str, int]) -> None:
        """Test that non-positive sizes are rejected."""
        with pytest.raises(ValueError):
            InMemoryCacheStore(**kwargs)


class TestExpiration:
    """Tests for sliding and absolute expiration."""

    @pytest.fixture
    def store(self, clock) -> InMemoryCacheStore:
        """Create a store with the default 5 min / 1 h policy."""
        return InMemoryCacheStore(timer=clock)

    async def test_sliding_expiration(self, store: InMemoryCacheStore, clock) -> None:
        """Test that an entry unread for the sliding window is gone."""
        await store.set("key1", "value1")

        clock.advance(minutes=6)

        assert await store.get("key1") is None
        assert await store.exists("key1") is False

    async def test_reads_keep_entry_alive(
        self, store: InMemoryCacheStore, clock
    ) -> None:
        """Test that each read restarts the sliding window."""
        await store.set("key1", "value1")

        for _ in range(5):
            clock.advance(minutes=4)
            assert await store.get("key1") == "value1"

    async def test_exists_does_not_refresh(
        self, store: InMemoryCacheStore, clock
    ) -> None:
        """Test that exists does not count as a read."""
        await store.set("key1", "value1")

        clock.advance(minutes=4)
        assert await store.exists("key1") is True
        clock.advance(minutes=2)

        assert await store.get("key1") is None

    async def test_absolute_expiration(self, store: InMemoryCacheStore, clock) -> None:
        """Test that the absolute ceiling fires despite regular reads."""
        await store.set("key1", "value1")

        for _ in range(14):
            clock.advance(minutes=4)
            assert await store.get("key1") == "value1"

        # 60.5 minutes since creation, 4.5 since the last read
        clock.advance(minutes=4.5)
        assert await store.get("key1") is None

    async def test_set_resets_timers(self, store: InMemoryCacheStore, clock) -> None:
        """Test that overwriting an entry restarts both timers."""
        await store.set("key1", "old")
        clock.advance(minutes=55)
        await store.set("key1", "new")

        clock.advance(minutes=4)
        assert await store.get("key1") == "new"
        clock.advance(minutes=4)
        assert await store.get("key1") == "new"

    async def test_per_entry_policy(self, store: InMemoryCacheStore, clock) -> None:
        """Test entries with their own policies expire independently."""
        short = ExpirationPolicy(absolute=timedelta(seconds=10))
        await store.set("short", 1, short)
        await store.set("default", 2)

        clock.advance(seconds=11)

        assert await store.get("short") is None
        assert await store.get("default") == 2

    async def test_delete_expired_entry(self, store: InMemoryCacheStore, clock) -> None:
        """Test that deleting an expired entry reports nothing removed."""
        await store.set("key1", "value1")
        clock.advance(minutes=10)

        assert await store.delete("key1") is False

    async def test_purge_expired(self, store: InMemoryCacheStore, clock) -> None:
        """Test eager sweeping of sliding and absolute expirations."""
        await store.set("idle", 1)
        await store.set("old", 2, ExpirationPolicy(absolute=timedelta(seconds=30)))
        await store.set("fresh", 3, ExpirationPolicy(sliding=timedelta(hours=2)))

        clock.advance(minutes=6)
        removed = await store.purge_expired()

        assert removed == 2
        assert len(store) == 1
        assert await store.get("fresh") == 3

    async def test_purge_counts_absolute_expirations(
        self, store: InMemoryCacheStore, clock
    ) -> None:
        """Test that entries past their absolute ceiling are all counted."""
        policy = ExpirationPolicy(absolute=timedelta(seconds=30))
        for i in range(5):
            await store.set(f"key{i}", i, policy)

        clock.advance(seconds=31)

        assert await store.purge_expired() == 5
        assert await store.purge_expired() == 0
        assert len(store) == 0

    async def test_len_excludes_expired(self, store: InMemoryCacheStore, clock) -> None:
        """Test that len only counts live entries."""
        await store.set("key1", 1)
        await store.set("key2", 2, ExpirationPolicy(sliding=timedelta(hours=1)))

        clock.advance(minutes=6)

        assert len(store) == 1
