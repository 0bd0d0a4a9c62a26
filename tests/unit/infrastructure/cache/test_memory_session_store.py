"""Unit tests for InMemorySessionStore."""

import asyncio

import pytest

from authcore.infrastructure.adapters.outbound.cache.memory_session_store import InMemorySessionStore


class FakeClock:
    def __init__(self):
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def store(clock):
    return InMemorySessionStore(clock=clock)


class TestInMemorySessionStore:
    """Test the in-process store."""

    @pytest.mark.asyncio
    async def test_set_get(self, store):
        await store.set("k", "v", 10)
        assert await store.get("k") == "v"
        assert len(store) == 1

    @pytest.mark.asyncio
    async def test_expiry(self, store, clock):
        """Test a key disappears once its TTL elapses."""
        await store.set("k", "v", 10)

        clock.now += 9.9
        assert await store.get("k") == "v"

        clock.now += 0.1
        assert await store.get("k") is None
        assert len(store) == 0

    @pytest.mark.asyncio
    async def test_delete(self, store, clock):
        await store.set("a", "1", 10)
        await store.set("b", "2", 1)
        clock.now += 5

        # b already expired so only a counts
        assert await store.delete("a", "b", "c") == 1

    @pytest.mark.asyncio
    async def test_rotate(self, store, clock):
        await store.set("old", "user-1", 10)
        clock.now += 5

        assert await store.rotate("old", "new", "user-1", 10) is True
        assert await store.get("old") is None

        clock.now += 9
        assert await store.get("new") == "user-1"

    @pytest.mark.asyncio
    async def test_rotate_expired_key(self, store, clock):
        await store.set("old", "user-1", 10)
        clock.now += 10

        assert await store.rotate("old", "new", "user-1", 10) is False

    @pytest.mark.asyncio
    async def test_rotate_value_mismatch(self, store):
        await store.set("old", "user-2", 10)
        assert await store.rotate("old", "new", "user-1", 10) is False

    @pytest.mark.asyncio
    async def test_concurrent_rotations_single_winner(self, store):
        await store.set("old", "user-1", 10)

        results = await asyncio.gather(
            *(store.rotate("old", f"new-{i}", "user-1", 10) for i in range(5))
        )

        assert results.count(True) == 1

    @pytest.mark.asyncio
    async def test_ping_and_close(self, store):
        await store.set("k", "v", 10)
        assert await store.ping() is True

        await store.close()
        assert len(store) == 0
