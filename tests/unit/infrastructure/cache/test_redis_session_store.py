"""
Unit tests for RedisSessionStore.

They use fakeredis so they run entirely in-memory; backend failures are
simulated with a mocked client.
"""

import asyncio
from unittest.mock import AsyncMock, Mock

import fakeredis
import pytest
from redis.exceptions import ConnectionError as RedisConnectionError
from redis.exceptions import TimeoutError as RedisTimeoutError

from authcore.application.exceptions import StoreError, StoreTimeoutError
from authcore.infrastructure.adapters.outbound.cache.redis_session_store import RedisSessionStore


@pytest.fixture
def redis_client():
    return fakeredis.FakeAsyncRedis(decode_responses=True)


@pytest.fixture
def store(redis_client):
    return RedisSessionStore(redis_client, operation_timeout=1.0)


class TestBasicOperations:
    """Test set / get / delete against fakeredis."""

    @pytest.mark.asyncio
    async def test_set_and_get(self, store, redis_client):
        await store.set("k", "user-1", ttl_seconds=60)

        assert await store.get("k") == "user-1"
        ttl = await redis_client.ttl("k")
        assert 0 < ttl <= 60

    @pytest.mark.asyncio
    async def test_get_missing(self, store):
        assert await store.get("missing") is None

    @pytest.mark.asyncio
    async def test_delete_counts_removed_keys(self, store):
        await store.set("a", "1", 60)
        await store.set("b", "2", 60)

        assert await store.delete("a", "b", "c") == 2
        assert await store.get("a") is None

    @pytest.mark.asyncio
    async def test_delete_without_keys(self, store):
        assert await store.delete() == 0

    @pytest.mark.asyncio
    async def test_ping(self, store):
        assert await store.ping() is True


class TestRotate:
    """Test the WATCH/MULTI/EXEC rotation."""

    @pytest.mark.asyncio
    async def test_rotate_moves_binding(self, store, redis_client):
        await store.set("old", "user-1", 60)

        assert await store.rotate("old", "new", "user-1", 120) is True

        assert await store.get("old") is None
        assert await store.get("new") == "user-1"
        assert 60 < await redis_client.ttl("new") <= 120

    @pytest.mark.asyncio
    async def test_rotate_missing_key(self, store):
        assert await store.rotate("old", "new", "user-1", 60) is False
        assert await store.get("new") is None

    @pytest.mark.asyncio
    async def test_rotate_value_mismatch(self, store):
        """Test a key bound to another user is left untouched."""
        await store.set("old", "user-2", 60)

        assert await store.rotate("old", "new", "user-1", 60) is False
        assert await store.get("old") == "user-2"

    @pytest.mark.asyncio
    async def test_second_rotation_fails(self, store):
        await store.set("old", "user-1", 60)

        assert await store.rotate("old", "new-1", "user-1", 60) is True
        assert await store.rotate("old", "new-2", "user-1", 60) is False
        assert await store.get("new-2") is None

    @pytest.mark.asyncio
    async def test_concurrent_rotations_single_winner(self, store):
        await store.set("old", "user-1", 60)

        results = await asyncio.gather(
            store.rotate("old", "new-1", "user-1", 60),
            store.rotate("old", "new-2", "user-1", 60),
        )

        assert sorted(results) == [False, True]


class TestFailures:
    """Test backend failures are wrapped."""

    @pytest.mark.asyncio
    async def test_connection_error(self):
        client = Mock()
        client.get = AsyncMock(side_effect=RedisConnectionError("connection refused"))
        store = RedisSessionStore(client)

        with pytest.raises(StoreError) as exc_info:
            await store.get("k")

        assert exc_info.value.details == {"store": "redis"}
        assert "connection refused" not in exc_info.value.message

    @pytest.mark.asyncio
    async def test_redis_timeout(self):
        client = Mock()
        client.set = AsyncMock(side_effect=RedisTimeoutError())
        store = RedisSessionStore(client)

        with pytest.raises(StoreTimeoutError):
            await store.set("k", "v", 60)

    @pytest.mark.asyncio
    async def test_deadline_exceeded(self):
        """Test a call slower than the deadline raises StoreTimeoutError."""

        async def slow_get(key):
            await asyncio.sleep(1)

        client = Mock()
        client.get = slow_get
        store = RedisSessionStore(client, operation_timeout=0.01)

        with pytest.raises(StoreTimeoutError):
            await store.get("k")

    @pytest.mark.asyncio
    async def test_ping_failure(self):
        client = Mock()
        client.ping = AsyncMock(side_effect=RedisConnectionError())
        store = RedisSessionStore(client)

        with pytest.raises(StoreError):
            await store.ping()
