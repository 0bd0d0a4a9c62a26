"""
Redis implementation of the session store.

Every call runs under a deadline. Rotation is an optimistic
WATCH/MULTI/EXEC transaction so a refresh token can be consumed once.
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import Optional, TypeVar

from redis.asyncio import Redis
from redis.exceptions import RedisError, WatchError
from redis.exceptions import TimeoutError as RedisTimeoutError

from authcore.application.exceptions import StoreError, StoreTimeoutError


logger = logging.getLogger(__name__)

T = TypeVar("T")


def create_redis_client(url: str, max_connections: int = 10) -> Redis:
    """
    Create a Redis client returning ``str`` values.

    Args:
        url: Redis connection URL
        max_connections: Connection pool size

    Returns:
        Redis client
    """
    return Redis.from_url(url, decode_responses=True, max_connections=max_connections)


class RedisSessionStore:
    """Session store adapter backed by Redis."""

    def __init__(
        self,
        client: Redis,
        operation_timeout: float = 2.0,
        max_rotate_attempts: int = 3,
    ):
        """
        Initialize the store.

        Args:
            client: Redis client created with ``decode_responses=True``
            operation_timeout: Deadline in seconds for each store call
            max_rotate_attempts: Retries when a watched key changes mid-rotation
        """
        self._client = client
        self.operation_timeout = operation_timeout
        self.max_rotate_attempts = max_rotate_attempts

    async def _call(self, operation: str, func: Callable[[], Awaitable[T]]) -> T:
        try:
            async with asyncio.timeout(self.operation_timeout):
                return await func()
        except (TimeoutError, RedisTimeoutError) as e:
            logger.error("Redis %s timed out after %ss", operation, self.operation_timeout)
            raise StoreTimeoutError(store="redis") from e
        except RedisError as e:
            logger.error("Redis %s failed: %s", operation, e)
            raise StoreError(store="redis") from e

    async def set(self, key: str, value: str, ttl_seconds: int) -> None:
        await self._call("set", lambda: self._client.set(key, value, ex=ttl_seconds))

    async def get(self, key: str) -> Optional[str]:
        return await self._call("get", lambda: self._client.get(key))

    async def delete(self, *keys: str) -> int:
        if not keys:
            return 0
        return await self._call("delete", lambda: self._client.delete(*keys))

    async def rotate(
        self, old_key: str, new_key: str, value: str, ttl_seconds: int
    ) -> bool:
        """
        Replace ``old_key`` with ``new_key`` if ``old_key`` still holds ``value``.

        Returns:
            True if this call performed the rotation
        """

        async def _rotate() -> bool:
            async with self._client.pipeline(transaction=True) as pipe:
                for attempt in range(1, self.max_rotate_attempts + 1):
                    try:
                        await pipe.watch(old_key)
                        if await pipe.get(old_key) != value:
                            await pipe.unwatch()
                            return False
                        pipe.multi()
                        pipe.delete(old_key)
                        pipe.set(new_key, value, ex=ttl_seconds)
                        await pipe.execute()
                        return True
                    except WatchError:
                        logger.debug("Rotation of session key raced (attempt %d)", attempt)
                return False

        return await self._call("rotate", _rotate)

    async def ping(self) -> bool:
        return bool(await self._call("ping", self._client.ping))

    async def close(self) -> None:
        await self._client.aclose()
