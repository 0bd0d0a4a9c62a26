"""Session store adapters."""

from authcore.infrastructure.adapters.outbound.cache.memory_session_store import InMemorySessionStore
from authcore.infrastructure.adapters.outbound.cache.redis_session_store import (
    RedisSessionStore,
    create_redis_client,
)

__all__ = ["InMemorySessionStore", "RedisSessionStore", "create_redis_client"]
