"""
Factories building the infrastructure adapters from settings.

Each factory is called once at startup; the results are kept on
``app.state`` and shared by all requests.
"""

from authcore.application.ports.outbound.session_store_port import SessionStorePort
from authcore.infrastructure.adapters.outbound.cache.memory_session_store import (
    InMemorySessionStore,
)
from authcore.infrastructure.adapters.outbound.cache.redis_session_store import (
    RedisSessionStore,
    create_redis_client,
)
from authcore.infrastructure.config.database import DatabaseConfig
from authcore.infrastructure.config.settings import Settings
from authcore.infrastructure.security.jwt_token_issuer import JWTTokenIssuer
from authcore.infrastructure.security.password_hasher import Argon2PasswordHasher


def create_database_config(settings: Settings) -> DatabaseConfig:
    return DatabaseConfig(
        settings.database_url_str,
        echo=settings.debug,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        pool_timeout=settings.db_pool_timeout,
        pool_recycle=settings.db_pool_recycle,
        pool_pre_ping=settings.db_pool_pre_ping,
        command_timeout=settings.db_command_timeout,
    )


def create_session_store(settings: Settings) -> SessionStorePort:
    """
    Build the configured session store backend.

    Args:
        settings: Application settings

    Returns:
        Redis-backed store, or the in-process store when configured
    """
    if settings.session_store_backend == "memory":
        return InMemorySessionStore()

    client = create_redis_client(settings.redis_url_str, settings.redis_max_connections)
    return RedisSessionStore(client, operation_timeout=settings.redis_operation_timeout)


def create_password_hasher(settings: Settings) -> Argon2PasswordHasher:
    return Argon2PasswordHasher(
        time_cost=settings.argon2_time_cost,
        memory_cost=settings.argon2_memory_cost,
        parallelism=settings.argon2_parallelism,
    )


def create_token_issuer(settings: Settings) -> JWTTokenIssuer:
    return JWTTokenIssuer(settings.token_issuer_config())
