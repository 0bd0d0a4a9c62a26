"""Refresh session bookkeeping on top of the session store."""

import logging
from typing import Optional
from uuid import UUID

from authcore.application.ports.outbound.session_store_port import SessionStorePort


logger = logging.getLogger(__name__)


class SessionKeyBuilder:
    """Builds namespaced session store keys."""

    def __init__(self, prefix: str):
        self.prefix = prefix

    def refresh_token(self, token: str) -> str:
        return f"{self.prefix}:refresh_token:{token}"


class RefreshSessions:
    """
    Refresh-token liveness.

    A refresh token is live exactly while ``<prefix>:refresh_token:<token>``
    exists in the session store, bound to the user id, with a TTL equal to
    the refresh token lifetime.
    """

    def __init__(self, store: SessionStorePort, keys: SessionKeyBuilder, ttl_seconds: int):
        """
        Initialize the session bookkeeper.

        Args:
            store: Session store adapter
            keys: Key builder
            ttl_seconds: Lifetime of a session (refresh token TTL)
        """
        self.store = store
        self.keys = keys
        self.ttl_seconds = ttl_seconds

    async def register(self, refresh_token: str, user_id: UUID) -> None:
        await self.store.set(self.keys.refresh_token(refresh_token), str(user_id), self.ttl_seconds)

    async def lookup(self, refresh_token: str) -> Optional[str]:
        """Return the bound user id, or None if the session is gone."""
        return await self.store.get(self.keys.refresh_token(refresh_token))

    async def rotate(self, old_token: str, new_token: str, user_id: UUID) -> bool:
        """
        Consume ``old_token`` and register ``new_token`` in one atomic step.

        Returns:
            False if another caller consumed ``old_token`` first
        """
        rotated = await self.store.rotate(
            self.keys.refresh_token(old_token),
            self.keys.refresh_token(new_token),
            str(user_id),
            self.ttl_seconds,
        )
        if not rotated:
            logger.warning("Refresh session for user %s was already consumed", user_id)
        return rotated

    async def revoke(self, refresh_token: str) -> bool:
        """Delete the session. Returns True if a session was removed."""
        return await self.store.delete(self.keys.refresh_token(refresh_token)) > 0
