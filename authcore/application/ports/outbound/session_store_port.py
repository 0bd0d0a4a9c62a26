"""Session store port interface."""

from typing import Optional, Protocol


class SessionStorePort(Protocol):
    """
    Key-value store with per-key TTL holding refresh sessions.

    Every call honours the adapter's operation deadline. Failures raise
    StoreError; a missed deadline raises StoreTimeoutError.
    """

    async def set(self, key: str, value: str, ttl_seconds: int) -> None:
        """
        Store a value that expires after ``ttl_seconds``.

        Args:
            key: Session key
            value: Bound value (the user id)
            ttl_seconds: Time to live in seconds
        """
        ...

    async def get(self, key: str) -> Optional[str]:
        """
        Read a value.

        Returns:
            The value, or None if the key is absent or expired
        """
        ...

    async def delete(self, *keys: str) -> int:
        """
        Delete keys. Deleting absent keys is not an error.

        Returns:
            Number of keys actually removed
        """
        ...

    async def rotate(
        self, old_key: str, new_key: str, value: str, ttl_seconds: int
    ) -> bool:
        """
        Atomically replace ``old_key`` with ``new_key``.

        The swap only happens if ``old_key`` still holds ``value``; of two
        concurrent rotations of the same key, exactly one returns True.

        Args:
            old_key: Key being consumed
            new_key: Key to create
            value: Value expected at ``old_key`` and written at ``new_key``
            ttl_seconds: TTL of the new key

        Returns:
            True if the rotation happened, False if ``old_key`` was gone
        """
        ...

    async def ping(self) -> bool:
        ...
