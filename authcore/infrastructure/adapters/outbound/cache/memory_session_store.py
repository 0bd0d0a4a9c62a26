"""In-process session store, for development and tests."""

import asyncio
import time
from collections.abc import Callable
from typing import Optional


class InMemorySessionStore:
    """
    Session store adapter keeping keys in a dict.

    Expiry is checked lazily on access. All mutations run under one lock,
    which makes ``rotate`` atomic within the process.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._data: dict[str, tuple[str, float]] = {}
        self._lock = asyncio.Lock()
        self._clock = clock

    def _live(self, key: str) -> Optional[str]:
        entry = self._data.get(key)
        if entry is None:
            return None
        value, expires_at = entry
        if self._clock() >= expires_at:
            del self._data[key]
            return None
        return value

    async def set(self, key: str, value: str, ttl_seconds: int) -> None:
        async with self._lock:
            self._data[key] = (value, self._clock() + ttl_seconds)

    async def get(self, key: str) -> Optional[str]:
        async with self._lock:
            return self._live(key)

    async def delete(self, *keys: str) -> int:
        async with self._lock:
            removed = 0
            for key in keys:
                if self._live(key) is not None:
                    del self._data[key]
                    removed += 1
            return removed

    async def rotate(
        self, old_key: str, new_key: str, value: str, ttl_seconds: int
    ) -> bool:
        async with self._lock:
            if self._live(old_key) != value:
                return False
            del self._data[old_key]
            self._data[new_key] = (value, self._clock() + ttl_seconds)
            return True

    async def ping(self) -> bool:
        return True

    async def close(self) -> None:
        self._data.clear()

    def __len__(self) -> int:
        return sum(1 for key in list(self._data) if self._live(key) is not None)
