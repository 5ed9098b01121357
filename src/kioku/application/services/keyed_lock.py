"""Per-key mutual exclusion for asyncio tasks."""

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager


class KeyedLock:
    """Lock table keyed by string.

    Tasks that acquire the same key run one at a time, in arrival
    order; tasks with different keys never wait on each other.
    A key's lock is dropped once no task holds or waits for it.
    """

    def __init__(self) -> None:
        """Initialize an empty lock table."""
        self._locks: dict[str, asyncio.Lock] = {}
        # Number of tasks holding or waiting for each key
        self._users: dict[str, int] = {}

    @asynccontextmanager
    async def acquire(self, key: str) -> AsyncIterator[None]:
        """Hold the lock for key while the block runs.

        Args:
            key: Serialization key (e.g. a channel ID or user ID).
        """
        lock = self._locks.get(key)
        if lock is None:
            lock = asyncio.Lock()
            self._locks[key] = lock
        self._users[key] = self._users.get(key, 0) + 1
        try:
            async with lock:
                yield
        finally:
            self._users[key] -= 1
            if self._users[key] == 0:
                del self._users[key]
                del self._locks[key]

    def locked(self, key: str) -> bool:
        """Check whether a task currently holds key."""
        lock = self._locks.get(key)
        return lock is not None and lock.locked()

    def __len__(self) -> int:
        """Number of keys currently held or waited on."""
        return len(self._locks)
