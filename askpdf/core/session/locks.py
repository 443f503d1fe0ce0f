"""
Per-key asyncio locks.

Serializes read-modify-write sequences on one session's history (and
per-owner quota checks) within a single process. Entries are dropped once no
task holds or waits on them.

Dependencies: asyncio
System role: Session-level mutual exclusion
"""

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager


class SessionLockRegistry:
    """Registry of asyncio locks keyed by string."""

    def __init__(self) -> None:
        self._locks: dict[str, asyncio.Lock] = {}
        self._holders: dict[str, int] = {}

    @asynccontextmanager
    async def hold(self, key: str) -> AsyncIterator[None]:
        """
        Hold the lock for key for the duration of the block.

        Usage:
            async with registry.hold(session_id):
                history = await store.get(...)
                await store.set(...)
        """
        lock = self._locks.setdefault(key, asyncio.Lock())
        self._holders[key] = self._holders.get(key, 0) + 1
        try:
            async with lock:
                yield
        finally:
            self._holders[key] -= 1
            if self._holders[key] == 0:
                del self._holders[key]
                del self._locks[key]

    def is_locked(self, key: str) -> bool:
        lock = self._locks.get(key)
        return lock is not None and lock.locked()

    def __len__(self) -> int:
        return len(self._locks)
