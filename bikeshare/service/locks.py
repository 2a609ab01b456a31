"""
Keyed Locks
-----------

The service checks the state of a bike or user before changing it.
To keep two coroutines from interleaving between the check and the
change, each operation holds a lock for the bike ids and emails it
touches.
"""

import asyncio
from contextlib import asynccontextmanager
from typing import Dict, Hashable


class KeyedLock:
    """
    A family of :class:`asyncio.Lock`, one per key.

    Locks are created on first use and dropped once nobody holds or awaits them.
    """

    def __init__(self):
        self._locks: Dict[Hashable, asyncio.Lock] = {}
        self._users: Dict[Hashable, int] = {}

    @asynccontextmanager
    async def hold(self, key: Hashable):
        lock = self._locks.setdefault(key, asyncio.Lock())
        self._users[key] = self._users.get(key, 0) + 1
        try:
            async with lock:
                yield
        finally:
            self._users[key] -= 1
            if not self._users[key]:
                del self._users[key]
                del self._locks[key]

    def is_locked(self, key: Hashable) -> bool:
        return key in self._locks and self._locks[key].locked()

    def __len__(self):
        return len(self._locks)
