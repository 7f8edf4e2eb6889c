"""Process-local lock store with TTL support."""

from __future__ import annotations

import time
from typing import Callable, Dict, Iterable, Optional, Tuple

from .locks import LockStore
from .models import LockValue


Clock = Callable[[], float]


class MemoryLockStore(LockStore):
    """Dictionary store honouring expiry; only exclusive within one process."""

    def __init__(self, *, clock: Clock = time.monotonic) -> None:
        self._clock = clock
        self._entries: Dict[str, Tuple[LockValue, float]] = {}

    def _alive(self, key: str) -> bool:
        entry = self._entries.get(key)
        if entry is None:
            return False
        if entry[1] <= self._clock():
            del self._entries[key]
            return False
        return True

    def get(self, key: str) -> Optional[LockValue]:
        return self._entries[key][0] if self._alive(key) else None

    def __contains__(self, key: str) -> bool:
        return self._alive(key)

    async def set_if_absent(self, key: str, value: LockValue, ttl_seconds: int) -> bool:
        if self._alive(key):
            return False
        self._entries[key] = (value, self._clock() + ttl_seconds)
        return True

    async def delete(self, key: str) -> bool:
        if not self._alive(key):
            return False
        del self._entries[key]
        return True

    async def delete_many(self, keys: Iterable[str]) -> int:
        removed = 0
        for key in keys:
            if await self.delete(key):
                removed += 1
        return removed
