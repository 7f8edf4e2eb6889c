"""Abstract interface for the store backing the locks."""

from __future__ import annotations

import abc
from typing import Iterable

from .models import LockValue


class LockStore(abc.ABC):
    """Atomic primitives the lock manager needs from a key-value store."""

    @abc.abstractmethod
    async def set_if_absent(self, key: str, value: LockValue, ttl_seconds: int) -> bool:  # pragma: no cover - interface
        """Create ``key`` with an expiry only if it does not exist yet."""
        raise NotImplementedError

    @abc.abstractmethod
    async def delete(self, key: str) -> bool:  # pragma: no cover - interface
        """Remove ``key``; return True if something was removed."""
        raise NotImplementedError

    @abc.abstractmethod
    async def delete_many(self, keys: Iterable[str]) -> int:  # pragma: no cover - interface
        """Remove every key in one call and return how many existed."""
        raise NotImplementedError

    async def close(self) -> None:
        """Optional hook releasing the underlying connection."""
