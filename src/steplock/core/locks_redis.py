"""Redis-backed lock store using SET NX EX semantics."""

from __future__ import annotations

import os
from typing import Iterable, Optional

from redis.asyncio import Redis
from redis.exceptions import RedisError

from .errors import LockStoreError
from .locks import LockStore
from .models import LockValue


DEFAULT_REDIS_URL = "redis://localhost:6379/0"


class RedisLockStore(LockStore):
    def __init__(
        self,
        url: Optional[str] = None,
        *,
        client: Optional[Redis] = None,
        key_prefix: str = "",
    ) -> None:
        if client is None:
            client = Redis.from_url(url or os.getenv("REDIS_URL", DEFAULT_REDIS_URL), decode_responses=True)
        self._redis = client
        self._prefix = key_prefix

    def _key(self, key: str) -> str:
        return f"{self._prefix}{key}"

    async def set_if_absent(self, key: str, value: LockValue, ttl_seconds: int) -> bool:
        try:
            created = await self._redis.set(self._key(key), value, nx=True, ex=ttl_seconds)
        except RedisError as exc:
            raise LockStoreError(f"SET NX failed for {key!r}: {exc}") from exc
        return bool(created)

    async def delete(self, key: str) -> bool:
        try:
            removed = await self._redis.delete(self._key(key))
        except RedisError as exc:
            raise LockStoreError(f"DEL failed for {key!r}: {exc}") from exc
        return bool(removed)

    async def delete_many(self, keys: Iterable[str]) -> int:
        names = [self._key(key) for key in keys]
        if not names:
            return 0
        try:
            return int(await self._redis.delete(*names))
        except RedisError as exc:
            raise LockStoreError(f"DEL failed for {len(names)} keys: {exc}") from exc

    async def close(self) -> None:
        await self._redis.aclose()
