"""Build a Redis-backed lock manager from settings."""

from __future__ import annotations

from typing import Optional

from steplock.core.locks_redis import RedisLockStore
from steplock.core.manager import LockManager
from steplock.core.settings import StepLockSettings


def create_lock_manager(settings: Optional[StepLockSettings] = None, **kwargs) -> LockManager:
    """Connect to the configured Redis and wrap it in a :class:`LockManager`.

    Extra keyword arguments are passed to the manager (``registry``, ``clock``...).
    """
    settings = settings or StepLockSettings()
    store = RedisLockStore(settings.redis.url, key_prefix=settings.redis.key_prefix)
    return LockManager(store, settings.lock, **kwargs)
