"""Core lock primitives."""

from .errors import LockStoreError, LockTimeoutError, StepLockError
from .factory import create_lock_manager
from .locks import LockStore
from .locks_memory import MemoryLockStore
from .locks_redis import RedisLockStore
from .manager import LockManager
from .models import LockOptions
from .registry import ActiveLockRegistry
from .settings import RedisSettings, StepLockSettings

__all__ = [
    "ActiveLockRegistry",
    "LockManager",
    "LockOptions",
    "LockStore",
    "LockStoreError",
    "LockTimeoutError",
    "MemoryLockStore",
    "RedisLockStore",
    "RedisSettings",
    "StepLockError",
    "StepLockSettings",
    "create_lock_manager",
]
