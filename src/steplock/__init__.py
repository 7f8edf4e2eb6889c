"""Named locks with polling acquire and expiry, backed by Redis."""

from .core import (
    ActiveLockRegistry,
    LockManager,
    LockOptions,
    LockStore,
    LockStoreError,
    LockTimeoutError,
    MemoryLockStore,
    RedisLockStore,
    StepLockError,
    StepLockSettings,
    create_lock_manager,
)

__all__ = [
    "__version__",
    "ActiveLockRegistry",
    "LockManager",
    "LockOptions",
    "LockStore",
    "LockStoreError",
    "LockTimeoutError",
    "MemoryLockStore",
    "RedisLockStore",
    "StepLockError",
    "StepLockSettings",
    "create_lock_manager",
]

__version__ = "0.1.0"
