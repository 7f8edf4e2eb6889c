"""Exceptions raised by the lock manager."""

from __future__ import annotations


class StepLockError(Exception):
    """Base class for lock failures."""


class LockTimeoutError(StepLockError):
    """The lock could not be acquired before the wait deadline."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Steps lock failed: {name}")
        self.name = name


class LockStoreError(StepLockError):
    """The backing store could not be reached or rejected a command."""
