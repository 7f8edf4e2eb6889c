from __future__ import annotations

import asyncio
from typing import Iterable, List

import pytest

from steplock.core.errors import LockStoreError
from steplock.core.locks_memory import MemoryLockStore


class FakeClock:
    """Monotonic clock advanced only by the manager's sleeps."""

    def __init__(self) -> None:
        self.now = 0.0
        self.sleeps: List[float] = []

    def __call__(self) -> float:
        return self.now

    async def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds
        await asyncio.sleep(0)


class RecordingStore(MemoryLockStore):
    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self.set_calls: List[str] = []
        self.set_results: List[bool] = []
        self.deleted: List[str] = []
        self.batches: List[List[str]] = []
        self.fail_delete = False
        self.fail_set = False
        self.closed = False

    async def set_if_absent(self, key, value, ttl_seconds):
        self.set_calls.append(key)
        if self.fail_set:
            raise LockStoreError("connection refused")
        ok = await super().set_if_absent(key, value, ttl_seconds)
        self.set_results.append(ok)
        return ok

    async def delete(self, key):
        if self.fail_delete:
            raise LockStoreError("connection refused")
        self.deleted.append(key)
        return await super().delete(key)

    async def delete_many(self, keys: Iterable[str]) -> int:
        if self.fail_delete:
            raise LockStoreError("connection refused")
        keys = list(keys)
        self.batches.append(keys)
        return await super().delete_many(keys)

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def store(clock: FakeClock) -> RecordingStore:
    return RecordingStore(clock=clock)


@pytest.fixture
def recording_store_factory():
    return RecordingStore
