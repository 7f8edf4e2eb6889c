"""Named locks over a shared store: polling acquire, scoped release, shutdown cleanup."""

from __future__ import annotations

import asyncio
import inspect
import logging
import time
from contextlib import asynccontextmanager
from typing import (
    AsyncIterator,
    Awaitable,
    Callable,
    Iterator,
    Optional,
    Sequence,
    TypeVar,
    Union,
)

from steplock.core.errors import LockTimeoutError
from steplock.core.locks import LockStore
from steplock.core.models import LockOptions, LockValue
from steplock.core.registry import ActiveLockRegistry
from steplock.utils.logging import get_logger


T = TypeVar("T")

Clock = Callable[[], float]
Sleep = Callable[[float], Awaitable[None]]
Work = Callable[[], Union[T, Awaitable[T]]]

CLEANUP_CHUNK_SIZE = 1000


def chunked(items: Sequence[str], size: int = CLEANUP_CHUNK_SIZE) -> Iterator[Sequence[str]]:
    for start in range(0, len(items), size):
        yield items[start : start + size]


class LockManager:
    """Mutual exclusion keyed by name, arbitrated entirely by the store.

    Acquisition polls ``set_if_absent`` every ``lock_sleep`` milliseconds until
    it succeeds or ``timeout`` milliseconds have passed. Every record carries an
    ``expire`` TTL so a crashed holder cannot block others forever. There is no
    in-process fast path: two calls in the same process race through the store
    exactly like calls from different processes.
    """

    def __init__(
        self,
        store: LockStore,
        options: Optional[LockOptions] = None,
        *,
        registry: Optional[ActiveLockRegistry] = None,
        clock: Clock = time.monotonic,
        sleep: Sleep = asyncio.sleep,
        cleanup_timeout: Optional[float] = 5.0,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.store = store
        self.options = options or LockOptions()
        self.registry = registry if registry is not None else ActiveLockRegistry()
        self.cleanup_timeout = cleanup_timeout
        self.logger = logger or get_logger("LockManager")
        self._clock = clock
        self._sleep = sleep

    async def __aenter__(self) -> "LockManager":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    async def try_acquire(self, name: str, expire: int, value: LockValue) -> Optional[LockValue]:
        """Single attempt. Returns ``value`` when the lock was taken, else None."""
        if await self.store.set_if_absent(name, value, expire):
            return value
        return None

    async def acquire(
        self, name: str, expire: int, timeout: int, value: LockValue
    ) -> Optional[LockValue]:
        """Poll until the lock is taken or ``timeout`` ms elapse.

        A ``timeout`` of zero or less makes exactly one attempt.
        """
        deadline = self._clock() + timeout / 1000.0
        interval = self.options.lock_sleep / 1000.0
        while True:
            token = await self.try_acquire(name, expire, value)
            if token is not None:
                return token
            if self._clock() >= deadline:
                return None
            await self._sleep(interval)

    async def release(self, name: str) -> bool:
        """Delete the lock record; False when nothing was held under ``name``."""
        try:
            return await self.store.delete(name)
        finally:
            self.registry.remove(name)

    @asynccontextmanager
    async def lock(
        self,
        name: str,
        expire: Optional[int] = None,
        timeout: Optional[int] = None,
        value: Optional[LockValue] = None,
    ) -> AsyncIterator[LockValue]:
        """Hold ``name`` for the duration of the ``async with`` block.

        Raises :class:`LockTimeoutError` without entering the block when the
        lock is not obtained in time. The record is deleted on every exit path.
        """
        if not isinstance(name, str) or not name:
            raise ValueError("lock name must be a non-empty string")
        opts = self.options.resolve(expire=expire, timeout=timeout, value=value)

        token = await self.acquire(name, opts.expire, opts.timeout, opts.value)
        if token is None:
            self.logger.warning("Lock %s not acquired within %d ms", name, opts.timeout)
            raise LockTimeoutError(name)

        self.registry.add(name)
        self.logger.debug("Acquired lock %s (expire=%ds)", name, opts.expire)
        try:
            yield token
        finally:
            await self._release_quietly(name)

    async def with_lock(
        self,
        name: str,
        work: Work[T],
        expire: Optional[int] = None,
        timeout: Optional[int] = None,
        value: Optional[LockValue] = None,
    ) -> T:
        """Run ``work()`` while holding ``name`` and return its result unchanged."""
        async with self.lock(name, expire=expire, timeout=timeout, value=value):
            result = work()
            if inspect.isawaitable(result):
                result = await result
            return result

    async def _release_quietly(self, name: str) -> None:
        # the TTL still bounds the record if this delete fails
        try:
            removed = await self.store.delete(name)
        except Exception as exc:
            self.logger.warning("Failed to release lock %s: %s", name, exc)
        else:
            if removed:
                self.logger.debug("Released lock %s", name)
            else:
                self.logger.debug("Lock %s had already expired", name)
        finally:
            self.registry.remove(name)

    async def remove_locks(self) -> int:
        """Delete every lock still registered as held. Returns the number removed.

        Batches still running after ``cleanup_timeout`` are cancelled and their
        names stay registered; the TTL bounds those records.
        """
        names = self.registry.snapshot()
        if not names:
            return 0
        batches = list(chunked(names))
        self.logger.info("Removing %d active locks in %d batches", len(names), len(batches))
        tasks = [asyncio.create_task(self.store.delete_many(batch)) for batch in batches]
        done, pending = await asyncio.wait(tasks, timeout=self.cleanup_timeout)
        if pending:
            for task in pending:
                task.cancel()
            await asyncio.gather(*pending, return_exceptions=True)
            self.logger.warning(
                "Timed out removing active locks after %ss (%d of %d batches unfinished)",
                self.cleanup_timeout,
                len(pending),
                len(tasks),
            )

        removed = 0
        for batch, task in zip(batches, tasks):
            if task not in done:
                continue
            exc = task.exception()
            if exc is not None:
                self.logger.warning("Failed to remove %d locks: %s", len(batch), exc)
                continue
            removed += task.result()
            for name in batch:
                self.registry.remove(name)
        return removed

    async def close(self) -> None:
        """Clean up held locks, then close the store connection."""
        try:
            await self.remove_locks()
        finally:
            await self.store.close()
