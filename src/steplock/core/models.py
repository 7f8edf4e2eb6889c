"""Data models shared across the lock manager."""

from __future__ import annotations

from typing import Optional, Union

from pydantic import BaseModel, Field


LockValue = Union[str, bytes, int, float]

DEFAULT_LOCK_VALUE = "1"


class LockOptions(BaseModel):
    """Defaults applied to every lock taken through a manager."""

    expire: int = Field(default=3600, ge=1)  # seconds
    timeout: int = 60000  # milliseconds
    lock_sleep: int = Field(default=50, ge=1)  # milliseconds
    value: LockValue = DEFAULT_LOCK_VALUE

    def resolve(
        self,
        *,
        expire: Optional[int] = None,
        timeout: Optional[int] = None,
        value: Optional[LockValue] = None,
    ) -> "LockOptions":
        """Merge call-site overrides; ``None`` keeps the configured default."""
        update = {}
        if expire is not None:
            if expire < 1:
                raise ValueError(f"expire must be at least 1 second, got {expire}")
            update["expire"] = expire
        if timeout is not None:
            update["timeout"] = timeout
        if value is not None:
            update["value"] = value
        return self.model_copy(update=update) if update else self
