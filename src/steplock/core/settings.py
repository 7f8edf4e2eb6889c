"""Settings loader for lock managers."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError

from steplock.core.models import LockOptions
from steplock.utils.env import get_env


class RedisSettings(BaseModel):
    url: Optional[str] = None  # falls back to REDIS_URL
    key_prefix: str = Field(default_factory=lambda: get_env("STEPLOCK_KEY_PREFIX", default=""))


class StepLockSettings(BaseModel):
    redis: RedisSettings = Field(default_factory=RedisSettings)
    lock: LockOptions = Field(default_factory=LockOptions)

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> "StepLockSettings":
        try:
            return cls.model_validate(dict(data or {}))
        except ValidationError as exc:
            raise ValueError(f"Invalid lock settings: {exc}") from exc

    @classmethod
    def from_file(cls, path: Path) -> "StepLockSettings":
        data = yaml.safe_load(path.read_text())
        return cls.from_mapping(data)
