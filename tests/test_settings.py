from __future__ import annotations

import pytest

from steplock.core.factory import create_lock_manager
from steplock.core.locks_redis import RedisLockStore
from steplock.core.models import LockOptions
from steplock.core.registry import ActiveLockRegistry
from steplock.core.settings import StepLockSettings


def test_defaults():
    options = LockOptions()
    assert options.expire == 3600
    assert options.timeout == 60000
    assert options.lock_sleep == 50
    assert options.value == "1"


def test_resolve_keeps_defaults_for_unset_overrides():
    options = LockOptions(expire=10)
    resolved = options.resolve(timeout=0, value="")
    assert resolved.expire == 10
    assert resolved.timeout == 0
    assert resolved.value == ""
    assert options.resolve() is options


def test_from_file(tmp_path):
    path = tmp_path / "steplock.yml"
    path.write_text(
        "redis:\n"
        "  url: redis://cache:6379/2\n"
        "  key_prefix: 'steps:'\n"
        "lock:\n"
        "  expire: 120\n"
        "  lock_sleep: 25\n"
    )
    settings = StepLockSettings.from_file(path)
    assert settings.redis.url == "redis://cache:6379/2"
    assert settings.redis.key_prefix == "steps:"
    assert settings.lock.expire == 120
    assert settings.lock.lock_sleep == 25
    assert settings.lock.timeout == 60000


def test_empty_file_uses_defaults(tmp_path):
    path = tmp_path / "empty.yml"
    path.write_text("")
    settings = StepLockSettings.from_file(path)
    assert settings.lock == LockOptions()


def test_invalid_settings_raise_value_error():
    with pytest.raises(ValueError, match="Invalid lock settings"):
        StepLockSettings.from_mapping({"lock": {"expire": 0}})


def test_key_prefix_from_environment(monkeypatch):
    monkeypatch.setenv("STEPLOCK_KEY_PREFIX", "env:")
    assert StepLockSettings().redis.key_prefix == "env:"


def test_create_lock_manager():
    registry = ActiveLockRegistry()
    settings = StepLockSettings.from_mapping(
        {"redis": {"url": "redis://localhost:6379/0"}, "lock": {"timeout": 250}}
    )
    manager = create_lock_manager(settings, registry=registry)
    assert isinstance(manager.store, RedisLockStore)
    assert manager.options.timeout == 250
    assert manager.registry is registry
