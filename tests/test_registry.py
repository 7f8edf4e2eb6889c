from __future__ import annotations

from steplock.core.manager import chunked
from steplock.core.registry import ActiveLockRegistry


def test_add_remove_snapshot():
    registry = ActiveLockRegistry()
    registry.add("b")
    registry.add("a")
    registry.add("a")
    assert registry.snapshot() == ["a", "b"]
    registry.remove("a")
    registry.remove("missing")
    assert registry.snapshot() == ["b"]
    assert "b" in registry
    assert len(registry) == 1


def test_chunked():
    names = [str(i) for i in range(2001)]
    assert [len(c) for c in chunked(names)] == [1000, 1000, 1]
    assert list(chunked([])) == []
