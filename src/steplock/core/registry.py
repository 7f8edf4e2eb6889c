"""Book-keeping of locks currently held by this process."""

from __future__ import annotations

from typing import List, Set


class ActiveLockRegistry:
    """Names of locks held by a manager, used for shutdown cleanup."""

    def __init__(self) -> None:
        self._names: Set[str] = set()

    def add(self, name: str) -> None:
        self._names.add(name)

    def remove(self, name: str) -> None:
        self._names.discard(name)

    def snapshot(self) -> List[str]:
        return sorted(self._names)

    def __contains__(self, name: object) -> bool:
        return name in self._names

    def __len__(self) -> int:
        return len(self._names)
