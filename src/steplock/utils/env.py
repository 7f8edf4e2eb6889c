"""Environment helper utilities."""

from __future__ import annotations

import os


def get_env(name: str, *, default: str = "") -> str:
    """Return a stripped environment value, or ``default`` when unset or blank."""
    raw = os.getenv(name)
    if raw is None:
        return default
    value = raw.strip()
    return value or default
