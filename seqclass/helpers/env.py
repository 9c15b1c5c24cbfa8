"""Environment helper utilities.

Provides functions for parsing environment variables into typed values.
Config modules call these at import time so the config modules themselves
stay purely declarative.
"""

from __future__ import annotations

import os


def env_str(name: str, default: str | None = None) -> str | None:
    """Return a stripped env value, treating blank strings as unset."""
    value = os.getenv(name)
    if value is None:
        return default
    value = value.strip()
    return value or default


def env_int(name: str, default: int) -> int:
    """Parse an integer env var, falling back to default when unset."""
    value = env_str(name)
    if value is None:
        return default
    return int(value)


def env_optional_int(name: str) -> int | None:
    """Parse an optional positive integer env var.

    Unset, blank, or non-positive values resolve to None so callers can
    treat "0" as "disabled".
    """
    value = env_str(name)
    if value is None:
        return None
    parsed = int(value)
    return parsed if parsed > 0 else None


__all__ = [
    "env_str",
    "env_int",
    "env_optional_int",
]
