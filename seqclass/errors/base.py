"""Root exception types for the classifier package.

Every failure surfaced by loading or classification derives from
ClassifierError so callers can catch the whole family with one clause and
still dispatch on the concrete kind.
"""

from __future__ import annotations

from pathlib import Path


class ClassifierError(Exception):
    """Base exception for all classifier failures.

    Attributes:
        message: Human-readable error description.
        path: Bundle file involved in the failure, when there is one.
    """

    def __init__(self, message: str, *, path: str | Path | None = None) -> None:
        super().__init__(message if path is None else f"{message} ({path})")
        self.message = message
        self.path = Path(path) if path is not None else None


class LoadError(ClassifierError):
    """Raised when a model bundle cannot be turned into a usable engine.

    Loading is all-or-nothing: when this is raised no engine exists and any
    resources opened along the way have been released.
    """


__all__ = ["ClassifierError", "LoadError"]
