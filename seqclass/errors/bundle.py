"""Bundle reading and configuration parsing exceptions."""

from __future__ import annotations

from pathlib import Path

from .base import LoadError


class BundleIOError(LoadError):
    """Raised when a required bundle file cannot be opened or read.

    Attributes:
        reason: Short description of the I/O failure (missing, unreadable, ...).
    """

    def __init__(self, path: str | Path, reason: str) -> None:
        super().__init__(f"cannot read bundle file: {reason}", path=path)
        self.reason = reason


class ConfigParseError(LoadError):
    """Raised when config.json is malformed or lacks mandatory hyperparameters.

    Attributes:
        missing: Names of required fields absent from the document.
    """

    def __init__(
        self,
        message: str,
        *,
        path: str | Path | None = None,
        missing: tuple[str, ...] = (),
    ) -> None:
        super().__init__(message, path=path)
        self.missing = missing


__all__ = ["BundleIOError", "ConfigParseError"]
