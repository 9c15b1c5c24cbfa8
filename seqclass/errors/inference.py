"""Classification-time exceptions."""

from __future__ import annotations

from .base import ClassifierError


class InferenceError(ClassifierError):
    """Raised when the forward pass or its output handling fails.

    Includes shape and numeric errors from the model, device errors, and
    calls made against an engine that has been closed.
    """


class LabelMappingError(ClassifierError):
    """Raised when a class index has no label in the bundle configuration.

    This signals a mismatch between the model head and config.json's
    id2label; it is never papered over with a placeholder label.

    Attributes:
        missing: Class indices without a label.
    """

    def __init__(self, message: str, *, missing: tuple[int, ...] = ()) -> None:
        super().__init__(message)
        self.missing = missing


__all__ = ["InferenceError", "LabelMappingError"]
