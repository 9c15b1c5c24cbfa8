"""Central registry for the process-wide classifier engine.

The engine is created lazily on first access from environment
configuration (CLASSIFIER_MODEL_DIR, CLASSIFIER_DEVICE, ...), not at import
time.

Usage:
    from seqclass.classifier.registry import get_classifier

    engine = get_classifier()
    results = engine.classify(["some text"])
"""

from __future__ import annotations

import threading

from ..config import (
    CLASSIFIER_DEVICE,
    CLASSIFIER_DTYPE,
    CLASSIFIER_MAX_LENGTH,
    CLASSIFIER_MODEL_DIR,
)
from ..errors import LoadError
from .engine import ClassifierEngine

# Singleton instance - created lazily on first access
_STATE: dict[str, ClassifierEngine | None] = {"instance": None}
_lock = threading.Lock()


def get_classifier() -> ClassifierEngine:
    """Get the global classifier engine, loading it on first call.

    Thread Safety:
        Uses double-checked locking so concurrent first callers load once.

    Raises:
        LoadError: CLASSIFIER_MODEL_DIR is not set, or any failure while
            loading the bundle.
    """
    instance = _STATE["instance"]
    if instance is not None:
        return instance

    with _lock:
        # Double-check after acquiring lock
        instance = _STATE["instance"]
        if instance is None:
            if not CLASSIFIER_MODEL_DIR:
                raise LoadError("CLASSIFIER_MODEL_DIR is not set")
            instance = ClassifierEngine.load(
                CLASSIFIER_MODEL_DIR,
                CLASSIFIER_DEVICE,
                dtype=CLASSIFIER_DTYPE,
                max_length=CLASSIFIER_MAX_LENGTH,
            )
            _STATE["instance"] = instance

    return instance


def reset_classifier() -> None:
    """Close and clear the global engine (for testing)."""
    with _lock:
        instance = _STATE["instance"]
        _STATE["instance"] = None
    if instance is not None:
        instance.close()


__all__ = [
    "get_classifier",
    "reset_classifier",
]
