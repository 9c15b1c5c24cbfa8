"""Process-level entry points.

Thin function-style facade over ClassifierEngine for callers that prefer
a handle plus free functions.
"""

from __future__ import annotations

import os
from collections.abc import Sequence

import torch  # type: ignore[import]

from .classifier.engine import ClassifierEngine
from .state import ClassifyResponse


def load(
    path: str | os.PathLike[str],
    device: str | torch.device | None = "cpu",
    *,
    dtype: str | torch.dtype | None = None,
    max_length: int | None = None,
) -> ClassifierEngine:
    """Load a bundle directory and return the model handle."""
    return ClassifierEngine.load(path, device, dtype=dtype, max_length=max_length)


def classify(handle: ClassifierEngine, texts: Sequence[str]) -> list[ClassifyResponse]:
    """Classify texts with a handle returned by load()."""
    return handle.classify(texts)


__all__ = ["load", "classify"]
