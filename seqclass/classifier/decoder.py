"""Label decoding for per-class score rows.

Selection rule: NaN is never selected; among the remaining values the
first index holding the maximum wins. Infinities compare normally. A row
with no selectable value is an InferenceError.

Scores are returned exactly as the head produced them (no softmax), cast
to float32 precision.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

import numpy as np

from ..errors import InferenceError, LabelMappingError
from ..state import ClassifyResponse


def select_max(row: Sequence[float] | np.ndarray) -> tuple[int, float]:
    """Return (index, value) of the first non-NaN maximum in row.

    Raises:
        InferenceError: The row is empty or every value is NaN.
    """
    values = np.asarray(row, dtype=np.float32)
    if values.ndim != 1:
        raise InferenceError(f"expected a 1-d score row, got shape {values.shape}")
    finite_mask = ~np.isnan(values)
    if not finite_mask.any():
        raise InferenceError("score row has no comparable values")
    # -inf stands in for NaN; argmax returns the first occurrence of the max.
    masked = np.where(finite_mask, values, -np.inf)
    index = int(np.argmax(masked))
    if not finite_mask[index]:
        # all non-NaN entries are -inf and a NaN came first
        index = int(np.flatnonzero(finite_mask)[0])
    return index, float(values[index])


def check_label_coverage(num_classes: int, id_to_label: Mapping[str, str]) -> None:
    """Ensure every class index below num_classes has a label.

    Raises:
        LabelMappingError: One or more indices are unmapped.
    """
    missing = tuple(i for i in range(num_classes) if str(i) not in id_to_label)
    if missing:
        shown = ", ".join(str(i) for i in missing[:10])
        if len(missing) > 10:
            shown += ", ..."
        raise LabelMappingError(
            f"no label for class indices [{shown}] (model emits {num_classes} classes, "
            f"config maps {len(id_to_label)})",
            missing=missing,
        )


def decode_row(row: Sequence[float] | np.ndarray, id_to_label: Mapping[str, str]) -> ClassifyResponse:
    """Decode one score row into its winning label and raw score."""
    index, score = select_max(row)
    label = id_to_label.get(str(index))
    if label is None:
        raise LabelMappingError(f"no label for class index {index}", missing=(index,))
    return ClassifyResponse(label=label, score=score)


def decode_batch(logits: np.ndarray, id_to_label: Mapping[str, str]) -> list[ClassifyResponse]:
    """Decode a [batch, num_classes] score matrix row by row.

    Label coverage is checked against the full output width before any row
    is decoded, so a short id2label fails every call, not only the ones
    whose winner happens to be unmapped.
    """
    scores = np.asarray(logits, dtype=np.float32)
    if scores.ndim != 2:
        raise InferenceError(f"expected [batch, num_classes] scores, got shape {scores.shape}")
    check_label_coverage(scores.shape[1], id_to_label)
    return [decode_row(row, id_to_label) for row in scores]


__all__ = ["select_max", "check_label_coverage", "decode_row", "decode_batch"]
