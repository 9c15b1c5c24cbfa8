"""Exception classification helpers for logs and exit reporting."""

from __future__ import annotations

from .bundle import BundleIOError, ConfigParseError
from .inference import InferenceError, LabelMappingError
from .model import ModelLoadError
from .tokenizer import TokenizerEncodeError, TokenizerLoadError

ERROR_CATEGORIES: tuple[tuple[type[BaseException], str], ...] = (
    (BundleIOError, "bundle_io"),
    (ConfigParseError, "config_parse"),
    (TokenizerLoadError, "tokenizer_load"),
    (TokenizerEncodeError, "tokenizer_encode"),
    (ModelLoadError, "model_load"),
    (LabelMappingError, "label_mapping"),
    (InferenceError, "inference"),
)


def classify_error(exc: BaseException) -> str:
    """Map an exception to a stable category label."""

    for cls, label in ERROR_CATEGORIES:
        if isinstance(exc, cls):
            return label
    return "unknown"


__all__ = ["ERROR_CATEGORIES", "classify_error"]
