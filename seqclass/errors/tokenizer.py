"""Tokenizer construction and encoding exceptions."""

from .base import ClassifierError, LoadError


class TokenizerLoadError(LoadError):
    """Raised when tokenizer.json is malformed or cannot be configured."""


class TokenizerEncodeError(ClassifierError):
    """Raised when an input in a batch cannot be tokenized.

    One bad input fails the whole batch; callers wanting per-item resilience
    must validate inputs before batching.
    """


__all__ = ["TokenizerLoadError", "TokenizerEncodeError"]
