"""Centralized exception classes for the classifier package.

This module re-exports all domain-specific exceptions from their respective
modules, providing a single import point for error handling.

Organization:
    - base.py: ClassifierError root and the LoadError family root
    - bundle.py: bundle file I/O and config.json parsing errors
    - tokenizer.py: tokenizer construction and encoding errors
    - model.py: weight mapping / architecture mismatch errors
    - inference.py: forward-pass and label lookup errors
    - classify.py: Exception-to-category label mapping
"""

from .base import ClassifierError, LoadError
from .bundle import BundleIOError, ConfigParseError
from .tokenizer import TokenizerLoadError, TokenizerEncodeError
from .model import ModelLoadError
from .inference import InferenceError, LabelMappingError
from .classify import classify_error

__all__ = [
    # Roots
    "ClassifierError",
    "LoadError",
    # Load-time
    "BundleIOError",
    "ConfigParseError",
    "TokenizerLoadError",
    "ModelLoadError",
    # Classify-time
    "TokenizerEncodeError",
    "InferenceError",
    "LabelMappingError",
    # Classification
    "classify_error",
]
