"""Bundle-loaded transformer text classification.

Loads a sequence-classification model from a directory holding
config.json, tokenizer.json and model.safetensors, and classifies batches
of strings into (label, score) pairs.

Usage:
    import seqclass

    handle = seqclass.load("/models/toxic", "cpu")
    seqclass.classify(handle, ["hello world"])
"""

from __future__ import annotations

from .api import classify, load
from .classifier.engine import ClassifierEngine
from .errors import (
    BundleIOError,
    ClassifierError,
    ConfigParseError,
    InferenceError,
    LabelMappingError,
    LoadError,
    ModelLoadError,
    TokenizerEncodeError,
    TokenizerLoadError,
)
from .state import ClassifierConfig, ClassifierPooling, ClassifyResponse, ModelConfig

__version__ = "0.1.0"

__all__ = [
    "load",
    "classify",
    "ClassifierEngine",
    "ClassifyResponse",
    "ModelConfig",
    "ClassifierConfig",
    "ClassifierPooling",
    "ClassifierError",
    "LoadError",
    "BundleIOError",
    "ConfigParseError",
    "TokenizerLoadError",
    "TokenizerEncodeError",
    "ModelLoadError",
    "InferenceError",
    "LabelMappingError",
]
