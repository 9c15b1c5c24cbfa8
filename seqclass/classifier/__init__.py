"""Classifier package: bundle loading and batched text classification.

Architecture:
    ClassifierEngine:
        Owns the loaded model, tokenizer, label map and device.
        - load(): bundle directory -> ready engine (all-or-nothing)
        - classify(): list of texts -> list of ClassifyResponse

    TokenizerAdapter:
        tokenizers.Tokenizer configured for batch-longest padding with the
        bundle's pad token and truncation disabled by default.

    weights:
        Memory-maps model.safetensors and assigns it into a transformers
        sequence-classification model built from config.json.

    decoder:
        Picks the winning class per score row (NaN never wins, first
        maximum on ties) and maps it to its label.

Configuration (via environment):
    CLASSIFIER_MODEL_DIR: Bundle directory
    CLASSIFIER_DEVICE: Torch device (default cpu)
    CLASSIFIER_DTYPE: Weight dtype (default float32)
    CLASSIFIER_MAX_LENGTH: Optional truncation length

Usage:
    from seqclass.classifier import ClassifierEngine

    with ClassifierEngine.load("/models/toxic") as engine:
        engine.classify(["hello world"])
"""

from __future__ import annotations

from .engine import ClassifierEngine
from .tokenizer import TokenizerAdapter
from .registry import get_classifier, reset_classifier

__all__ = [
    "ClassifierEngine",
    "TokenizerAdapter",
    "get_classifier",
    "reset_classifier",
]
