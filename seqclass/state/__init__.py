"""State dataclasses shared across the classifier package."""

from .config import ClassifierPooling, ClassifierConfig, ModelConfig
from .classify import EncodedText, ClassifyResponse

__all__ = [
    "ClassifierPooling",
    "ClassifierConfig",
    "ModelConfig",
    "EncodedText",
    "ClassifyResponse",
]
