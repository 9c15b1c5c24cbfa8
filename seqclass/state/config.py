"""Model configuration dataclasses."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping


class ClassifierPooling(str, Enum):
    """How per-token representations are reduced before the classifier head."""

    CLS = "cls"
    MEAN = "mean"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, value: Any) -> ClassifierPooling:
        """Return the matching member, or UNKNOWN for anything unrecognized."""
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                return cls.UNKNOWN
        return cls.UNKNOWN


@dataclass(frozen=True, slots=True)
class ClassifierConfig:
    """Classification-specific extension of the model configuration.

    Attributes:
        id_to_label: String-encoded class index -> label name.
        label_to_id: Label name -> string-encoded class index.
        pooling_strategy: Pooling declared by the bundle.
    """

    id_to_label: Mapping[str, str] = field(default_factory=dict)
    label_to_id: Mapping[str, str] = field(default_factory=dict)
    pooling_strategy: ClassifierPooling = ClassifierPooling.UNKNOWN


@dataclass(frozen=True, slots=True)
class ModelConfig:
    """Immutable view of a bundle's config.json.

    Attributes:
        hyperparameters: Every key of the document except the classifier
            fields, exactly as declared.
        classifier: Classifier extension, or None when the bundle has no
            id2label section.
    """

    hyperparameters: Mapping[str, Any]
    classifier: ClassifierConfig | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "hyperparameters", MappingProxyType(dict(self.hyperparameters)))

    @property
    def model_type(self) -> str | None:
        value = self.hyperparameters.get("model_type")
        return str(value) if value is not None else None

    @property
    def pad_token_id(self) -> int:
        return int(self.hyperparameters["pad_token_id"])

    @property
    def id_to_label(self) -> dict[str, str]:
        """Label map for decoding; empty when the classifier section is absent."""
        if self.classifier is None:
            return {}
        return dict(self.classifier.id_to_label)

    @property
    def pooling_strategy(self) -> ClassifierPooling:
        if self.classifier is None:
            return ClassifierPooling.UNKNOWN
        return self.classifier.pooling_strategy


__all__ = ["ClassifierPooling", "ClassifierConfig", "ModelConfig"]
