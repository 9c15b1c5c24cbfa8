"""Configuration Model parsing.

config.json is one flat document carrying two logical sections:

1. Encoder hyperparameters (vocab_size, hidden_size, pad_token_id, ...),
   kept opaque and passed through exactly as declared.
2. The classifier extension: id2label, label2id and classifier_pooling.

The classifier section is optional. When id2label is absent the model
still loads, with empty label maps and UNKNOWN pooling; classification
then fails at decode time because no index can be labelled. An unknown
classifier_pooling string also degrades to UNKNOWN instead of failing, so
bundles written by newer tooling still load.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping

from ..bundle import read_config_document
from ..config import ARCHITECTURE_HYPERPARAMETERS, DEFAULT_MODEL_TYPE, REQUIRED_HYPERPARAMETERS
from ..errors import ConfigParseError
from ..state import ClassifierConfig, ClassifierPooling, ModelConfig

logger = logging.getLogger(__name__)

CLASSIFIER_KEYS = ("id2label", "label2id", "classifier_pooling")


def _string_map(value: Any, field_name: str, path: Path | None) -> dict[str, str]:
    if not isinstance(value, Mapping):
        raise ConfigParseError(
            f"{field_name} must be a JSON object, got {type(value).__name__}",
            path=path,
        )
    result: dict[str, str] = {}
    for key, item in value.items():
        if isinstance(item, (dict, list)) or item is None:
            raise ConfigParseError(f"{field_name}[{key!r}] must be a scalar", path=path)
        result[str(key)] = str(item)
    return result


def _parse_classifier(document: Mapping[str, Any], path: Path | None) -> ClassifierConfig | None:
    if "id2label" not in document:
        if "label2id" in document:
            logger.warning("config: label2id present without id2label; ignoring classifier section")
        return None

    id_to_label = _string_map(document["id2label"], "id2label", path)
    if "label2id" in document:
        label_to_id = _string_map(document["label2id"], "label2id", path)
    else:
        label_to_id = {label: index for index, label in id_to_label.items()}

    raw_pooling = document.get("classifier_pooling")
    pooling = ClassifierPooling.parse(raw_pooling)
    if raw_pooling is not None and pooling is ClassifierPooling.UNKNOWN:
        logger.warning("config: unrecognized classifier_pooling=%r; using unknown", raw_pooling)

    return ClassifierConfig(
        id_to_label=id_to_label,
        label_to_id=label_to_id,
        pooling_strategy=pooling,
    )


def parse_model_config(
    document: Mapping[str, Any],
    *,
    path: Path | None = None,
) -> ModelConfig:
    """Build a ModelConfig from a decoded config.json document.

    Args:
        document: Decoded JSON object.
        path: Source file, used only for error messages.

    Raises:
        ConfigParseError: A hyperparameter required for the declared
            model_type (ModernBERT when absent) is missing or null, or a
            classifier mapping is not an object of scalars.
    """
    model_type = str(document.get("model_type") or DEFAULT_MODEL_TYPE)
    required = REQUIRED_HYPERPARAMETERS + ARCHITECTURE_HYPERPARAMETERS.get(model_type, ())
    missing = tuple(name for name in required if document.get(name) is None)
    if missing:
        raise ConfigParseError(
            f"missing required hyperparameters: {', '.join(missing)}",
            path=path,
            missing=missing,
        )

    pad_token_id = document["pad_token_id"]
    if isinstance(pad_token_id, bool) or not isinstance(pad_token_id, int) or pad_token_id < 0:
        raise ConfigParseError(f"pad_token_id must be a non-negative integer, got {pad_token_id!r}", path=path)

    hyperparameters = {k: v for k, v in document.items() if k not in CLASSIFIER_KEYS}
    return ModelConfig(
        hyperparameters=hyperparameters,
        classifier=_parse_classifier(document, path),
    )


def load_model_config(path: Path) -> ModelConfig:
    """Read config.json from disk and parse it."""
    return parse_model_config(read_config_document(path), path=path)


__all__ = ["CLASSIFIER_KEYS", "parse_model_config", "load_model_config"]
