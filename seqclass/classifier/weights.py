"""Weight mapping and model instantiation.

The safetensors file is opened through safe_open, which memory-maps it and
hands out tensors backed by the mapped region where the target device and
dtype allow. Parameters are then assigned into a freshly built
sequence-classification model rather than copied.

The mapped file must not be modified while a model built from it is alive.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

import torch  # type: ignore[import]
from safetensors import SafetensorError, safe_open  # type: ignore[import]
from transformers import AutoConfig, AutoModelForSequenceClassification  # type: ignore[import]

from ..config import DEFAULT_MODEL_TYPE, FALLBACK_POOLING
from ..errors import ModelLoadError
from ..state import ClassifierPooling, ModelConfig

if TYPE_CHECKING:
    from transformers import PretrainedConfig, PreTrainedModel  # type: ignore[import]

logger = logging.getLogger(__name__)


def _label_id(value: str) -> int | str:
    try:
        return int(value)
    except ValueError:
        return value


def _classifier_kwargs(config: ModelConfig) -> dict[str, Any]:
    classifier = config.classifier
    if classifier is None:
        return {}

    kwargs: dict[str, Any] = {}
    id2label = {
        int(key): label
        for key, label in classifier.id_to_label.items()
        if key.lstrip("-").isdigit()
    }
    if id2label:
        kwargs["id2label"] = id2label
        kwargs["label2id"] = {
            label: _label_id(index) for label, index in classifier.label_to_id.items()
        }

    pooling = classifier.pooling_strategy
    if pooling is ClassifierPooling.UNKNOWN:
        logger.warning(
            "weights: classifier pooling unknown; falling back to %s",
            FALLBACK_POOLING,
        )
        kwargs["classifier_pooling"] = FALLBACK_POOLING
    else:
        kwargs["classifier_pooling"] = pooling.value
    return kwargs


def build_architecture_config(config: ModelConfig) -> PretrainedConfig:
    """Translate a ModelConfig into a transformers config for its model_type.

    Raises:
        ModelLoadError: transformers does not know the model_type or rejects
            the hyperparameters.
    """
    params = dict(config.hyperparameters)
    model_type = str(params.pop("model_type", None) or DEFAULT_MODEL_TYPE)
    params.update(_classifier_kwargs(config))
    try:
        return AutoConfig.for_model(model_type, **params)
    except (ValueError, TypeError, KeyError) as exc:
        raise ModelLoadError(f"unsupported architecture config for {model_type!r}: {exc}") from exc


def map_weights(
    path: Path,
    *,
    device: torch.device,
    dtype: torch.dtype,
) -> dict[str, torch.Tensor]:
    """Memory-map every tensor in a safetensors file onto device.

    Floating-point tensors are cast to dtype; integer tensors keep theirs.

    Raises:
        ModelLoadError: The file is not a valid safetensors payload or the
            device cannot hold the tensors.
    """
    tensors: dict[str, torch.Tensor] = {}
    try:
        with safe_open(str(path), framework="pt", device=str(device)) as handle:
            for name in handle.keys():
                tensor = handle.get_tensor(name)
                if tensor.is_floating_point() and tensor.dtype != dtype:
                    tensor = tensor.to(dtype=dtype)
                tensors[name] = tensor
    except (SafetensorError, OSError, RuntimeError, ValueError) as exc:
        tensors.clear()
        raise ModelLoadError(f"cannot map weights: {exc}", path=path) from exc

    if not tensors:
        raise ModelLoadError("weight file contains no tensors", path=path)
    return tensors


def instantiate_model(
    config: ModelConfig,
    weights: dict[str, torch.Tensor],
    *,
    device: torch.device,
    dtype: torch.dtype,
) -> PreTrainedModel:
    """Build the classification model and assign the mapped weights into it.

    Raises:
        ModelLoadError: The architecture cannot be built, parameters are
            missing from the weights, or a tensor shape does not match.
    """
    arch_config = build_architecture_config(config)
    try:
        model = AutoModelForSequenceClassification.from_config(arch_config)
    except (ValueError, TypeError, KeyError) as exc:
        raise ModelLoadError(
            f"no sequence-classification model for {arch_config.model_type!r}: {exc}"
        ) from exc

    try:
        result = model.load_state_dict(weights, strict=False, assign=True)
    except RuntimeError as exc:
        raise ModelLoadError(f"weights do not match architecture: {exc}") from exc

    if result.missing_keys:
        shown = ", ".join(result.missing_keys[:5])
        raise ModelLoadError(
            f"weights missing {len(result.missing_keys)} parameters: {shown}"
        )
    if result.unexpected_keys:
        logger.warning(
            "weights: ignoring %d unexpected tensors (first: %s)",
            len(result.unexpected_keys),
            result.unexpected_keys[0],
        )

    try:
        model.to(device=device, dtype=dtype)
    except RuntimeError as exc:
        raise ModelLoadError(f"cannot move model to {device}: {exc}") from exc
    model.eval()
    return model


__all__ = ["build_architecture_config", "map_weights", "instantiate_model"]
