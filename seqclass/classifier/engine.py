"""Inference engine for bundle-loaded sequence classifiers.

ClassifierEngine owns one loaded model, its configured tokenizer, the
label map and the compute device. It is built once with load() and is
read-only afterwards: classify() never mutates engine state, so one engine
can serve concurrent callers as long as the underlying torch model does.

Load order (all-or-nothing):
    1. Resolve the bundle and parse config.json
    2. Build the tokenizer with batch-longest padding
    3. Memory-map model.safetensors onto the device
    4. Instantiate the classification model from config + weights
    5. Extract the id -> label map

Classify flow:
    tokenize (padded) -> stack into [batch, seq] tensors -> forward
    -> [batch, num_classes] scores -> per-row label decode
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping, Sequence
from typing import Any

import torch  # type: ignore[import]

from ..bundle import locate_bundle
from ..errors import InferenceError, TokenizerEncodeError
from ..helpers.devices import resolve_device, resolve_dtype
from ..state import ClassifyResponse, EncodedText, ModelConfig
from .config import load_model_config
from .decoder import decode_batch
from .tokenizer import TokenizerAdapter
from .weights import instantiate_model, map_weights

logger = logging.getLogger(__name__)


class ClassifierEngine:
    """Loaded classifier exposing batched classify().

    Attributes:
        device: Torch device the model and input tensors live on.
        config: Parsed bundle configuration, or None for engines assembled
            directly from parts.
    """

    def __init__(
        self,
        model: Any,
        tokenizer: TokenizerAdapter,
        *,
        id_to_label: Mapping[str, str],
        device: str | torch.device | None = None,
        config: ModelConfig | None = None,
    ) -> None:
        """Assemble an engine from already-loaded parts.

        Args:
            model: Callable taking input_ids/attention_mask keyword tensors and
                returning logits (or an object with a .logits attribute).
            tokenizer: Configured tokenizer adapter.
            id_to_label: String class index -> label name.
            device: Device for input tensors; must match the model's.
            config: Bundle configuration the parts were built from.
        """
        self._model = model
        self._tokenizer = tokenizer
        self._id_to_label = dict(id_to_label)
        self.device = resolve_device(device)
        self.config = config

    # ============================================================================
    # Construction
    # ============================================================================

    @classmethod
    def load(
        cls,
        bundle_path: str | os.PathLike[str],
        device: str | torch.device | None = None,
        *,
        dtype: str | torch.dtype | None = None,
        max_length: int | None = None,
    ) -> ClassifierEngine:
        """Load a bundle directory into a ready engine.

        Args:
            bundle_path: Directory with config.json, tokenizer.json and
                model.safetensors.
            device: Torch device (default: cpu).
            dtype: Floating-point dtype for weights (default: float32).
            max_length: Optional truncation budget; None keeps truncation off.

        Raises:
            BundleIOError, ConfigParseError, TokenizerLoadError, ModelLoadError:
                The step that failed. Nothing stays open after a failure.
        """
        torch_device = resolve_device(device)
        torch_dtype = resolve_dtype(dtype)

        paths = locate_bundle(bundle_path)
        config = load_model_config(paths.config)
        tokenizer = TokenizerAdapter.from_file(
            paths.tokenizer,
            pad_token_id=config.pad_token_id,
            max_length=max_length,
        )

        weights = map_weights(paths.weights, device=torch_device, dtype=torch_dtype)
        try:
            model = instantiate_model(config, weights, device=torch_device, dtype=torch_dtype)
        finally:
            # The model holds its own references to the assigned tensors.
            weights.clear()

        id_to_label = config.id_to_label
        if not id_to_label:
            logger.warning("classifier: bundle %s has no id2label; classify will fail", paths.root)

        logger.info(
            "classifier: ready bundle=%s type=%s device=%s dtype=%s labels=%d pooling=%s",
            paths.root,
            config.model_type or "default",
            torch_device,
            torch_dtype,
            len(id_to_label),
            config.pooling_strategy.value,
        )
        return cls(
            model,
            tokenizer,
            id_to_label=id_to_label,
            device=torch_device,
            config=config,
        )

    # ============================================================================
    # Internal helpers
    # ============================================================================

    def _stack(self, encoded: list[EncodedText]) -> tuple[torch.Tensor, torch.Tensor]:
        lengths = {len(item) for item in encoded}
        mask_lengths = {len(item.attention_mask) for item in encoded}
        if len(lengths) != 1 or lengths != mask_lengths:
            raise InferenceError(
                f"tokenizer produced unevenly padded batch (lengths={sorted(lengths)}, "
                f"mask lengths={sorted(mask_lengths)})"
            )
        input_ids = torch.tensor([item.ids for item in encoded], dtype=torch.long, device=self.device)
        attention_mask = torch.tensor(
            [item.attention_mask for item in encoded],
            dtype=torch.long,
            device=self.device,
        )
        return input_ids, attention_mask

    def _forward(
        self,
        model: Any,
        input_ids: torch.Tensor,
        attention_mask: torch.Tensor,
    ) -> torch.Tensor:
        try:
            with torch.inference_mode():
                outputs = model(input_ids=input_ids, attention_mask=attention_mask)
        except Exception as exc:  # noqa: BLE001
            raise InferenceError(f"forward pass failed: {exc}") from exc

        logits = getattr(outputs, "logits", outputs)
        if not isinstance(logits, torch.Tensor):
            raise InferenceError(f"model returned {type(logits).__name__}, expected a tensor")
        batch_size = input_ids.shape[0]
        if logits.ndim != 2 or logits.shape[0] != batch_size:
            raise InferenceError(
                f"expected logits of shape [{batch_size}, num_classes], got {tuple(logits.shape)}"
            )
        return logits

    # ============================================================================
    # Public API
    # ============================================================================

    @property
    def closed(self) -> bool:
        return self._model is None

    @property
    def tokenizer(self) -> TokenizerAdapter:
        return self._tokenizer

    @property
    def id_to_label(self) -> dict[str, str]:
        return dict(self._id_to_label)

    def classify(self, texts: Sequence[str]) -> list[ClassifyResponse]:
        """Classify a batch of texts, one response per input in input order.

        An empty batch returns [] without touching the model.

        Raises:
            TokenizerEncodeError: An input could not be tokenized, or texts is a
                bare string rather than a batch.
            InferenceError: The forward pass failed or the engine is closed.
            LabelMappingError: The model emits a class index with no label.
        """
        # close() may run concurrently; read both handles once.
        model, tokenizer = self._model, self._tokenizer
        if model is None or tokenizer is None:
            raise InferenceError("classifier engine is closed")
        if isinstance(texts, str):
            raise TokenizerEncodeError("expected a sequence of strings, got a single str")
        batch = list(texts)
        if not batch:
            return []

        encoded = tokenizer.encode_batch(batch)
        input_ids, attention_mask = self._stack(encoded)
        logger.debug(
            "classifier: batch size=%d padded_len=%d",
            input_ids.shape[0],
            input_ids.shape[1],
        )
        logits = self._forward(model, input_ids, attention_mask)
        scores = logits.detach().to(device="cpu", dtype=torch.float32).numpy()
        return decode_batch(scores, self._id_to_label)

    def close(self) -> None:
        """Release the model and tokenizer, unmapping the weight file."""
        if self._model is None:
            return
        self._model = None
        self._tokenizer = None  # type: ignore[assignment]
        logger.debug("classifier: closed device=%s", self.device)

    def __enter__(self) -> ClassifierEngine:
        return self

    def __exit__(self, *_exc_info: object) -> None:
        self.close()


__all__ = ["ClassifierEngine"]
