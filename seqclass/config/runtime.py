"""Classifier runtime configuration.

Settings for locating the model bundle and running inference. Explicit
arguments passed to the engine or CLI always take precedence over these.

Environment Variables:
    CLASSIFIER_MODEL_DIR: Bundle directory (config.json, tokenizer.json,
        model.safetensors). No default.
    CLASSIFIER_DEVICE: Torch device string (default: cpu)
    CLASSIFIER_DTYPE: Weight dtype after loading (default: float32)
    CLASSIFIER_MAX_LENGTH: Truncation length in tokens; unset or 0 keeps
        truncation disabled (default: unset)
    CLASSIFIER_BATCH_SIZE: Input lines per classify call in the CLI (default: 1)
"""

from __future__ import annotations

from ..helpers.env import env_int, env_str, env_optional_int


# ============================================================================
# Bundle Location
# ============================================================================

CLASSIFIER_MODEL_DIR = env_str("CLASSIFIER_MODEL_DIR")

# ============================================================================
# Device / Precision
# ============================================================================
# Bundles ship float32-compatible weights; half precision only makes sense
# on accelerators.

CLASSIFIER_DEVICE = env_str("CLASSIFIER_DEVICE", "cpu") or "cpu"
CLASSIFIER_DTYPE = (env_str("CLASSIFIER_DTYPE", "float32") or "float32").lower()

# ============================================================================
# Sequence Length
# ============================================================================
# Truncation is off unless a budget is given. Inputs longer than the model's
# positional capacity then fail inside the forward pass.

CLASSIFIER_MAX_LENGTH = env_optional_int("CLASSIFIER_MAX_LENGTH")

# ============================================================================
# CLI Batching
# ============================================================================

CLASSIFIER_BATCH_SIZE = max(1, env_int("CLASSIFIER_BATCH_SIZE", 1))


__all__ = [
    "CLASSIFIER_MODEL_DIR",
    "CLASSIFIER_DEVICE",
    "CLASSIFIER_DTYPE",
    "CLASSIFIER_MAX_LENGTH",
    "CLASSIFIER_BATCH_SIZE",
]
