"""Aggregator of configuration modules.

This module re-exports the config API from smaller modules:
- bundle: bundle file names and required hyperparameters
- runtime: bundle location, device, dtype and batching settings
- logging: log level and format

Functions live in seqclass/helpers/.
"""

from .bundle import (
    CONFIG_FILENAME,
    TOKENIZER_FILENAME,
    WEIGHTS_FILENAME,
    DEFAULT_MODEL_TYPE,
    FALLBACK_POOLING,
    REQUIRED_HYPERPARAMETERS,
    ARCHITECTURE_HYPERPARAMETERS,
)
from .runtime import (
    CLASSIFIER_MODEL_DIR,
    CLASSIFIER_DEVICE,
    CLASSIFIER_DTYPE,
    CLASSIFIER_MAX_LENGTH,
    CLASSIFIER_BATCH_SIZE,
)
from .logging import (
    APP_LOG_LEVEL,
    APP_LOG_FORMAT,
    APP_LOG_DATEFMT,
)

__all__ = [
    # bundle
    "CONFIG_FILENAME",
    "TOKENIZER_FILENAME",
    "WEIGHTS_FILENAME",
    "DEFAULT_MODEL_TYPE",
    "FALLBACK_POOLING",
    "REQUIRED_HYPERPARAMETERS",
    "ARCHITECTURE_HYPERPARAMETERS",
    # runtime
    "CLASSIFIER_MODEL_DIR",
    "CLASSIFIER_DEVICE",
    "CLASSIFIER_DTYPE",
    "CLASSIFIER_MAX_LENGTH",
    "CLASSIFIER_BATCH_SIZE",
    # logging
    "APP_LOG_LEVEL",
    "APP_LOG_FORMAT",
    "APP_LOG_DATEFMT",
]
