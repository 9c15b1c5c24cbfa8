"""Artifact bundle reader.

A bundle is a directory holding three co-located files:

    config.json        model hyperparameters + id2label/label2id/classifier_pooling
    tokenizer.json     tokenizers-native definition
    model.safetensors  weight tensors

locate_bundle() resolves and checks all three up front so a load fails
before anything heavy is opened. read_config_document() reads and decodes
config.json, keeping I/O failures (BundleIOError) apart from decode
failures (ConfigParseError).
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .config import CONFIG_FILENAME, TOKENIZER_FILENAME, WEIGHTS_FILENAME
from .errors import BundleIOError, ConfigParseError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class BundlePaths:
    """Resolved locations of the three bundle files."""

    root: Path
    config: Path
    tokenizer: Path
    weights: Path


def _check_readable(path: Path) -> None:
    if not path.exists():
        raise BundleIOError(path, "file not found")
    if not path.is_file():
        raise BundleIOError(path, "not a regular file")
    if not os.access(path, os.R_OK):
        raise BundleIOError(path, "permission denied")


def locate_bundle(path: str | os.PathLike[str]) -> BundlePaths:
    """Resolve the bundle directory and verify every required file is readable.

    Args:
        path: Bundle directory.

    Returns:
        BundlePaths for the directory.

    Raises:
        BundleIOError: The directory or one of the files is missing or unreadable.
    """
    root = Path(path).expanduser()
    if not root.exists():
        raise BundleIOError(root, "bundle directory not found")
    if not root.is_dir():
        raise BundleIOError(root, "bundle path is not a directory")

    paths = BundlePaths(
        root=root,
        config=root / CONFIG_FILENAME,
        tokenizer=root / TOKENIZER_FILENAME,
        weights=root / WEIGHTS_FILENAME,
    )
    for file_path in (paths.config, paths.tokenizer, paths.weights):
        _check_readable(file_path)
    logger.debug("bundle: located root=%s", root)
    return paths


def read_config_document(path: Path) -> dict[str, Any]:
    """Read and JSON-decode config.json.

    Raises:
        BundleIOError: The file could not be opened or read.
        ConfigParseError: The content is not valid JSON or not a JSON object.
    """
    try:
        with open(path, "rb") as infile:
            raw = infile.read()
    except OSError as exc:
        raise BundleIOError(path, exc.strerror or str(exc)) from exc

    try:
        document = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ConfigParseError(f"invalid JSON: {exc}", path=path) from exc

    if not isinstance(document, dict):
        raise ConfigParseError(
            f"expected a JSON object, got {type(document).__name__}",
            path=path,
        )
    return document


__all__ = ["BundlePaths", "locate_bundle", "read_config_document"]
