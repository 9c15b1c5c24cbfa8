"""Command-line classifier over line-delimited stdin.

Each input line (trailing newline stripped) is one text. Lines are grouped
--batch-size at a time; every batch prints one JSON array of
{"label", "score"} objects on stdout, in input order.

Any failure stops the process with a non-zero exit code: a misconfigured
bundle or a bad input is reported once rather than retried.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Iterable, Iterator, Sequence
from typing import TextIO

from .classifier.engine import ClassifierEngine
from .config import (
    CLASSIFIER_BATCH_SIZE,
    CLASSIFIER_DEVICE,
    CLASSIFIER_DTYPE,
    CLASSIFIER_MAX_LENGTH,
    CLASSIFIER_MODEL_DIR,
)
from .errors import ClassifierError, LoadError, classify_error
from .logging import configure_logging

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_LOAD_FAILED = 2
EXIT_CLASSIFY_FAILED = 1


def _positive_int(value: str) -> int:
    parsed = int(value)
    if parsed <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value}")
    return parsed


def _batched(lines: Iterable[str], batch_size: int) -> Iterator[list[str]]:
    batch: list[str] = []
    for line in lines:
        batch.append(line.rstrip("\r\n"))
        if len(batch) >= batch_size:
            yield batch
            batch = []
    if batch:
        yield batch


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="seqclass",
        description="Classify stdin lines with a sequence-classification model bundle.",
    )
    parser.add_argument(
        "--model-dir",
        default=CLASSIFIER_MODEL_DIR,
        help="Bundle directory (default: $CLASSIFIER_MODEL_DIR)",
    )
    parser.add_argument("--device", default=CLASSIFIER_DEVICE, help="Torch device (default: %(default)s)")
    parser.add_argument("--dtype", default=CLASSIFIER_DTYPE, help="Weight dtype (default: %(default)s)")
    parser.add_argument(
        "--max-length",
        type=_positive_int,
        default=CLASSIFIER_MAX_LENGTH,
        help="Truncate inputs to this many tokens (default: no truncation)",
    )
    parser.add_argument(
        "--batch-size",
        type=_positive_int,
        default=CLASSIFIER_BATCH_SIZE,
        help="Lines per classify call (default: %(default)s)",
    )
    parser.add_argument("--log-level", default=None, help="Override APP_LOG_LEVEL")
    return parser


def run(
    engine: ClassifierEngine,
    lines: Iterable[str],
    out: TextIO,
    *,
    batch_size: int = 1,
) -> int:
    """Classify lines batch by batch, writing one JSON array per batch.

    Returns:
        Number of lines classified.
    """
    count = 0
    for batch in _batched(lines, batch_size):
        results = engine.classify(batch)
        out.write(json.dumps([result.to_dict() for result in results], ensure_ascii=False))
        out.write("\n")
        out.flush()
        count += len(batch)
    return count


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    if not args.model_dir:
        logger.error("cli: no bundle given; pass --model-dir or set CLASSIFIER_MODEL_DIR")
        return EXIT_LOAD_FAILED

    try:
        engine = ClassifierEngine.load(
            args.model_dir,
            args.device,
            dtype=args.dtype,
            max_length=args.max_length,
        )
    except (LoadError, ValueError) as exc:
        logger.error("cli: load failed category=%s error=%s", classify_error(exc), exc)
        return EXIT_LOAD_FAILED

    with engine:
        try:
            count = run(engine, sys.stdin, sys.stdout, batch_size=args.batch_size)
        except ClassifierError as exc:
            logger.error("cli: classify failed category=%s error=%s", classify_error(exc), exc)
            return EXIT_CLASSIFY_FAILED

    logger.info("cli: classified %d lines", count)
    return EXIT_OK


__all__ = ["build_parser", "run", "main"]
