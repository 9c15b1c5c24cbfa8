"""Process logging setup."""

from __future__ import annotations

import contextlib
import logging


def configure_logging(level: str | None = None) -> None:
    """Initialize root logging configuration once per process.

    Args:
        level: Overrides APP_LOG_LEVEL when given.
    """
    from seqclass.config.logging import APP_LOG_LEVEL, APP_LOG_FORMAT, APP_LOG_DATEFMT  # noqa: PLC0415

    log_level = (level or APP_LOG_LEVEL).upper()
    root_logger = logging.getLogger()
    if not root_logger.handlers:
        logging.basicConfig(level=log_level, format=APP_LOG_FORMAT, datefmt=APP_LOG_DATEFMT)
    else:
        root_logger.setLevel(log_level)
        for handler in root_logger.handlers:
            with contextlib.suppress(Exception):
                handler.setLevel(log_level)
                handler.setFormatter(logging.Formatter(APP_LOG_FORMAT, datefmt=APP_LOG_DATEFMT))

    logging.getLogger("seqclass").setLevel(log_level)
    numeric_level = getattr(logging, log_level, logging.INFO)
    logging.getLogger("transformers").setLevel(max(numeric_level, logging.WARNING))


__all__ = ["configure_logging"]
