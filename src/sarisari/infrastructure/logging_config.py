"""Logging setup for the console application.

Log records go to stderr (or a rotating file) so they never interleave
with the prompts printed on stdout.
"""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

ROOT_LOGGER = "sarisari"


def configure_logging(level: int = logging.WARNING, log_file: Path | None = None) -> logging.Logger:
    """Configure the package logger.

    Calling this again replaces the handlers installed by the previous call.
    """
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)
    for existing in list(logger.handlers):
        logger.removeHandler(existing)
        existing.close()

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.handlers.RotatingFileHandler(
            filename=log_file,
            maxBytes=1024 * 1024,
            backupCount=3,
            encoding="utf-8",
        )
    else:
        handler = logging.StreamHandler()

    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    handler.setLevel(level)
    logger.addHandler(handler)
    logger.propagate = False
    return logger
