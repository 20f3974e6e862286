"""Runtime configuration for a store session.

Values come from the command line, with environment variables as the
fallback (click resolves both); ``StoreConfig`` is what the composition
root consumes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from sarisari.domain.model.value_objects import DEFAULT_CURRENCY

ENV_PREFIX = "SARISARI"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass(frozen=True)
class StoreConfig:
    catalog_path: Path | None = None
    currency: str = DEFAULT_CURRENCY
    log_level: str = "WARNING"
    log_file: Path | None = None

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level.upper())
