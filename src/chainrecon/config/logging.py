"""Logging configuration sourced from the environment."""

from __future__ import annotations

import logging
import os
from typing import Final

from chainrecon.common.logging import configure_logging as _configure_root

from .errors import ConfigurationError

LOG_LEVEL_ENV: Final[str] = "CHAINRECON_LOG_LEVEL"


def get_log_level() -> int:
    """Return the configured log level (``CHAINRECON_LOG_LEVEL``, default INFO)."""

    raw = os.getenv(LOG_LEVEL_ENV)
    if raw is None or not raw.strip():
        return logging.INFO
    level = logging.getLevelNamesMapping().get(raw.strip().upper())
    if level is None:
        raise ConfigurationError(f"Unknown log level in {LOG_LEVEL_ENV}: {raw!r}")
    return level


def configure_logging(*, force: bool = False) -> None:
    _configure_root(level=get_log_level(), force=force)
