"""Application logger writing to the platformdirs user log directory.

The terminal belongs to the UI, so records go to a rotating file instead
of stderr.
"""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path

from platformdirs import user_log_dir

_APP_NAME = "zeronoise"
_LOG_FILE = "zeronoise.log"
_MAX_BYTES = 1024 * 1024  # 1 MB
_BACKUP_COUNT = 3

_logger: logging.Logger | None = None


def log_path() -> Path:
    """Location of the active log file."""
    return Path(user_log_dir(_APP_NAME)) / _LOG_FILE


def get_logger(level: int = logging.INFO) -> logging.Logger:
    """Return the package logger, attaching the file handler on first call.

    Module loggers (``logging.getLogger(__name__)``) inside the package
    propagate to it.
    """
    global _logger
    if _logger is not None:
        _logger.setLevel(level)
        return _logger

    path = log_path()
    path.parent.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(_APP_NAME)
    logger.setLevel(level)
    if not logger.handlers:
        handler = logging.handlers.RotatingFileHandler(
            path,
            maxBytes=_MAX_BYTES,
            backupCount=_BACKUP_COUNT,
            encoding="utf-8",
        )
        handler.setFormatter(
            logging.Formatter(
                fmt="%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
                datefmt="%Y-%m-%dT%H:%M:%S",
            )
        )
        logger.addHandler(handler)
    logger.propagate = False

    _logger = logger
    return _logger
