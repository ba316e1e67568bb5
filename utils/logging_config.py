"""Logging helpers to mirror console output into a persistent log file."""

from __future__ import annotations

import sys
from datetime import datetime
from pathlib import Path

from loguru import logger

from utils.constants import DEFAULT_LOG_LEVEL


def configure_logging(logs_dir: Path, level: str = DEFAULT_LOG_LEVEL) -> Path | None:
    """
    Configure loguru to emit to stderr and a rolling file in the given logs directory.

    Returns the file path in use when file logging is available, otherwise None.
    """
    logger.remove()
    logger.add(sys.stderr, level=level, backtrace=True, diagnose=True, enqueue=True)

    log_file: Path | None = None
    try:
        logs_dir.mkdir(parents=True, exist_ok=True)
        log_file = logs_dir / f"scryfall_catalog_{datetime.now():%Y%m%d_%H%M%S}.log"
        logger.add(
            log_file,
            level=level,
            rotation="5 MB",
            retention=5,
            backtrace=True,
            diagnose=True,
            enqueue=True,
        )
    except Exception as exc:
        logger.warning(f"File logging disabled; unable to write to {logs_dir}: {exc}")

    return log_file
