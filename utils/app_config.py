"""Read-only application configuration with defaults from ``utils.constants``."""

from __future__ import annotations

import json
import math
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from loguru import logger

from models.card import IMAGE_FIELDS
from utils.constants import (
    DEFAULT_LOG_LEVEL,
    IMAGE_FETCH_TIMEOUT,
    MAX_IMAGE_WORKERS,
    THUMBNAIL_IMAGE_FIELD,
)
from utils.paths import BUNDLED_CATALOG_FILE, CONFIG_FILE

LOG_LEVELS = {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}


@dataclass(frozen=True)
class AppConfig:
    catalog_path: Path = BUNDLED_CATALOG_FILE
    image_fetch_timeout: float = IMAGE_FETCH_TIMEOUT
    image_workers: int = MAX_IMAGE_WORKERS
    thumbnail_size: str = THUMBNAIL_IMAGE_FIELD
    log_level: str = DEFAULT_LOG_LEVEL


def load_app_config(path: Path = CONFIG_FILE) -> AppConfig:
    """
    Load ``config.json`` if it exists, ignoring unknown or invalid entries.

    Args:
        path: Location of the JSON config file

    Returns:
        AppConfig with defaults for anything not configured
    """
    if not path.exists():
        logger.debug(f"{path} not found; using default configuration")
        return AppConfig()
    try:
        with path.open("r", encoding="utf-8") as fh:
            raw = json.load(fh)
    except (OSError, json.JSONDecodeError) as exc:
        logger.warning(f"Invalid {path} ({exc}); using default configuration")
        return AppConfig()
    if not isinstance(raw, dict):
        logger.warning(f"Invalid {path} (expected an object); using default configuration")
        return AppConfig()
    return config_from_dict(raw, base_dir=path.parent)


def config_from_dict(raw: dict[str, Any], base_dir: Path | None = None) -> AppConfig:
    defaults = AppConfig()
    values: dict[str, Any] = {}

    catalog_path = raw.get("catalog_path")
    if isinstance(catalog_path, str) and catalog_path.strip():
        candidate = Path(catalog_path).expanduser()
        if not candidate.is_absolute() and base_dir is not None:
            candidate = base_dir / candidate
        values["catalog_path"] = candidate

    timeout = _positive_number(raw.get("image_fetch_timeout"), "image_fetch_timeout")
    if timeout is not None:
        values["image_fetch_timeout"] = timeout

    workers = _positive_int(raw.get("image_workers"), "image_workers")
    if workers is not None:
        values["image_workers"] = workers

    thumbnail = raw.get("thumbnail_size")
    if thumbnail is not None:
        if thumbnail in IMAGE_FIELDS:
            values["thumbnail_size"] = thumbnail
        else:
            logger.warning(f"Unknown thumbnail_size {thumbnail!r}; using {defaults.thumbnail_size}")

    level = raw.get("log_level")
    if isinstance(level, str) and level.upper() in LOG_LEVELS:
        values["log_level"] = level.upper()
    elif level is not None:
        logger.warning(f"Unknown log_level {level!r}; using {defaults.log_level}")

    return AppConfig(**values)


def _positive_number(value: Any, key: str) -> float | None:
    if value is None:
        return None
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        logger.warning(f"Ignoring non-numeric {key}: {value!r}")
        return None
    if not math.isfinite(number) or number <= 0:
        logger.warning(f"Ignoring non-positive or non-finite {key}: {value!r}")
        return None
    return number


def _positive_int(value: Any, key: str) -> int | None:
    number = _positive_number(value, key)
    if number is None:
        return None
    if not number.is_integer():
        logger.warning(f"Ignoring non-integer {key}: {value!r}")
        return None
    return int(number)


__all__ = ["AppConfig", "config_from_dict", "load_app_config"]
