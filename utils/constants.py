"""Constants file."""

import os
import sys
from pathlib import Path

APP_NAME = "Scryfall Catalog"
WINDOW_TITLE = "Scryfall"


def _default_base_dir() -> Path:
    """Return the writable base directory for config/logging."""
    if getattr(sys, "frozen", False):
        local_appdata = os.getenv("LOCALAPPDATA")
        if local_appdata:
            return Path(local_appdata) / APP_NAME
        return Path.home() / ".scryfall_catalog"
    return Path(__file__).resolve().parent.parent


def _default_resource_dir() -> Path:
    """Return the read-only directory that ships the bundled card set."""
    bundle_root = getattr(sys, "_MEIPASS", None)
    if bundle_root:
        return Path(bundle_root) / "data"
    return Path(__file__).resolve().parent.parent / "data"


SUBDUED_TEXT = (185, 191, 202)
DARK_BG = (0, 0, 0)
DARK_PANEL = (34, 39, 46)
DARK_ALT = (40, 46, 54)
DARK_ACCENT = (59, 130, 246)
LIGHT_TEXT = (236, 236, 236)
LEGAL_TEXT = (74, 222, 128)
NOT_LEGAL_TEXT = (248, 113, 113)

BUNDLED_CATALOG_NAME = "WOT-Scryfall.json"

# Image fetching
IMAGE_FETCH_TIMEOUT = 15  # Seconds
MAX_IMAGE_WORKERS = 6
THUMBNAIL_IMAGE_FIELD = "art_crop"
DETAIL_IMAGE_FIELD = "art_crop"
ZOOM_IMAGE_FIELD = "border_crop"

# Grid layout
THUMBNAIL_WIDTH = 200
THUMBNAIL_HEIGHT = 150
GRID_GAP = 10

DEFAULT_LOG_LEVEL = "INFO"

BASE_DATA_DIR = _default_base_dir()
RESOURCE_DIR = _default_resource_dir()
CONFIG_DIR = BASE_DATA_DIR / "config"
LOGS_DIR = BASE_DATA_DIR / "logs"


def ensure_base_dirs() -> None:
    """Ensure base config/log directories exist without importing side effects."""
    BASE_DATA_DIR.mkdir(parents=True, exist_ok=True)
    for path in (CONFIG_DIR, LOGS_DIR):
        path.mkdir(parents=True, exist_ok=True)


__all__ = [
    "APP_NAME",
    "WINDOW_TITLE",
    "SUBDUED_TEXT",
    "DARK_BG",
    "DARK_PANEL",
    "DARK_ALT",
    "DARK_ACCENT",
    "LIGHT_TEXT",
    "LEGAL_TEXT",
    "NOT_LEGAL_TEXT",
    "BUNDLED_CATALOG_NAME",
    "IMAGE_FETCH_TIMEOUT",
    "MAX_IMAGE_WORKERS",
    "THUMBNAIL_IMAGE_FIELD",
    "DETAIL_IMAGE_FIELD",
    "ZOOM_IMAGE_FIELD",
    "THUMBNAIL_WIDTH",
    "THUMBNAIL_HEIGHT",
    "GRID_GAP",
    "DEFAULT_LOG_LEVEL",
    "BASE_DATA_DIR",
    "RESOURCE_DIR",
    "CONFIG_DIR",
    "LOGS_DIR",
    "ensure_base_dirs",
]
