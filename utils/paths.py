from utils.constants import BUNDLED_CATALOG_NAME, CONFIG_DIR, LOGS_DIR, RESOURCE_DIR

CONFIG_FILE = CONFIG_DIR / "config.json"
BUNDLED_CATALOG_FILE = RESOURCE_DIR / BUNDLED_CATALOG_NAME

__all__ = [
    "CONFIG_DIR",
    "LOGS_DIR",
    "CONFIG_FILE",
    "BUNDLED_CATALOG_FILE",
]
