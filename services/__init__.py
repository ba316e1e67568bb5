"""
Services package - Business logic layer.

This package exposes business services while avoiding heavy imports at module load time.
"""

from importlib import import_module
from typing import Any

__all__ = [
    "CatalogViewModel",
    "ImageRequest",
    "ImageService",
    "SearchService",
    "SortMode",
    "get_image_service",
    "get_search_service",
]

_LAZY_MODULES = {
    "CatalogViewModel": "services.catalog_view_model",
    "ImageRequest": "services.image_service",
    "ImageService": "services.image_service",
    "get_image_service": "services.image_service",
    "SearchService": "services.search_service",
    "SortMode": "services.search_service",
    "get_search_service": "services.search_service",
}


def __getattr__(name: str) -> Any:
    if name in _LAZY_MODULES:
        module = import_module(_LAZY_MODULES[name])
        value = getattr(module, name)
        globals()[name] = value
        return value

    raise AttributeError(f"module 'services' has no attribute '{name}'")
