"""Controllers module - Application-level controllers for coordinating business logic."""

from controllers.catalog_controller import (
    CatalogController,
    get_catalog_controller,
    reset_catalog_controller,
)

__all__ = ["CatalogController", "get_catalog_controller", "reset_catalog_controller"]
