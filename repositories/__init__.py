"""
Repositories package - Data access layer.

This package contains repository classes that handle data retrieval,
isolating the UI and business logic from data access details.
"""

from repositories.card_repository import (
    CardCatalog,
    CardRepository,
    get_card_repository,
    reset_card_repository,
)

__all__ = [
    "CardCatalog",
    "CardRepository",
    "get_card_repository",
    "reset_card_repository",
]
