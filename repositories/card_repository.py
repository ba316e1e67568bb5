"""
Card Repository - Data access layer for the bundled card catalog.

This module handles:
- Loading the bundled card set exactly once per process
- Dropping duplicate printings (same large image URI)
- Turning load failures into a logged, empty catalog
"""

from __future__ import annotations

import threading
from pathlib import Path

from loguru import logger

from models.card import Card
from utils.card_data import CatalogLoadError, read_catalog_file
from utils.paths import BUNDLED_CATALOG_FILE
from utils.result import Result

CardCatalog = tuple[Card, ...]


class CardRepository:
    """Repository for the read-only card catalog."""

    def __init__(self, catalog_path: Path | None = None):
        """
        Initialize the card repository.

        Args:
            catalog_path: Location of the catalog JSON. Defaults to the bundled resource.
        """
        self.catalog_path = Path(catalog_path or BUNDLED_CATALOG_FILE)
        self._result: Result[CardCatalog, CatalogLoadError] | None = None
        self._lock = threading.Lock()

    # ============= Catalog Loading =============

    def load_catalog_result(self) -> Result[CardCatalog, CatalogLoadError]:
        """
        Load the catalog once, reporting failures as a typed result.

        Returns:
            Result holding the catalog, or the CatalogLoadError that prevented loading
        """
        with self._lock:
            if self._result is None:
                self._result = self._read()
            return self._result

    def load_catalog(self) -> CardCatalog:
        """
        Load the catalog once, falling back to an empty catalog on failure.

        Returns:
            Ordered tuple of cards (empty if the resource could not be loaded)
        """
        return self.load_catalog_result().unwrap_or(())

    def is_catalog_loaded(self) -> bool:
        """Check if a load attempt has already happened."""
        with self._lock:
            return self._result is not None

    def get_card(self, identity: str) -> Card | None:
        """
        Look up a card by its large image URI.

        Args:
            identity: Large image URI of the card

        Returns:
            The matching card or None
        """
        for card in self.load_catalog():
            if card.identity == identity:
                return card
        return None

    def _read(self) -> Result[CardCatalog, CatalogLoadError]:
        logger.info(f"Loading card catalog from {self.catalog_path}")
        try:
            cards = read_catalog_file(self.catalog_path)
        except CatalogLoadError as exc:
            logger.error(f"Failed to load card catalog: {exc}")
            return Result.failure(exc)

        catalog = dedupe_cards(cards)
        logger.info(f"Loaded {len(catalog)} cards")
        return Result.success(catalog)


def dedupe_cards(cards: list[Card]) -> CardCatalog:
    """Drop repeated printings while keeping first-seen order."""
    seen: set[str] = set()
    unique: list[Card] = []
    for card in cards:
        if card.identity in seen:
            logger.debug(f"Skipping duplicate printing of {card.name}: {card.identity}")
            continue
        seen.add(card.identity)
        unique.append(card)
    return tuple(unique)


# Global instance shared by the application
_default_repository = None


def get_card_repository(catalog_path: Path | None = None) -> CardRepository:
    """
    Get the default card repository instance.

    Args:
        catalog_path: Catalog location, used only when the instance is first created
    """
    global _default_repository
    if _default_repository is None:
        _default_repository = CardRepository(catalog_path)
    return _default_repository


def reset_card_repository() -> None:
    """
    Reset the global card repository instance.

    This is primarily useful for testing to ensure test isolation
    and prevent state leakage between tests.
    """
    global _default_repository
    _default_repository = None
