"""
Search Service - Business logic for card search, filtering and sorting.

This module contains the rules the catalog grid applies to the card list:
- Case-insensitive name search
- Format legality filtering
- Alphabetical and collector-number ordering
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from enum import Enum
from typing import Any

from models.card import Card


class SortMode(str, Enum):
    """Orderings offered by the sort menu."""

    ALPHABETICAL = "alphabetical"
    NUMERIC = "numeric"


def parse_collector_number(value: str) -> int | None:
    """Return the collector number as an int, or None when it is not purely numeric."""
    text = value.strip()
    if not text.isascii() or not text.isdigit():
        return None
    return int(text)


def alphabetical_key(card: Card) -> tuple[Any, ...]:
    return (card.name, card.collector_number, card.identity)


def numeric_key(card: Card) -> tuple[Any, ...]:
    # Numbered cards first, by number; the rest after them, by name.
    number = parse_collector_number(card.collector_number)
    if number is None:
        return (1, 0, card.name, card.collector_number, card.identity)
    return (0, number, card.name, card.collector_number, card.identity)


SORT_KEYS = {
    SortMode.ALPHABETICAL: alphabetical_key,
    SortMode.NUMERIC: numeric_key,
}


class SearchService:
    """Service for card search and ordering logic."""

    # ============= Filtering =============

    def filter_by_name(self, cards: Sequence[Card], query: str) -> list[Card]:
        """
        Keep cards whose name contains the query, ignoring case.

        Args:
            cards: Cards to filter
            query: Search text; empty text keeps every card

        Returns:
            Matching cards in their original order
        """
        if not query:
            return list(cards)
        needle = query.lower()
        return [card for card in cards if needle in card.name_lower]

    def filter_by_format(self, cards: Sequence[Card], format_name: str | None) -> list[Card]:
        """
        Keep cards that are legal in the given format.

        Args:
            cards: Cards to filter
            format_name: Format key such as "standard"; None keeps every card

        Returns:
            Legal cards in their original order
        """
        if not format_name:
            return list(cards)
        return [card for card in cards if card.is_legal_in(format_name)]

    # ============= Sorting =============

    def sort_cards(
        self,
        cards: Iterable[Card],
        mode: SortMode = SortMode.ALPHABETICAL,
        ascending: bool = True,
    ) -> list[Card]:
        """
        Order cards for display.

        Alphabetical mode compares names by plain code-point order. Numeric
        mode compares collector numbers as integers and places cards with a
        non-numeric collector number after all numbered cards, alphabetically.
        Both modes are strict total orders, so descending is the exact reverse
        of ascending.

        Args:
            cards: Cards to sort
            mode: Ordering to apply
            ascending: False reverses the whole order

        Returns:
            New sorted list
        """
        key = SORT_KEYS[SortMode(mode)]
        return sorted(cards, key=key, reverse=not ascending)

    # ============= Catalog Facts =============

    def available_formats(self, cards: Iterable[Card]) -> list[str]:
        """List every format any card in the catalog mentions."""
        formats: set[str] = set()
        for card in cards:
            formats.update(card.legalities)
        return sorted(formats)


# Global instance shared by the application
_default_service = None


def get_search_service() -> SearchService:
    """Get the default search service instance."""
    global _default_service
    if _default_service is None:
        _default_service = SearchService()
    return _default_service


def reset_search_service() -> None:
    """Reset the global search service instance."""
    global _default_service
    _default_service = None
