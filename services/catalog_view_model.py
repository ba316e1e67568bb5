"""
Catalog View-Model - UI-facing state for the card grid.

Owns the full card list, the search text, the sort selection, the optional
format filter and the card picked for the detail view. The visible list is
derived on demand from that state; nothing is cached between calls.

All mutation happens on the UI thread. Listeners are notified synchronously
after every state change.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

from loguru import logger

from models.card import Card
from services.search_service import SearchService, SortMode, get_search_service

Listener = Callable[["CatalogViewModel"], None]


class CatalogViewModel:
    """State container handed by reference to the presentation layer."""

    def __init__(
        self,
        cards: Iterable[Card] = (),
        search_service: SearchService | None = None,
    ) -> None:
        self._cards: tuple[Card, ...] = tuple(cards)
        self.search_service = search_service or get_search_service()
        self._search_text = ""
        self._sort_mode = SortMode.ALPHABETICAL
        self._ascending = True
        self._format_filter: str | None = None
        self._selected: Card | None = None
        self._listeners: list[Listener] = []

    # ============= State Accessors =============

    @property
    def cards(self) -> tuple[Card, ...]:
        return self._cards

    @property
    def search_text(self) -> str:
        return self._search_text

    @property
    def sort_mode(self) -> SortMode:
        return self._sort_mode

    @property
    def ascending(self) -> bool:
        return self._ascending

    @property
    def format_filter(self) -> str | None:
        return self._format_filter

    @property
    def selected_card(self) -> Card | None:
        return self._selected

    # ============= Commands =============

    def set_cards(self, cards: Iterable[Card]) -> None:
        """Install the loaded catalog. Clears a selection that is no longer present."""
        self._cards = tuple(cards)
        if self._selected is not None and self._selected not in self._cards:
            self._selected = None
        self._notify()

    def set_search_text(self, text: str) -> None:
        self._search_text = text or ""
        self._notify()

    def set_sort_mode(self, mode: SortMode | str, ascending: bool = True) -> None:
        self._sort_mode = SortMode(mode)
        self._ascending = bool(ascending)
        self._notify()

    def toggle_sort_direction(self) -> None:
        self._ascending = not self._ascending
        self._notify()

    def set_format_filter(self, format_name: str | None) -> None:
        self._format_filter = format_name or None
        self._notify()

    def select_card(self, card: Card | None) -> None:
        self._selected = card
        self._notify()

    def refresh(self) -> None:
        """Ask listeners to redraw without changing any state."""
        self._notify()

    # ============= Derived State =============

    def sorted_filtered_cards(self) -> list[Card]:
        """Return the cards to display for the current search, filter and sort."""
        visible = self.search_service.filter_by_name(self._cards, self._search_text)
        visible = self.search_service.filter_by_format(visible, self._format_filter)
        return self.search_service.sort_cards(visible, self._sort_mode, self._ascending)

    def available_formats(self) -> list[str]:
        return self.search_service.available_formats(self._cards)

    def is_empty(self) -> bool:
        return not self._cards

    # ============= Listeners =============

    def subscribe(self, listener: Listener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self) -> None:
        for listener in list(self._listeners):
            try:
                listener(self)
            except Exception:
                logger.exception("Catalog listener failed")
