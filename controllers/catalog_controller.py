"""
Catalog Controller - Application logic for the catalog window.

This controller wires the repository, services and view-model together and
gives the wx frame a small interface to talk to. It holds no widgets itself
apart from the frame reference.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from loguru import logger

if TYPE_CHECKING:
    from widgets.catalog_frame import CatalogFrame

from models.card import Card
from repositories.card_repository import CardCatalog, CardRepository, get_card_repository
from services.catalog_view_model import CatalogViewModel
from services.image_service import ImageRequest, ImageService
from services.search_service import SortMode, get_search_service
from utils.app_config import AppConfig, load_app_config
from utils.background_worker import BackgroundWorker
from utils.card_data import CatalogLoadError
from utils.card_images import CardImageCache, ImageFetchError
from utils.constants import DETAIL_IMAGE_FIELD, ZOOM_IMAGE_FIELD
from utils.result import Result


class CatalogController:
    """Coordinates catalog loading, image requests and the view-model for the main frame."""

    def __init__(
        self,
        config: AppConfig | None = None,
        card_repository: CardRepository | None = None,
        image_service: ImageService | None = None,
        worker: BackgroundWorker | None = None,
    ):
        self.config = config or load_app_config()
        self.card_repo = card_repository or get_card_repository(self.config.catalog_path)
        self.image_service = image_service or ImageService(
            CardImageCache(
                max_workers=self.config.image_workers,
                timeout=self.config.image_fetch_timeout,
            )
        )
        self.worker = worker or BackgroundWorker()
        self.view_model = CatalogViewModel(search_service=get_search_service())

        self.load_error: CatalogLoadError | None = None
        self.catalog_ready = False
        self.frame: CatalogFrame | None = None
        self._on_catalog_ready: list[Callable[[], None]] = []

    # ============= Catalog Loading =============

    def load_catalog_async(self, on_ready: Callable[[], None] | None = None) -> None:
        """Load the bundled catalog off the UI thread and install it in the view-model."""
        if on_ready is not None:
            self._on_catalog_ready.append(on_ready)
        if self.catalog_ready:
            self._flush_ready_callbacks()
            return
        self.worker.submit(
            self.card_repo.load_catalog_result,
            on_success=self._handle_catalog_result,
            on_error=self._handle_catalog_crash,
        )

    def _handle_catalog_result(self, result: Result[CardCatalog, CatalogLoadError]) -> None:
        self.load_error = result.error
        if result.is_error:
            logger.warning(f"Showing empty catalog: {result.error}")
        self.catalog_ready = True
        self.view_model.set_cards(result.unwrap_or(()))
        self._flush_ready_callbacks()

    def _handle_catalog_crash(self, exc: Exception) -> None:
        self._handle_catalog_result(
            Result.failure(CatalogLoadError(f"Unexpected error loading catalog: {exc}"))
        )

    def _flush_ready_callbacks(self) -> None:
        callbacks, self._on_catalog_ready = self._on_catalog_ready, []
        for callback in callbacks:
            callback()

    def empty_state_message(self) -> str | None:
        """Text to show instead of the grid, or None when there are cards to show."""
        if not self.catalog_ready:
            return "Loading cards..."
        if self.load_error is not None:
            return f"Unable to load cards.\n{self.load_error}"
        if self.view_model.is_empty():
            return "No cards in this set."
        if not self.view_model.sorted_filtered_cards():
            return "No cards match your search."
        return None

    # ============= UI Commands =============

    def search(self, text: str) -> None:
        self.view_model.set_search_text(text)

    def clear_search(self) -> None:
        self.view_model.set_search_text("")

    def sort_alphabetical(self, ascending: bool) -> None:
        self.view_model.set_sort_mode(SortMode.ALPHABETICAL, ascending)

    def sort_by_number(self) -> None:
        self.view_model.set_sort_mode(SortMode.NUMERIC, self.view_model.ascending)

    def reverse_sort(self) -> None:
        self.view_model.toggle_sort_direction()

    def filter_format(self, format_name: str | None) -> None:
        self.view_model.set_format_filter(format_name)

    def open_card(self, card: Card) -> None:
        self.view_model.select_card(card)

    def close_card(self) -> None:
        self.view_model.select_card(None)

    # ============= Images =============

    def thumbnail_uri(self, card: Card) -> str:
        return getattr(card.image_uris, self.config.thumbnail_size)

    def detail_uri(self, card: Card) -> str:
        return getattr(card.image_uris, DETAIL_IMAGE_FIELD)

    def zoom_uri(self, card: Card) -> str:
        return getattr(card.image_uris, ZOOM_IMAGE_FIELD)

    def request_image(
        self,
        uri: str,
        on_success: Callable[[bytes], None],
        on_error: Callable[[ImageFetchError], None],
    ) -> ImageRequest:
        return self.image_service.request_image(uri, on_success, on_error)

    def reload_images(self) -> None:
        """Forget every downloaded image so tiles fetch them again."""
        self.image_service.clear_cache()
        self.view_model.refresh()

    # ============= Frame =============

    def create_frame(self) -> CatalogFrame:
        from widgets.catalog_frame import CatalogFrame

        self.frame = CatalogFrame(self)
        return self.frame

    def shutdown(self) -> None:
        logger.info("Shutting down catalog controller")
        self.worker.shutdown(timeout=1.0)
        self.image_service.shutdown()


# Global instance shared by the application
_default_controller = None


def get_catalog_controller() -> CatalogController:
    """Get the default catalog controller instance."""
    global _default_controller
    if _default_controller is None:
        _default_controller = CatalogController()
    return _default_controller


def reset_catalog_controller() -> None:
    """Reset the global controller instance."""
    global _default_controller
    _default_controller = None
