"""
Image Service - Business logic for card thumbnails and artwork.

This module handles:
- Starting (or joining) image downloads through the shared cache
- Delivering results onto the UI thread
- Per-request cancellation for consumers that go away before the download ends
"""

from __future__ import annotations

import threading
from collections.abc import Callable
from concurrent.futures import Future

from loguru import logger

from utils.background_worker import Dispatcher, call_on_ui_thread
from utils.card_images import CardImageCache, ImageFetchError


class ImageRequest:
    """Handle for one consumer's interest in an image."""

    def __init__(self, uri: str, future: Future[bytes]) -> None:
        self.uri = uri
        self._future = future
        self._cancelled = threading.Event()

    def cancel(self) -> None:
        """Stop delivery to this consumer. The download itself keeps running."""
        self._cancelled.set()

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    @property
    def done(self) -> bool:
        return self._future.done()

    def result(self, timeout: float | None = None) -> bytes:
        """Block until the shared download finishes (for tests and scripts)."""
        return self._future.result(timeout=timeout)


class ImageService:
    """Service for loading card images asynchronously."""

    def __init__(
        self,
        image_cache: CardImageCache | None = None,
        dispatcher: Dispatcher | None = None,
    ):
        """
        Initialize the image service.

        Args:
            image_cache: Shared CardImageCache. If None, creates a new one.
            dispatcher: Callable used to run callbacks on the UI thread
        """
        self.image_cache = image_cache or CardImageCache()
        self._dispatch = dispatcher or call_on_ui_thread

    def get_cached_image(self, uri: str) -> bytes | None:
        return self.image_cache.get(uri)

    def request_image(
        self,
        uri: str,
        on_success: Callable[[bytes], None],
        on_error: Callable[[ImageFetchError], None],
    ) -> ImageRequest:
        """
        Load an image in the background and report back on the UI thread.

        Args:
            uri: Image URI to load
            on_success: Callback receiving the image bytes
            on_error: Callback receiving the ImageFetchError

        Returns:
            ImageRequest that can be cancelled when the consumer is discarded
        """
        future = self.image_cache.fetch(uri)
        request = ImageRequest(uri, future)

        def deliver(done: Future[bytes]) -> None:
            if request.cancelled or done.cancelled():
                logger.debug(f"Dropping image result for cancelled request: {uri}")
                return
            try:
                content = done.result()
            except ImageFetchError as exc:
                self._dispatch(_guarded, request, on_error, exc)
                return
            except Exception as exc:
                logger.exception(f"Unexpected failure loading {uri}")
                error = ImageFetchError(uri, "network", str(exc))
                self._dispatch(_guarded, request, on_error, error)
                return
            self._dispatch(_guarded, request, on_success, content)

        future.add_done_callback(deliver)
        return request

    def clear_cache(self) -> None:
        self.image_cache.clear()

    def shutdown(self) -> None:
        self.image_cache.shutdown()


def _guarded(request: ImageRequest, callback: Callable, payload: object) -> None:
    # Runs on the UI thread; the consumer may have been destroyed in between.
    if request.cancelled:
        return
    callback(payload)


# Global instance shared by the application
_default_service = None


def get_image_service() -> ImageService:
    """Get the default image service instance."""
    global _default_service
    if _default_service is None:
        _default_service = ImageService()
    return _default_service


def reset_image_service() -> None:
    """
    Reset the global image service instance.

    This is primarily useful for testing to ensure test isolation
    and prevent state leakage between tests.
    """
    global _default_service
    if _default_service is not None:
        _default_service.shutdown()
    _default_service = None
