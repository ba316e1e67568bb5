"""In-memory card image cache keyed by image URI.

This module provides functionality to:
1. Fetch card images from the Scryfall CDN over plain HTTP(S) GET
2. Validate the downloaded bytes with Pillow before caching them
3. Keep at most one outstanding download per URI
4. Keep every successful image for the lifetime of the process

Failures are never cached: a failed URI stays unpopulated and the caller
decides whether to ask again.
"""

from __future__ import annotations

import io
import threading
from concurrent.futures import Future, ThreadPoolExecutor

import requests
from loguru import logger
from PIL import Image, UnidentifiedImageError

from utils.constants import IMAGE_FETCH_TIMEOUT, MAX_IMAGE_WORKERS

FETCH_ERROR_KINDS = ("network", "status", "decode", "timeout")


class ImageFetchError(Exception):
    """An image could not be downloaded or decoded."""

    def __init__(self, uri: str, kind: str, message: str) -> None:
        super().__init__(f"{kind} error fetching {uri}: {message}")
        self.uri = uri
        self.kind = kind
        self.message = message


class CardImageCache:
    """Thread-safe URI to image bytes cache with in-flight request sharing."""

    def __init__(
        self,
        session: requests.Session | None = None,
        max_workers: int = MAX_IMAGE_WORKERS,
        timeout: float = IMAGE_FETCH_TIMEOUT,
    ) -> None:
        self.session = session or requests.Session()
        self.timeout = timeout
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="card-image"
        )
        self._images: dict[str, bytes] = {}
        self._in_flight: dict[str, Future[bytes]] = {}
        self._lock = threading.Lock()

    def get(self, uri: str) -> bytes | None:
        """Return the cached image for ``uri`` or None when not cached."""
        with self._lock:
            return self._images.get(uri)

    def is_pending(self, uri: str) -> bool:
        with self._lock:
            return uri in self._in_flight

    def fetch(self, uri: str) -> Future[bytes]:
        """
        Start (or join) the download of ``uri``.

        Returns:
            Future resolving to the image bytes, or raising ImageFetchError
        """
        with self._lock:
            cached = self._images.get(uri)
            if cached is not None:
                done: Future[bytes] = Future()
                done.set_result(cached)
                return done

            pending = self._in_flight.get(uri)
            if pending is not None:
                logger.debug(f"Joining in-flight image request: {uri}")
                return pending

            future = self._executor.submit(self._download, uri)
            self._in_flight[uri] = future
            return future

    def cached_count(self) -> int:
        with self._lock:
            return len(self._images)

    def clear(self) -> None:
        """Drop every cached image. In-flight downloads are left to finish."""
        with self._lock:
            self._images.clear()

    def shutdown(self, wait: bool = False) -> None:
        self._executor.shutdown(wait=wait, cancel_futures=True)

    def _download(self, uri: str) -> bytes:
        # The cache entry is written before the future resolves, so anyone
        # who waited on the future sees the image in get() afterwards. The
        # in-flight entry is dropped on every exit so a failed URI can be retried.
        try:
            content = self._request_bytes(uri)
            _validate_image(uri, content)
            with self._lock:
                self._images[uri] = content
            return content
        except ImageFetchError as exc:
            logger.debug(f"Image fetch failed: {exc}")
            raise
        except Exception as exc:
            logger.exception(f"Unexpected error fetching {uri}")
            raise ImageFetchError(uri, "network", str(exc)) from exc
        finally:
            with self._lock:
                self._in_flight.pop(uri, None)

    def _request_bytes(self, uri: str) -> bytes:
        try:
            resp = self.session.get(uri, timeout=self.timeout)
        except requests.Timeout as exc:
            raise ImageFetchError(uri, "timeout", str(exc)) from exc
        except requests.RequestException as exc:
            raise ImageFetchError(uri, "network", str(exc)) from exc

        try:
            resp.raise_for_status()
        except requests.HTTPError as exc:
            raise ImageFetchError(uri, "status", str(exc)) from exc
        return resp.content


def _validate_image(uri: str, content: bytes) -> None:
    if not content:
        raise ImageFetchError(uri, "decode", "empty response body")
    try:
        with Image.open(io.BytesIO(content)) as img:
            img.verify()
    except (
        UnidentifiedImageError,
        Image.DecompressionBombError,
        OSError,
        SyntaxError,
        ValueError,
    ) as exc:
        raise ImageFetchError(uri, "decode", str(exc)) from exc


__all__ = ["CardImageCache", "FETCH_ERROR_KINDS", "ImageFetchError"]
