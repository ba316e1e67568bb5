"""Tests for ImageService - UI delivery and per-request cancellation."""

from __future__ import annotations

import threading
from concurrent.futures import Future
from unittest.mock import Mock

import pytest

from services.image_service import ImageService, get_image_service, reset_image_service
from utils.card_images import ImageFetchError

URI = "https://img.test/art_crop/card.jpg"


class ControlledCache:
    """Cache double whose futures the test resolves by hand."""

    def __init__(self) -> None:
        self.futures: dict[str, Future] = {}
        self.images: dict[str, bytes] = {}
        self.cleared = False
        self.shut_down = False

    def get(self, uri):
        return self.images.get(uri)

    def fetch(self, uri):
        return self.futures.setdefault(uri, Future())

    def clear(self):
        self.cleared = True

    def shutdown(self):
        self.shut_down = True


def immediate(callback, *args):
    callback(*args)


@pytest.fixture
def cache():
    return ControlledCache()


@pytest.fixture
def service(cache):
    return ImageService(image_cache=cache, dispatcher=immediate)


def test_success_is_delivered(service, cache):
    on_success, on_error = Mock(), Mock()

    service.request_image(URI, on_success, on_error)
    cache.futures[URI].set_result(b"png")

    on_success.assert_called_once_with(b"png")
    on_error.assert_not_called()


def test_error_is_delivered_with_kind(service, cache):
    on_success, on_error = Mock(), Mock()

    service.request_image(URI, on_success, on_error)
    cache.futures[URI].set_exception(ImageFetchError(URI, "status", "404"))

    on_success.assert_not_called()
    error = on_error.call_args.args[0]
    assert isinstance(error, ImageFetchError)
    assert error.kind == "status"


def test_unexpected_exception_becomes_network_error(service, cache):
    on_error = Mock()

    service.request_image(URI, Mock(), on_error)
    cache.futures[URI].set_exception(RuntimeError("socket closed"))

    assert on_error.call_args.args[0].kind == "network"


def test_cancelled_request_gets_no_callback(service, cache):
    on_success, on_error = Mock(), Mock()

    request = service.request_image(URI, on_success, on_error)
    request.cancel()
    cache.futures[URI].set_result(b"png")

    assert request.cancelled
    on_success.assert_not_called()
    on_error.assert_not_called()


def test_cancel_only_affects_its_own_request(service, cache):
    kept, dropped = Mock(), Mock()

    first = service.request_image(URI, dropped, Mock())
    service.request_image(URI, kept, Mock())
    first.cancel()
    cache.futures[URI].set_result(b"png")

    dropped.assert_not_called()
    kept.assert_called_once_with(b"png")


def test_cancel_between_completion_and_dispatch_is_honoured(cache):
    queued = []
    service = ImageService(image_cache=cache, dispatcher=lambda cb, *args: queued.append((cb, args)))
    on_success = Mock()

    request = service.request_image(URI, on_success, Mock())
    cache.futures[URI].set_result(b"png")
    request.cancel()
    for callback, args in queued:
        callback(*args)

    on_success.assert_not_called()


def test_callbacks_run_through_dispatcher(cache):
    seen_threads = []
    service = ImageService(
        image_cache=cache,
        dispatcher=lambda cb, *args: (seen_threads.append(threading.current_thread()), cb(*args)),
    )
    on_success = Mock()

    service.request_image(URI, on_success, Mock())
    cache.futures[URI].set_result(b"png")

    assert len(seen_threads) == 1
    on_success.assert_called_once()


def test_request_exposes_shared_result(service, cache):
    request = service.request_image(URI, Mock(), Mock())
    assert not request.done

    cache.futures[URI].set_result(b"png")

    assert request.done
    assert request.result(timeout=1) == b"png"


def test_cached_image_and_lifecycle(service, cache):
    cache.images[URI] = b"png"

    assert service.get_cached_image(URI) == b"png"
    assert service.get_cached_image("https://img.test/other.jpg") is None

    service.clear_cache()
    service.shutdown()
    assert cache.cleared
    assert cache.shut_down


def test_get_image_service_is_shared():
    first = get_image_service()
    assert get_image_service() is first
    reset_image_service()
    assert get_image_service() is not first
