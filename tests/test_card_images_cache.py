"""Tests for the in-memory card image cache."""

from __future__ import annotations

import io
import threading

import pytest
import requests
from PIL import Image

from utils.card_images import CardImageCache, ImageFetchError

URI = "https://img.test/art_crop/card.jpg"


def _png_bytes() -> bytes:
    buffer = io.BytesIO()
    Image.new("RGB", (4, 3), (200, 30, 30)).save(buffer, format="PNG")
    return buffer.getvalue()


class FakeResponse:
    def __init__(self, content: bytes = b"", status: int = 200) -> None:
        self.content = content
        self.status_code = status

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Client Error")


class FakeSession:
    """Stands in for requests.Session; optionally blocks until released."""

    def __init__(self, responses=None, gate: threading.Event | None = None) -> None:
        self.responses = list(responses or [])
        self.gate = gate
        self.calls: list[tuple[str, float]] = []
        self.started = threading.Event()

    def get(self, uri, timeout=None):
        self.calls.append((uri, timeout))
        self.started.set()
        if self.gate is not None:
            self.gate.wait(5)
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


@pytest.fixture
def make_cache():
    caches: list[CardImageCache] = []

    def factory(session, **kwargs) -> CardImageCache:
        cache = CardImageCache(session=session, **kwargs)
        caches.append(cache)
        return cache

    yield factory
    for cache in caches:
        cache.shutdown(wait=True)


def test_fetch_populates_cache_before_future_resolves(make_cache):
    content = _png_bytes()
    cache = make_cache(FakeSession([FakeResponse(content)]))

    assert cache.get(URI) is None
    result = cache.fetch(URI).result(timeout=5)

    assert result == content
    assert cache.get(URI) == content
    assert not cache.is_pending(URI)
    assert cache.cached_count() == 1


def test_concurrent_requests_share_one_download(make_cache):
    gate = threading.Event()
    session = FakeSession([FakeResponse(_png_bytes())], gate=gate)
    cache = make_cache(session)

    first = cache.fetch(URI)
    assert session.started.wait(5)
    second = cache.fetch(URI)
    assert cache.is_pending(URI)
    gate.set()

    assert first is second
    assert first.result(timeout=5) == second.result(timeout=5)
    assert len(session.calls) == 1


def test_cached_uri_is_not_downloaded_again(make_cache):
    session = FakeSession([FakeResponse(_png_bytes())])
    cache = make_cache(session)
    cache.fetch(URI).result(timeout=5)

    again = cache.fetch(URI)

    assert again.done()
    assert again.result() == cache.get(URI)
    assert len(session.calls) == 1


def test_timeout_is_passed_to_session(make_cache):
    session = FakeSession([FakeResponse(_png_bytes())])
    cache = make_cache(session, timeout=2.5)

    cache.fetch(URI).result(timeout=5)

    assert session.calls == [(URI, 2.5)]


@pytest.mark.parametrize(
    ("response", "kind"),
    [
        (requests.Timeout("read timed out"), "timeout"),
        (requests.ConnectionError("no route"), "network"),
        (FakeResponse(b"missing", status=404), "status"),
        (FakeResponse(b"not an image"), "decode"),
        (FakeResponse(b""), "decode"),
    ],
)
def test_failures_report_kind(make_cache, response, kind):
    cache = make_cache(FakeSession([response]))

    with pytest.raises(ImageFetchError) as excinfo:
        cache.fetch(URI).result(timeout=5)

    assert excinfo.value.kind == kind
    assert excinfo.value.uri == URI


def test_failures_are_not_cached(make_cache):
    content = _png_bytes()
    session = FakeSession([FakeResponse(b"", status=500), FakeResponse(content)])
    cache = make_cache(session)

    with pytest.raises(ImageFetchError):
        cache.fetch(URI).result(timeout=5)
    assert cache.get(URI) is None
    assert not cache.is_pending(URI)

    assert cache.fetch(URI).result(timeout=5) == content
    assert len(session.calls) == 2


def test_clear_forgets_images(make_cache):
    session = FakeSession([FakeResponse(_png_bytes()), FakeResponse(_png_bytes())])
    cache = make_cache(session)
    cache.fetch(URI).result(timeout=5)

    cache.clear()

    assert cache.get(URI) is None
    cache.fetch(URI).result(timeout=5)
    assert len(session.calls) == 2


def test_unexpected_session_error_can_be_retried(make_cache):
    content = _png_bytes()
    session = FakeSession([RuntimeError("adapter blew up"), FakeResponse(content)])
    cache = make_cache(session)

    first = cache.fetch(URI)
    with pytest.raises(ImageFetchError) as excinfo:
        first.result(timeout=5)
    assert excinfo.value.kind == "network"
    assert not cache.is_pending(URI)
    assert cache.get(URI) is None

    second = cache.fetch(URI)

    assert second is not first
    assert second.result(timeout=5) == content
    assert len(session.calls) == 2


def test_oversized_image_is_a_decode_error(make_cache, monkeypatch):
    monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 2)
    cache = make_cache(FakeSession([FakeResponse(_png_bytes())]))

    with pytest.raises(ImageFetchError) as excinfo:
        cache.fetch(URI).result(timeout=5)

    assert excinfo.value.kind == "decode"
    assert not cache.is_pending(URI)
    assert cache.get(URI) is None
