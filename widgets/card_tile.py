from __future__ import annotations

from collections.abc import Callable

import wx
from loguru import logger

from models.card import Card
from services.image_service import ImageRequest
from utils.card_images import ImageFetchError
from utils.constants import DARK_PANEL, THUMBNAIL_HEIGHT, THUMBNAIL_WIDTH
from widgets.card_image_display import CardImageDisplay

ImageRequester = Callable[
    [str, Callable[[bytes], None], Callable[[ImageFetchError], None]], ImageRequest
]


class CardTile(wx.Panel):
    """Grid cell showing one card's artwork with its name on top."""

    def __init__(
        self,
        parent: wx.Window,
        card: Card,
        image_uri: str,
        request_image: ImageRequester,
        get_cached: Callable[[str], bytes | None],
        on_select: Callable[[Card], None],
    ) -> None:
        super().__init__(parent)
        self.card = card
        self.image_uri = image_uri
        self._request_image = request_image
        self._on_select = on_select
        self._request: ImageRequest | None = None
        self._failed = False

        self.SetBackgroundColour(DARK_PANEL)
        sizer = wx.BoxSizer(wx.VERTICAL)
        self.SetSizer(sizer)
        self.display = CardImageDisplay(
            self,
            width=THUMBNAIL_WIDTH,
            height=THUMBNAIL_HEIGHT,
            caption=card.name,
            on_click=self._handle_click,
        )
        self.display.SetToolTip(card.name)
        sizer.Add(self.display, 0, wx.ALL, 4)

        self.Bind(wx.EVT_WINDOW_DESTROY, self._on_destroy)

        cached = get_cached(image_uri)
        if cached is not None:
            self.display.show_image_bytes(cached)
        else:
            self.load_image()

    def load_image(self) -> None:
        self._failed = False
        self.display.show_placeholder("Loading…")
        self._request = self._request_image(
            self.image_uri, self._on_image_loaded, self._on_image_failed
        )

    def _on_image_loaded(self, content: bytes) -> None:
        self._request = None
        self.display.show_image_bytes(content)

    def _on_image_failed(self, error: ImageFetchError) -> None:
        self._request = None
        self._failed = True
        logger.info(f"Failed to load image for {self.card.name}: {error}")
        self.display.show_placeholder("Click to retry")

    def _handle_click(self) -> None:
        if self._failed:
            self.load_image()
            return
        self._on_select(self.card)

    def _on_destroy(self, event: wx.WindowDestroyEvent) -> None:
        if event.GetEventObject() is self and self._request is not None:
            self._request.cancel()
            self._request = None
        event.Skip()
