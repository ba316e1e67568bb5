"""
Card Details Dialog - Larger artwork, rules text, prices and legalities.

Clicking the artwork opens the full bordered card image in a zoom dialog.
"""

from __future__ import annotations

from collections.abc import Callable

import wx
from loguru import logger

from models.card import Card
from services.image_service import ImageRequest
from utils.card_formatting import games_label, legality_rows, price_lines
from utils.card_images import ImageFetchError
from utils.constants import DARK_BG, DARK_PANEL, LIGHT_TEXT, SUBDUED_TEXT
from utils.mana_icon_factory import ManaIconFactory
from utils.mana_symbols import mana_value
from utils.stylize import stylize_label, stylize_legality, stylize_textctrl, stylize_title
from widgets.card_image_display import CardImageDisplay

ImageRequester = Callable[
    [str, Callable[[bytes], None], Callable[[ImageFetchError], None]], ImageRequest
]


class _RemoteImageMixin:
    """Loads one image into ``self.display`` and cancels the request on close."""

    display: CardImageDisplay
    _request: ImageRequest | None = None

    def _load_remote_image(
        self,
        uri: str,
        request_image: ImageRequester,
        get_cached: Callable[[str], bytes | None],
    ) -> None:
        cached = get_cached(uri)
        if cached is not None:
            self.display.show_image_bytes(cached)
            return
        self._request = request_image(uri, self._on_image_loaded, self._on_image_failed)

    def _on_image_loaded(self, content: bytes) -> None:
        self._request = None
        self.display.show_image_bytes(content)

    def _on_image_failed(self, error: ImageFetchError) -> None:
        self._request = None
        logger.info(f"Detail image failed: {error}")
        self.display.show_placeholder("Image unavailable")

    def _cancel_image_request(self) -> None:
        if self._request is not None:
            self._request.cancel()
            self._request = None


class CardZoomDialog(_RemoteImageMixin, wx.Dialog):
    """Shows the full bordered card image."""

    def __init__(
        self,
        parent: wx.Window,
        card: Card,
        image_uri: str,
        request_image: ImageRequester,
        get_cached: Callable[[str], bytes | None],
    ) -> None:
        super().__init__(parent, title=card.name, style=wx.DEFAULT_DIALOG_STYLE)
        self.SetBackgroundColour(DARK_BG)
        sizer = wx.BoxSizer(wx.VERTICAL)
        self.display = CardImageDisplay(self, width=480, height=670, on_click=self.Close)
        sizer.Add(self.display, 1, wx.EXPAND | wx.ALL, 10)
        self.SetSizerAndFit(sizer)
        self.Bind(wx.EVT_CLOSE, self._on_close)
        self._load_remote_image(image_uri, request_image, get_cached)

    def _on_close(self, event: wx.CloseEvent) -> None:
        self._cancel_image_request()
        event.Skip()


class CardDetailsDialog(_RemoteImageMixin, wx.Dialog):
    """Detail screen for a single card."""

    def __init__(
        self,
        parent: wx.Window,
        card: Card,
        art_uri: str,
        zoom_uri: str,
        request_image: ImageRequester,
        get_cached: Callable[[str], bytes | None],
        mana_icons: ManaIconFactory | None = None,
    ) -> None:
        super().__init__(
            parent,
            title=card.name,
            size=(560, 820),
            style=wx.DEFAULT_DIALOG_STYLE | wx.RESIZE_BORDER,
        )
        self.card = card
        self.zoom_uri = zoom_uri
        self._request_image = request_image
        self._get_cached = get_cached
        self.mana_icons = mana_icons or ManaIconFactory()

        self.SetBackgroundColour(DARK_BG)
        self._build_ui()
        self.Bind(wx.EVT_CLOSE, self._on_close)
        self._load_remote_image(art_uri, request_image, get_cached)

    def _build_ui(self) -> None:
        card = self.card
        outer = wx.BoxSizer(wx.VERTICAL)
        self.SetSizer(outer)

        scroller = wx.ScrolledWindow(self, style=wx.VSCROLL)
        scroller.SetBackgroundColour(DARK_BG)
        scroller.SetScrollRate(5, 5)
        content = wx.BoxSizer(wx.VERTICAL)
        scroller.SetSizer(content)
        outer.Add(scroller, 1, wx.EXPAND)

        self.display = CardImageDisplay(
            scroller, width=500, height=365, on_click=self._open_zoom
        )
        self.display.SetToolTip("Click to view the full card")
        content.Add(self.display, 0, wx.ALIGN_CENTER_HORIZONTAL | wx.ALL, 10)

        name_label = wx.StaticText(scroller, label=card.name)
        stylize_title(name_label, grow=6)
        content.Add(name_label, 0, wx.ALIGN_CENTER_HORIZONTAL | wx.BOTTOM, 6)

        cost_row = wx.BoxSizer(wx.HORIZONTAL)
        cost_row.Add(self.mana_icons.render(scroller, card.mana_cost), 0, wx.ALIGN_CENTER_VERTICAL)
        if card.mana_cost:
            mv_label = wx.StaticText(scroller, label=f"MV {mana_value(card.mana_cost)}")
            mv_label.SetForegroundColour(SUBDUED_TEXT)
            cost_row.Add(mv_label, 0, wx.ALIGN_CENTER_VERTICAL | wx.LEFT, 8)
        content.Add(cost_row, 0, wx.LEFT | wx.RIGHT | wx.BOTTOM, 10)

        type_label = wx.StaticText(scroller, label=card.type_line)
        stylize_label(type_label)
        content.Add(type_label, 0, wx.LEFT | wx.RIGHT | wx.BOTTOM, 10)

        if card.oracle_text:
            text_ctrl = wx.TextCtrl(
                scroller,
                value=card.oracle_text,
                style=wx.TE_MULTILINE | wx.TE_READONLY | wx.TE_WORDWRAP | wx.NO_BORDER,
            )
            stylize_textctrl(text_ctrl, multiline=True)
            text_ctrl.SetMinSize((-1, 110))
            content.Add(text_ctrl, 0, wx.EXPAND | wx.LEFT | wx.RIGHT | wx.BOTTOM, 10)

        content.Add(self._build_section(scroller, "Prices", price_lines(card)), 0, wx.EXPAND | wx.ALL, 10)

        games_text = wx.StaticText(scroller, label=f"Available on: {games_label(card)}")
        games_text.SetForegroundColour(SUBDUED_TEXT)
        content.Add(games_text, 0, wx.LEFT | wx.RIGHT | wx.BOTTOM, 10)

        content.Add(self._build_legalities(scroller), 0, wx.EXPAND | wx.ALL, 10)
        scroller.FitInside()

    def _build_section(
        self, parent: wx.Window, title: str, rows: list[tuple[str, str]]
    ) -> wx.Window:
        panel = wx.Panel(parent)
        panel.SetBackgroundColour(DARK_PANEL)
        sizer = wx.BoxSizer(wx.VERTICAL)
        panel.SetSizer(sizer)

        heading = wx.StaticText(panel, label=title)
        stylize_label(heading)
        sizer.Add(heading, 0, wx.ALL, 8)

        if not rows:
            empty = wx.StaticText(panel, label="No price data")
            empty.SetForegroundColour(SUBDUED_TEXT)
            sizer.Add(empty, 0, wx.LEFT | wx.RIGHT | wx.BOTTOM, 8)
            return panel

        grid = wx.FlexGridSizer(0, 2, 4, 12)
        grid.AddGrowableCol(0, 1)
        for label, value in rows:
            key_label = wx.StaticText(panel, label=label)
            key_label.SetForegroundColour(SUBDUED_TEXT)
            value_label = wx.StaticText(panel, label=value)
            value_label.SetForegroundColour(LIGHT_TEXT)
            grid.Add(key_label, 0, wx.EXPAND)
            grid.Add(value_label, 0, wx.ALIGN_RIGHT)
        sizer.Add(grid, 0, wx.EXPAND | wx.LEFT | wx.RIGHT | wx.BOTTOM, 8)
        return panel

    def _build_legalities(self, parent: wx.Window) -> wx.Window:
        panel = wx.Panel(parent)
        panel.SetBackgroundColour(DARK_PANEL)
        sizer = wx.BoxSizer(wx.VERTICAL)
        panel.SetSizer(sizer)

        heading = wx.StaticText(panel, label="Legalities")
        stylize_label(heading)
        sizer.Add(heading, 0, wx.ALL, 8)

        grid = wx.FlexGridSizer(0, 2, 4, 12)
        grid.AddGrowableCol(0, 1)
        for row in legality_rows(self.card):
            format_label = wx.StaticText(panel, label=row.format_label)
            format_label.SetForegroundColour(LIGHT_TEXT)
            status_label = wx.StaticText(panel, label=row.status_label)
            stylize_legality(status_label, row.is_legal)
            grid.Add(format_label, 0, wx.EXPAND)
            grid.Add(status_label, 0, wx.ALIGN_RIGHT)
        sizer.Add(grid, 0, wx.EXPAND | wx.LEFT | wx.RIGHT | wx.BOTTOM, 8)
        return panel

    def _open_zoom(self) -> None:
        dialog = CardZoomDialog(
            self, self.card, self.zoom_uri, self._request_image, self._get_cached
        )
        dialog.ShowModal()
        dialog.Destroy()

    def _on_close(self, event: wx.CloseEvent) -> None:
        self._cancel_image_request()
        event.Skip()
