"""
Catalog Frame - Main window with the search bar, sort menu and card grid.

All state lives in the controller's view-model; this frame only renders it
and forwards user input back to the controller.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import wx
from loguru import logger

if TYPE_CHECKING:
    from controllers.catalog_controller import CatalogController

from models.card import Card
from services.catalog_view_model import CatalogViewModel
from services.search_service import SortMode
from utils.constants import DARK_BG, GRID_GAP, SUBDUED_TEXT, WINDOW_TITLE
from utils.mana_icon_factory import ManaIconFactory
from utils.stylize import (
    stylize_button,
    stylize_choice,
    stylize_label,
    stylize_panel,
    stylize_textctrl,
    stylize_title,
)
from widgets.card_details_dialog import CardDetailsDialog
from widgets.card_tile import CardTile

ALL_FORMATS_LABEL = "All formats"

SORT_MENU_ITEMS = (
    ("Sort A-Z", SortMode.ALPHABETICAL, True),
    ("Sort Z-A", SortMode.ALPHABETICAL, False),
    ("Sort by number", SortMode.NUMERIC, None),
)


class CatalogFrame(wx.Frame):
    """Browsable grid of every card in the catalog."""

    def __init__(self, controller: CatalogController, parent: wx.Window | None = None):
        super().__init__(parent, title=WINDOW_TITLE, size=(1100, 780))
        self.controller = controller
        self.view_model: CatalogViewModel = controller.view_model
        self.mana_icons = ManaIconFactory()
        self.tiles: list[CardTile] = []
        self._rendered: tuple[str, ...] | None = None
        self._shown_card: Card | None = None
        self._format_choices: list[str] = []

        self._build_ui()
        self.view_model.subscribe(self._on_view_model_changed)
        self.Bind(wx.EVT_CLOSE, self._on_close)
        self.SetMinSize((480, 420))
        self.Centre(wx.BOTH)
        self.render()

    # ============= Layout =============

    def _build_ui(self) -> None:
        self.SetBackgroundColour(DARK_BG)
        root = wx.Panel(self)
        stylize_panel(root)
        outer = wx.BoxSizer(wx.VERTICAL)
        root.SetSizer(outer)

        title = wx.StaticText(root, label=WINDOW_TITLE)
        stylize_title(title)
        outer.Add(title, 0, wx.LEFT | wx.RIGHT | wx.TOP, 16)

        toolbar = wx.BoxSizer(wx.HORIZONTAL)
        outer.Add(toolbar, 0, wx.EXPAND | wx.ALL, 16)

        self.search_ctrl = wx.SearchCtrl(root, style=wx.TE_PROCESS_ENTER)
        self.search_ctrl.ShowCancelButton(True)
        self.search_ctrl.SetDescriptiveText("Search cards by name")
        stylize_textctrl(self.search_ctrl)
        self.search_ctrl.Bind(wx.EVT_TEXT, self._on_search_text)
        self.search_ctrl.Bind(wx.EVT_SEARCHCTRL_CANCEL_BTN, self._on_search_cancel)
        toolbar.Add(self.search_ctrl, 1, wx.EXPAND | wx.RIGHT, 8)

        self.format_choice = wx.Choice(root)
        stylize_choice(self.format_choice)
        self.format_choice.Bind(wx.EVT_CHOICE, self._on_format_choice)
        toolbar.Add(self.format_choice, 0, wx.ALIGN_CENTER_VERTICAL | wx.RIGHT, 8)

        self.sort_button = wx.Button(root, label="Sort")
        stylize_button(self.sort_button)
        self.sort_button.Bind(wx.EVT_BUTTON, self._on_sort_button)
        toolbar.Add(self.sort_button, 0, wx.ALIGN_CENTER_VERTICAL | wx.RIGHT, 8)

        self.reload_button = wx.Button(root, label="Reload images")
        stylize_button(self.reload_button)
        self.reload_button.Bind(wx.EVT_BUTTON, lambda _evt: self.controller.reload_images())
        toolbar.Add(self.reload_button, 0, wx.ALIGN_CENTER_VERTICAL)

        self.summary_label = wx.StaticText(root, label="")
        stylize_label(self.summary_label, subtle=True)
        outer.Add(self.summary_label, 0, wx.LEFT | wx.RIGHT | wx.BOTTOM, 16)

        self.empty_label = wx.StaticText(root, label="", style=wx.ALIGN_CENTRE_HORIZONTAL)
        self.empty_label.SetForegroundColour(SUBDUED_TEXT)
        outer.Add(self.empty_label, 0, wx.EXPAND | wx.ALL, 24)

        self.grid_window = wx.ScrolledWindow(root, style=wx.VSCROLL)
        stylize_panel(self.grid_window, alt=True)
        self.grid_window.SetScrollRate(0, 20)
        self.grid_sizer = wx.WrapSizer(wx.HORIZONTAL)
        self.grid_window.SetSizer(self.grid_sizer)
        outer.Add(self.grid_window, 1, wx.EXPAND | wx.LEFT | wx.RIGHT | wx.BOTTOM, 16)

        self.root_panel = root

    # ============= Rendering =============

    def render(self) -> None:
        """Redraw the grid, the filter choices and the empty state."""
        cards = self.view_model.sorted_filtered_cards()
        self._refresh_format_choices()
        self._rebuild_tiles(cards)

        message = self.controller.empty_state_message()
        self.empty_label.SetLabel(message or "")
        self.empty_label.Show(message is not None)
        self.grid_window.Show(message is None)

        total = len(self.view_model.cards)
        self.summary_label.SetLabel(f"{len(cards)} of {total} cards" if total else "")
        self.root_panel.Layout()

    def _rebuild_tiles(self, cards: list[Card]) -> None:
        self.grid_window.Freeze()
        try:
            self.grid_sizer.Clear(delete_windows=True)
            self.tiles = []
            for card in cards:
                tile = CardTile(
                    self.grid_window,
                    card,
                    self.controller.thumbnail_uri(card),
                    self.controller.request_image,
                    self.controller.image_service.get_cached_image,
                    self.controller.open_card,
                )
                self.grid_sizer.Add(tile, 0, wx.ALL, GRID_GAP // 2)
                self.tiles.append(tile)
            self.grid_window.FitInside()
            self.grid_window.Scroll(0, 0)
        finally:
            self.grid_window.Thaw()
        self._rendered = tuple(card.identity for card in cards)

    def _refresh_format_choices(self) -> None:
        formats = self.view_model.available_formats()
        if formats == self._format_choices:
            return
        self._format_choices = formats
        self.format_choice.Set([ALL_FORMATS_LABEL] + [fmt.title() for fmt in formats])
        current = self.view_model.format_filter
        index = formats.index(current) + 1 if current in formats else 0
        self.format_choice.SetSelection(index)

    # ============= View-Model Events =============

    def _on_view_model_changed(self, view_model: CatalogViewModel) -> None:
        selected = view_model.selected_card
        if selected is not self._shown_card:
            self._shown_card = selected
            if selected is not None:
                wx.CallAfter(self._show_card_details, selected)
            visible = tuple(card.identity for card in view_model.sorted_filtered_cards())
            if visible == self._rendered:
                return
        self.render()

    def _show_card_details(self, card: Card) -> None:
        logger.debug(f"Opening details for {card.name}")
        dialog = CardDetailsDialog(
            self,
            card,
            self.controller.detail_uri(card),
            self.controller.zoom_uri(card),
            self.controller.request_image,
            self.controller.image_service.get_cached_image,
            mana_icons=self.mana_icons,
        )
        try:
            dialog.ShowModal()
        finally:
            dialog.Destroy()
            self.controller.close_card()

    # ============= Input Handlers =============

    def _on_search_text(self, event: wx.CommandEvent) -> None:
        self.controller.search(self.search_ctrl.GetValue())
        event.Skip()

    def _on_search_cancel(self, _event: wx.CommandEvent) -> None:
        self.search_ctrl.ChangeValue("")
        self.controller.clear_search()

    def _on_format_choice(self, _event: wx.CommandEvent) -> None:
        index = self.format_choice.GetSelection()
        if index <= 0:
            self.controller.filter_format(None)
        else:
            self.controller.filter_format(self._format_choices[index - 1])

    def _on_sort_button(self, _event: wx.CommandEvent) -> None:
        menu = wx.Menu()
        for label, mode, ascending in SORT_MENU_ITEMS:
            item = menu.AppendCheckItem(wx.ID_ANY, label)
            item.Check(self._is_active_sort(mode, ascending))
            self.Bind(
                wx.EVT_MENU,
                lambda _evt, m=mode, asc=ascending: self._apply_sort(m, asc),
                item,
            )
        menu.AppendSeparator()
        reverse_item = menu.Append(wx.ID_ANY, "Reverse order")
        self.Bind(wx.EVT_MENU, lambda _evt: self.controller.reverse_sort(), reverse_item)
        self.sort_button.PopupMenu(menu)
        menu.Destroy()

    def _is_active_sort(self, mode: SortMode, ascending: bool | None) -> bool:
        if self.view_model.sort_mode is not mode:
            return False
        return ascending is None or self.view_model.ascending == ascending

    def _apply_sort(self, mode: SortMode, ascending: bool | None) -> None:
        if mode is SortMode.NUMERIC:
            self.controller.sort_by_number()
        else:
            self.controller.sort_alphabetical(bool(ascending))

    def _on_close(self, event: wx.CloseEvent) -> None:
        self.view_model.unsubscribe(self._on_view_model_changed)
        self.controller.shutdown()
        event.Skip()
