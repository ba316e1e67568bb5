import wx

from utils.constants import (
    DARK_ACCENT,
    DARK_ALT,
    DARK_BG,
    DARK_PANEL,
    LEGAL_TEXT,
    LIGHT_TEXT,
    NOT_LEGAL_TEXT,
    SUBDUED_TEXT,
)


def stylize_label(label: wx.StaticText, subtle: bool = False) -> None:
    label.SetForegroundColour(SUBDUED_TEXT if subtle else LIGHT_TEXT)
    font = label.GetFont()
    if not subtle:
        font.MakeBold()
    label.SetFont(font)


def stylize_title(label: wx.StaticText, grow: int = 10) -> None:
    label.SetForegroundColour(LIGHT_TEXT)
    font = label.GetFont()
    font.SetPointSize(font.GetPointSize() + grow)
    font.MakeBold()
    label.SetFont(font)


def stylize_legality(label: wx.StaticText, is_legal: bool) -> None:
    label.SetForegroundColour(LEGAL_TEXT if is_legal else NOT_LEGAL_TEXT)


def stylize_textctrl(ctrl: wx.TextCtrl, multiline: bool = False) -> None:
    ctrl.SetBackgroundColour(DARK_ALT)
    ctrl.SetForegroundColour(LIGHT_TEXT)
    font = ctrl.GetFont()
    if multiline:
        font.SetPointSize(font.GetPointSize() + 1)
    ctrl.SetFont(font)


def stylize_choice(ctrl: wx.Choice) -> None:
    ctrl.SetBackgroundColour(DARK_ALT)
    ctrl.SetForegroundColour(LIGHT_TEXT)


def stylize_button(button: wx.Button) -> None:
    button.SetBackgroundColour(DARK_ACCENT)
    button.SetForegroundColour(wx.Colour(12, 14, 18))
    font = button.GetFont()
    font.MakeBold()
    button.SetFont(font)


def stylize_panel(panel: wx.Window, alt: bool = False) -> None:
    panel.SetBackgroundColour(DARK_PANEL if alt else DARK_BG)
