"""Render mana cost tokens as small round icons."""

from __future__ import annotations

import wx

from utils.constants import SUBDUED_TEXT
from utils.mana_symbols import symbol_colors, tokenize_mana_symbols


class ManaIconFactory:
    FALLBACK_COLORS = {
        "W": (253, 251, 206),
        "U": (188, 218, 247),
        "B": (128, 115, 128),
        "R": (241, 155, 121),
        "G": (159, 203, 166),
        "C": (208, 198, 187),
        "multicolor": (246, 223, 138),
    }

    def __init__(self, icon_size: int = 22) -> None:
        self.icon_size = icon_size
        self._cache: dict[str, wx.Bitmap] = {}

    def render(self, parent: wx.Window, mana_cost: str) -> wx.Window:
        panel = wx.Panel(parent)
        panel.SetBackgroundColour(parent.GetBackgroundColour())
        sizer = wx.BoxSizer(wx.HORIZONTAL)
        panel.SetSizer(sizer)
        tokens = tokenize_mana_symbols(mana_cost)
        if not tokens:
            label = wx.StaticText(panel, label="—")
            label.SetForegroundColour(SUBDUED_TEXT)
            sizer.Add(label)
            return panel
        for idx, token in enumerate(tokens):
            icon = wx.StaticBitmap(panel, bitmap=self.bitmap_for_symbol(token))
            icon.SetToolTip(f"{{{token}}}")
            margin = 2 if idx < len(tokens) - 1 else 0
            sizer.Add(icon, 0, wx.RIGHT, margin)
        return panel

    def bitmap_for_symbol(self, symbol: str) -> wx.Bitmap:
        if symbol in self._cache:
            return self._cache[symbol]

        size = self.icon_size
        bmp = wx.Bitmap(size, size, 32)
        bmp.UseAlpha()
        dc = wx.MemoryDC(bmp)
        dc.SetBackground(wx.TRANSPARENT_BRUSH)
        dc.Clear()
        gctx = wx.GraphicsContext.Create(dc)
        gctx.SetPen(wx.Pen(wx.Colour(25, 25, 25, 140), 1))
        gctx.SetBrush(wx.Brush(wx.Colour(*self._color_for_symbol(symbol))))
        gctx.DrawEllipse(1, 1, size - 2, size - 2)

        glyph = symbol.replace("/", "")
        font = wx.Font(
            max(6, size // 2 - (len(glyph) - 1) * 2),
            wx.FONTFAMILY_SWISS,
            wx.FONTSTYLE_NORMAL,
            wx.FONTWEIGHT_BOLD,
        )
        gctx.SetFont(font, wx.Colour(20, 20, 20))
        tw, th = gctx.GetTextExtent(glyph)
        gctx.DrawText(glyph, (size - tw) / 2, (size - th) / 2)
        dc.SelectObject(wx.NullBitmap)

        self._cache[symbol] = bmp
        return bmp

    def _color_for_symbol(self, symbol: str) -> tuple[int, int, int]:
        colors = symbol_colors(symbol)
        if len(colors) == 1:
            return self.FALLBACK_COLORS[colors[0]]
        if len(colors) > 1:
            return self.FALLBACK_COLORS["multicolor"]
        return self.FALLBACK_COLORS["C"]
