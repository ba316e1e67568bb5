"""Card image display widget.

Features:
- Display card artwork from downloaded bytes with rounded corners
- Optional caption overlaid along the top edge (card name on grid tiles)
- Placeholder text while loading or after a failed download
"""

from __future__ import annotations

import io
from collections.abc import Callable

import wx
from loguru import logger


class CardImageDisplay(wx.Panel):
    """A panel that displays one card image scaled to fit."""

    def __init__(
        self,
        parent: wx.Window,
        width: int = 260,
        height: int = 360,
        caption: str | None = None,
        on_click: Callable[[], None] | None = None,
    ):
        """Initialize the card image display.

        Args:
            parent: Parent window
            width: Image display width in pixels
            height: Image display height in pixels
            caption: Text drawn over the top of the image
            on_click: Called when the image is clicked
        """
        super().__init__(parent)

        self.image_width = width
        self.image_height = height
        self.corner_radius = 8
        self.caption = caption
        self._on_click = on_click
        self.has_image = False

        self.SetMinSize((width, height))
        self.SetBackgroundColour(parent.GetBackgroundColour())

        sizer = wx.BoxSizer(wx.VERTICAL)
        self.bitmap_ctrl = wx.StaticBitmap(self, size=(width, height))
        self.bitmap_ctrl.Bind(wx.EVT_LEFT_UP, self._on_bitmap_left_click)
        sizer.Add(self.bitmap_ctrl, 1, wx.EXPAND)
        self.SetSizer(sizer)

        self.show_placeholder()

    def show_placeholder(self, text: str = "Loading…") -> None:
        """Display a placeholder with optional text."""
        self.has_image = False
        self.bitmap_ctrl.SetBitmap(self._create_placeholder_bitmap(text))
        self.Refresh()

    def show_image_bytes(self, content: bytes) -> bool:
        """Display an image decoded from raw bytes.

        Returns:
            True if the image decoded and is shown, False otherwise
        """
        img = wx.Image(io.BytesIO(content), wx.BITMAP_TYPE_ANY)
        if not img.IsOk():
            logger.debug("wx could not decode image bytes")
            self.show_placeholder("Image unavailable")
            return False

        scale = min(self.image_width / img.GetWidth(), self.image_height / img.GetHeight())
        img = img.Scale(
            max(1, int(img.GetWidth() * scale)),
            max(1, int(img.GetHeight() * scale)),
            wx.IMAGE_QUALITY_HIGH,
        )
        self.bitmap_ctrl.SetBitmap(self._create_rounded_bitmap(img))
        self.has_image = True
        self.Refresh()
        return True

    def _on_bitmap_left_click(self, event: wx.MouseEvent) -> None:
        if self._on_click is not None:
            self._on_click()
        event.Skip()

    def _create_rounded_bitmap(self, image: wx.Image) -> wx.Bitmap:
        bitmap = wx.Bitmap(self.image_width, self.image_height)
        dc = wx.MemoryDC(bitmap)
        dc.SetBackground(wx.Brush(self.GetBackgroundColour()))
        dc.Clear()

        x = (self.image_width - image.GetWidth()) // 2
        y = (self.image_height - image.GetHeight()) // 2

        gc = wx.GraphicsContext.Create(dc)
        if gc:
            path = gc.CreatePath()
            path.AddRoundedRectangle(
                x, y, image.GetWidth(), image.GetHeight(), self.corner_radius
            )
            gc.DrawBitmap(wx.Bitmap(image), x, y, image.GetWidth(), image.GetHeight())
            gc.SetPen(wx.Pen(wx.Colour(60, 60, 60), 1))
            gc.SetBrush(wx.TRANSPARENT_BRUSH)
            gc.DrawPath(path)
        else:
            dc.DrawBitmap(wx.Bitmap(image), x, y, True)

        if self.caption:
            self._draw_caption(dc, y)

        dc.SelectObject(wx.NullBitmap)
        return bitmap

    def _draw_caption(self, dc: wx.DC, top: int) -> None:
        font = wx.Font(10, wx.FONTFAMILY_SWISS, wx.FONTSTYLE_NORMAL, wx.FONTWEIGHT_BOLD)
        dc.SetFont(font)
        _, text_height = dc.GetTextExtent(self.caption)
        band_height = text_height + 12

        gc = wx.GraphicsContext.Create(dc)
        if gc:
            gc.SetPen(wx.TRANSPARENT_PEN)
            gc.SetBrush(wx.Brush(wx.Colour(0, 0, 0, 102)))
            gc.DrawRectangle(0, top, self.image_width, band_height)

        dc.SetTextForeground(wx.Colour(255, 255, 255))
        dc.DrawText(self.caption, 8, top + 6)

    def _create_placeholder_bitmap(self, text: str) -> wx.Bitmap:
        bitmap = wx.Bitmap(self.image_width, self.image_height)
        dc = wx.MemoryDC(bitmap)

        dc.SetBackground(wx.Brush(self.GetBackgroundColour()))
        dc.Clear()

        dc.SetPen(wx.Pen(wx.Colour(80, 80, 80), 2))
        dc.SetBrush(wx.Brush(wx.Colour(50, 50, 50)))
        dc.DrawRoundedRectangle(
            5, 5, self.image_width - 10, self.image_height - 10, self.corner_radius
        )

        dc.SetTextForeground(wx.Colour(150, 150, 150))
        font = wx.Font(11, wx.FONTFAMILY_DEFAULT, wx.FONTSTYLE_NORMAL, wx.FONTWEIGHT_NORMAL)
        dc.SetFont(font)

        lines = [self.caption, text] if self.caption else [text]
        heights = [dc.GetTextExtent(line)[1] for line in lines]
        y = (self.image_height - sum(heights) - 4 * (len(lines) - 1)) // 2
        for line, line_height in zip(lines, heights):
            text_width, _ = dc.GetTextExtent(line)
            dc.DrawText(line, (self.image_width - text_width) // 2, y)
            y += line_height + 4

        dc.SelectObject(wx.NullBitmap)
        return bitmap
