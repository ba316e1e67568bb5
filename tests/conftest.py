"""Root-level pytest fixtures for the catalog tests.

wx is replaced by a MagicMock when it is not importable so the non-widget
layers can be tested headless. ``wx.CallAfter`` is therefore a no-op here;
tests that need callbacks delivered inject a dispatcher instead.
"""

import sys
from unittest import mock

if "wx" not in sys.modules:
    try:
        import wx  # noqa: F401
    except ImportError:
        wx_mock = mock.MagicMock()
        for offset, flag in enumerate(
            (
                "ALL",
                "EXPAND",
                "LEFT",
                "RIGHT",
                "TOP",
                "BOTTOM",
                "ALIGN_CENTER_VERTICAL",
                "ALIGN_CENTER_HORIZONTAL",
                "VSCROLL",
                "RESIZE_BORDER",
                "DEFAULT_DIALOG_STYLE",
                "TE_MULTILINE",
                "TE_READONLY",
                "TE_WORDWRAP",
                "OK",
                "ICON_ERROR",
            )
        ):
            setattr(wx_mock, flag, 1 << offset)
        wx_mock.Colour = mock.Mock(return_value=mock.MagicMock())
        sys.modules["wx"] = wx_mock

import pytest  # noqa: E402
from test_helpers import reset_all_globals  # noqa: E402


@pytest.fixture(autouse=True)
def reset_global_state():
    """Reset the controller, service and repository singletons after each test."""
    yield
    reset_all_globals()
