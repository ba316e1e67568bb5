#!/usr/bin/env python3
"""wxPython entry point that opens the card catalog window."""

from __future__ import annotations

import sys
import traceback

import wx
from loguru import logger

from controllers.catalog_controller import get_catalog_controller
from utils.app_config import load_app_config
from utils.constants import APP_NAME, LOGS_DIR, ensure_base_dirs
from utils.logging_config import configure_logging


def _log_exception(banner: str, exc_type, exc_value, exc_traceback) -> None:
    logger.error(f"=== {banner} ===")
    logger.error(f"Exception type: {exc_type.__name__}")
    logger.error(f"Exception value: {exc_value}")
    logger.error("Traceback:")
    for line in traceback.format_tb(exc_traceback):
        logger.error(line.rstrip())
    logger.error(f"=== END {banner} ===")


class CatalogApp(wx.App):
    """Bootstrap the catalog window and start loading cards."""

    def OnInit(self) -> bool:  # noqa: N802 - wx override
        logger.info(f"Starting {APP_NAME}")
        self.controller = get_catalog_controller()
        frame = self.controller.create_frame()
        self.SetTopWindow(frame)
        frame.Show()
        self.controller.load_catalog_async(
            on_ready=lambda: logger.info(f"{len(self.controller.view_model.cards)} cards ready")
        )
        return True

    def OnExit(self) -> int:  # noqa: N802 - wx override
        logger.info(f"{APP_NAME} exiting")
        return 0

    def OnExceptionInMainLoop(self) -> bool:  # noqa: N802 - wx override
        """Handle exceptions in the main event loop."""
        exc_type, exc_value, exc_traceback = sys.exc_info()
        _log_exception("UNHANDLED EXCEPTION IN MAIN LOOP", exc_type, exc_value, exc_traceback)

        error_msg = (
            f"An unexpected error occurred:\n\n{exc_type.__name__}: {exc_value}"
            "\n\nCheck the log file for details."
        )
        wx.MessageBox(error_msg, "Application Error", wx.OK | wx.ICON_ERROR)
        return True


def main() -> None:
    ensure_base_dirs()
    config = load_app_config()
    log_file = configure_logging(LOGS_DIR, config.log_level)
    if log_file is not None:
        logger.info(f"Writing logs to {log_file}")

    def global_exception_handler(exc_type, exc_value, exc_traceback):
        _log_exception("UNCAUGHT EXCEPTION (GLOBAL)", exc_type, exc_value, exc_traceback)
        sys.__excepthook__(exc_type, exc_value, exc_traceback)

    sys.excepthook = global_exception_handler

    app = CatalogApp(False)
    app.MainLoop()


if __name__ == "__main__":
    main()
