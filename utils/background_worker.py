from __future__ import annotations

import threading
from collections.abc import Callable
from typing import Any

from loguru import logger

__all__ = ["BackgroundWorker", "Dispatcher", "call_on_ui_thread"]

Dispatcher = Callable[..., None]


def call_on_ui_thread(callback: Callable[..., Any], *args: Any) -> None:
    """Marshal callback to UI thread if wx is available, otherwise call directly."""
    try:
        import wx
    except ImportError:
        callback(*args)
        return
    wx.CallAfter(callback, *args)


class BackgroundWorker:
    """Runs blocking work in daemon threads and hands results to the UI thread."""

    def __init__(self, dispatcher: Dispatcher | None = None) -> None:
        self._dispatch = dispatcher or call_on_ui_thread
        self._stop_event = threading.Event()
        self._threads: list[threading.Thread] = []
        self._lock = threading.Lock()

    def submit(
        self,
        func: Callable[..., Any],
        *args: Any,
        on_success: Callable[[Any], None] | None = None,
        on_error: Callable[[Exception], None] | None = None,
        **kwargs: Any,
    ) -> None:
        """Submit a task to run in a background thread.

        Args:
            func: The function to execute
            *args: Positional arguments for func
            on_success: Optional callback for successful completion (marshaled to UI thread)
            on_error: Optional callback for errors (marshaled to UI thread)
            **kwargs: Keyword arguments for func
        """

        def wrapper():
            try:
                result = func(*args, **kwargs)
            except Exception as exc:
                logger.exception(f"Background task failed: {exc}")
                if on_error and not self.is_stopped():
                    self._dispatch(on_error, exc)
                return

            if on_success and not self.is_stopped():
                self._dispatch(on_success, result)

        thread = threading.Thread(target=wrapper, daemon=True)
        with self._lock:
            self._threads.append(thread)
        thread.start()
        logger.debug(f"Started background thread: {getattr(func, '__name__', func)}")

    def is_stopped(self) -> bool:
        return self._stop_event.is_set()

    def shutdown(self, timeout: float = 5.0) -> None:
        """Signal all threads to stop and wait for them to finish."""
        logger.info("Shutting down background worker...")
        self._stop_event.set()

        with self._lock:
            threads = list(self._threads)

        for thread in threads:
            if thread.is_alive():
                thread.join(timeout=timeout)
                if thread.is_alive():
                    logger.warning(f"Thread {thread.name} did not finish within {timeout}s")

        logger.info("Background worker shutdown complete")

    def __enter__(self) -> BackgroundWorker:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.shutdown()
