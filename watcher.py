"""Clipboard change notification sources."""

from __future__ import annotations

import logging
import time
from typing import Any, Optional

from errors import ClipboardAccessError
from interfaces import ChangeHandler, ClipboardBackend

logger = logging.getLogger(__name__)


class QtClipboardWatcher:
    """Forwards ``QClipboard.dataChanged`` to registered handlers.

    Handlers are called with ``None``; they read the clipboard themselves.
    """

    def __init__(self, clipboard: Any) -> None:
        self._clipboard = clipboard
        self._handlers: list[ChangeHandler] = []
        self._connected = False

    def on_clipboard_changed(self, handler: ChangeHandler) -> None:
        self._handlers.append(handler)

    def start(self) -> None:
        if self._connected:
            return
        self._clipboard.dataChanged.connect(self._on_data_changed)
        self._connected = True

    def stop(self) -> None:
        if not self._connected:
            return
        self._clipboard.dataChanged.disconnect(self._on_data_changed)
        self._connected = False

    def _on_data_changed(self) -> None:
        for handler in list(self._handlers):
            handler(None)


class PollingClipboardWatcher:
    """Polls a clipboard backend on the calling thread."""

    def __init__(self, backend: ClipboardBackend, interval_s: float = 0.3) -> None:
        self._backend = backend
        self._interval_s = interval_s
        self._handlers: list[ChangeHandler] = []
        self._last_text: Optional[str] = None
        self._primed = False
        self._running = False

    @property
    def running(self) -> bool:
        return self._running

    def on_clipboard_changed(self, handler: ChangeHandler) -> None:
        self._handlers.append(handler)

    def start(self) -> None:
        self._running = True

    def stop(self) -> None:
        self._running = False

    def poll_once(self) -> bool:
        """Check the clipboard once; return True if handlers were fired."""
        try:
            text = self._backend.read_text()
        except ClipboardAccessError as exc:
            logger.debug("poll skipped: %s", exc.message)
            return False
        if not self._primed:
            # Content present at startup is not a change.
            self._primed = True
            self._last_text = text
            return False
        if text == self._last_text:
            return False
        self._last_text = text
        if text is None:
            # Non-text content; nothing for handlers to format.
            return False
        for handler in list(self._handlers):
            handler(text)
        return True

    def remember(self, text: str) -> None:
        """Record text written by the app so the next poll does not see a change."""
        self._last_text = text
        self._primed = True

    def run(self, max_polls: int | None = None) -> None:
        self.start()
        polls = 0
        while self._running:
            self.poll_once()
            polls += 1
            if max_polls is not None and polls >= max_polls:
                break
            time.sleep(self._interval_s)
        self._running = False
