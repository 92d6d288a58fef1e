"""Clipboard backends for reading and writing text."""

from __future__ import annotations

import logging
from typing import Any

from errors import CLIPBOARD_BUSY, CLIPBOARD_UNAVAILABLE, ClipboardAccessError

try:
    import pyperclip
except Exception:  # pragma: no cover
    pyperclip = None  # type: ignore

logger = logging.getLogger(__name__)


class PyperclipClipboard:
    """Text clipboard through pyperclip.

    pyperclip reports non-text content as an empty string, which is read as
    "no text" here.
    """

    def read_text(self) -> str | None:
        if pyperclip is None:
            raise ClipboardAccessError(CLIPBOARD_UNAVAILABLE, "pyperclip is not installed")
        try:
            text = pyperclip.paste()
        except pyperclip.PyperclipException as exc:
            raise ClipboardAccessError(CLIPBOARD_BUSY, str(exc)) from exc
        if not isinstance(text, str) or not text:
            return None
        return text

    def write_text(self, text: str) -> None:
        if pyperclip is None:
            raise ClipboardAccessError(CLIPBOARD_UNAVAILABLE, "pyperclip is not installed")
        try:
            pyperclip.copy(text)
        except pyperclip.PyperclipException as exc:
            raise ClipboardAccessError(CLIPBOARD_BUSY, str(exc)) from exc


class QtClipboard:
    """Text clipboard on top of a ``QClipboard`` instance."""

    def __init__(self, clipboard: Any) -> None:
        self._clipboard = clipboard

    def read_text(self) -> str | None:
        mime = self._clipboard.mimeData()
        if mime is None or not mime.hasText():
            logger.debug("clipboard holds no text")
            return None
        return mime.text() or None

    def write_text(self, text: str) -> None:
        self._clipboard.setText(text)
