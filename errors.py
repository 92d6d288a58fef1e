"""Shared error codes and user-facing messages."""

from __future__ import annotations

CLIPBOARD_BUSY = "CLIPBOARD_BUSY"
CLIPBOARD_UNAVAILABLE = "CLIPBOARD_UNAVAILABLE"

ERROR_MESSAGES = {
    CLIPBOARD_BUSY: "Clipboard is held by another process.",
    CLIPBOARD_UNAVAILABLE: "No clipboard mechanism is available.",
}


class ClipboardAccessError(Exception):
    """Transient failure reading or writing the system clipboard."""

    def __init__(self, code: str, message: str = "") -> None:
        super().__init__(message or ERROR_MESSAGES.get(code, code))
        self.code = code
        self.message = message or ERROR_MESSAGES.get(code, code)
