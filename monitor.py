"""Clipboard monitor: turns change notifications into formatted call numbers."""

from __future__ import annotations

import logging
from typing import Callable, Optional

from call_number import try_format
from errors import ClipboardAccessError
from interfaces import ClipboardBackend, ClipboardWatcher
from models import FormatEvent, MonitorState, SessionCounter

logger = logging.getLogger(__name__)

StateCallback = Callable[[MonitorState, MonitorState], None]
FormattedCallback = Callable[[FormatEvent], None]
ResetCallback = Callable[[], None]


class ClipboardMonitor:
    def __init__(
        self,
        clipboard: ClipboardBackend,
        on_formatted: Optional[FormattedCallback] = None,
        on_reset: Optional[ResetCallback] = None,
        on_state_change: Optional[StateCallback] = None,
    ) -> None:
        self._clipboard = clipboard
        self._on_formatted = on_formatted
        self._on_reset = on_reset
        self._on_state_change = on_state_change

        self._state = MonitorState.IDLE
        self._counter = SessionCounter()

    @property
    def state(self) -> MonitorState:
        return self._state

    @property
    def count(self) -> int:
        return self._counter.count

    def attach(self, watcher: ClipboardWatcher) -> None:
        watcher.on_clipboard_changed(self.handle_clipboard_changed)

    def handle_clipboard_changed(self, text: str | None = None) -> FormatEvent | None:
        # Our own write-back re-enters here on some platforms.
        if self._state != MonitorState.IDLE:
            return None
        self._transition(MonitorState.PROCESSING)
        try:
            return self._process(text)
        except ClipboardAccessError as exc:
            logger.debug("clipboard notification dropped (%s): %s", exc.code, exc.message)
            return None
        finally:
            self._transition(MonitorState.IDLE)

    def reset(self) -> None:
        self._counter.reset()
        logger.info("call number count reset")
        if self._on_reset:
            self._on_reset()

    def _process(self, text: str | None) -> FormatEvent | None:
        if text is None:
            text = self._clipboard.read_text()
        if text is None:
            return None

        formatted = try_format(text)
        if formatted is None:
            return None

        self._clipboard.write_text(formatted)
        count = self._counter.increment()
        event = FormatEvent(original=text, formatted=formatted, count=count)
        logger.info("formatted call number %s (count=%d)", formatted, count)
        if self._on_formatted:
            self._on_formatted(event)
        return event

    def _transition(self, to_state: MonitorState) -> None:
        from_state = self._state
        if from_state == to_state:
            return
        self._state = to_state
        if self._on_state_change:
            self._on_state_change(from_state, to_state)
