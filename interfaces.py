"""Protocol interfaces used by ClipboardMonitor."""

from __future__ import annotations

from typing import Callable, Optional, Protocol

ChangeHandler = Callable[[Optional[str]], None]


class ClipboardBackend(Protocol):
    def read_text(self) -> str | None: ...

    def write_text(self, text: str) -> None: ...


class ClipboardWatcher(Protocol):
    def on_clipboard_changed(self, handler: ChangeHandler) -> None: ...

    def start(self) -> None: ...

    def stop(self) -> None: ...


class ConfigStore(Protocol):
    def get_always_on_top(self) -> bool: ...

    def set_always_on_top(self, value: bool) -> None: ...

    def get_poll_interval(self) -> float: ...

    def set_poll_interval(self, seconds: float) -> None: ...
