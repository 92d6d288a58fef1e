from __future__ import annotations

from errors import CLIPBOARD_BUSY, ClipboardAccessError
from watcher import PollingClipboardWatcher, QtClipboardWatcher


class _Signal:
    def __init__(self) -> None:
        self.slots = []

    def connect(self, slot) -> None:  # noqa: ANN001
        self.slots.append(slot)

    def disconnect(self, slot) -> None:  # noqa: ANN001
        self.slots.remove(slot)

    def emit(self) -> None:
        for slot in list(self.slots):
            slot()


class _FakeQClipboard:
    def __init__(self) -> None:
        self.dataChanged = _Signal()  # noqa: N815


class _SequenceBackend:
    def __init__(self, values) -> None:  # noqa: ANN001
        self._values = list(values)

    def read_text(self) -> str | None:
        value = self._values.pop(0) if self._values else None
        if isinstance(value, Exception):
            raise value
        return value

    def write_text(self, text: str) -> None:
        pass


def test_qt_watcher_forwards_data_changed() -> None:
    qt = _FakeQClipboard()
    seen: list[str | None] = []
    watcher = QtClipboardWatcher(qt)
    watcher.on_clipboard_changed(seen.append)

    qt.dataChanged.emit()
    assert seen == []

    watcher.start()
    watcher.start()
    qt.dataChanged.emit()
    assert seen == [None]

    watcher.stop()
    qt.dataChanged.emit()
    assert seen == [None]


def test_polling_ignores_startup_content_and_repeats() -> None:
    backend = _SequenceBackend(["old", "old", "(1)2", "(1)2", None, "(1)2"])
    seen: list[str | None] = []
    watcher = PollingClipboardWatcher(backend)
    watcher.on_clipboard_changed(seen.append)

    results = [watcher.poll_once() for _ in range(6)]

    assert results == [False, False, True, False, False, True]
    assert seen == ["(1)2", "(1)2"]


def test_polling_skips_access_errors() -> None:
    backend = _SequenceBackend(["a", ClipboardAccessError(CLIPBOARD_BUSY), "b"])
    seen: list[str | None] = []
    watcher = PollingClipboardWatcher(backend)
    watcher.on_clipboard_changed(seen.append)

    assert [watcher.poll_once() for _ in range(3)] == [False, False, True]
    assert seen == ["b"]


def test_remember_suppresses_own_write() -> None:
    backend = _SequenceBackend(["x", "0012"])
    seen: list[str | None] = []
    watcher = PollingClipboardWatcher(backend)
    watcher.on_clipboard_changed(seen.append)

    watcher.poll_once()
    watcher.remember("0012")
    watcher.poll_once()

    assert seen == []


def test_run_stops_after_max_polls() -> None:
    backend = _SequenceBackend(["a", "b", "c"])
    seen: list[str | None] = []
    watcher = PollingClipboardWatcher(backend, interval_s=0.0)
    watcher.on_clipboard_changed(seen.append)

    watcher.run(max_polls=3)

    assert seen == ["b", "c"]
    assert watcher.running is False


def test_polling_does_not_fire_for_non_text() -> None:
    backend = _SequenceBackend(["(1)2", None, None])
    seen: list[str | None] = []
    watcher = PollingClipboardWatcher(backend)
    watcher.on_clipboard_changed(seen.append)

    assert [watcher.poll_once() for _ in range(3)] == [False, False, False]
    assert seen == []
