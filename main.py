"""Application entrypoint."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from clipboard import PyperclipClipboard, QtClipboard
from config import JsonConfigStore
from interfaces import ConfigStore
from models import FormatEvent
from monitor import ClipboardMonitor
from watcher import PollingClipboardWatcher, QtClipboardWatcher

logger = logging.getLogger(__name__)


def positive_float(value: str) -> float:
    try:
        seconds = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {value!r}")
    if seconds <= 0:
        raise argparse.ArgumentTypeError(f"must be greater than 0: {value!r}")
    return seconds


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="call-number-formatter",
        description="Reformat (1)23456 style call numbers copied to the clipboard.",
    )
    ap.add_argument("--headless", action="store_true", help="poll the clipboard without a window")
    ap.add_argument("--interval", type=positive_float, default=None,
                    help="poll interval in seconds (headless, saved to config)")
    ap.add_argument("--debug", action="store_true", help="enable debug logging")
    return ap


class App:
    def __init__(self, argv: Sequence[str]) -> None:
        try:
            from PySide6.QtWidgets import QApplication
        except Exception as exc:  # pragma: no cover
            raise SystemExit(f"PySide6 is required to run the desktop app: {exc}")

        from main_window import MainWindow

        self.app = QApplication(list(argv))
        self.config_store = JsonConfigStore()
        qt_clipboard = self.app.clipboard()

        self.window = MainWindow(
            on_new=self._on_new,
            on_always_on_top=self.config_store.set_always_on_top,
            always_on_top=self.config_store.get_always_on_top(),
        )
        self.monitor = ClipboardMonitor(
            clipboard=QtClipboard(qt_clipboard),
            on_formatted=self.window.show_formatted,
            on_reset=self.window.show_reset,
        )
        self.watcher = QtClipboardWatcher(qt_clipboard)
        self.monitor.attach(self.watcher)

    def _on_new(self) -> None:
        self.monitor.reset()

    def run(self) -> int:
        self.watcher.start()
        self.window.show()
        try:
            return self.app.exec()
        finally:
            self.watcher.stop()


def run_headless(config_store: ConfigStore, interval_s: float | None = None) -> int:
    if interval_s is not None:
        config_store.set_poll_interval(interval_s)
    else:
        interval_s = config_store.get_poll_interval()

    backend = PyperclipClipboard()
    watcher = PollingClipboardWatcher(backend, interval_s=interval_s)

    def _on_formatted(event: FormatEvent) -> None:
        watcher.remember(event.formatted)

    monitor = ClipboardMonitor(clipboard=backend, on_formatted=_on_formatted)
    monitor.attach(watcher)
    logger.info("monitoring clipboard for call numbers (Ctrl+C to quit)")
    try:
        watcher.run()
    except KeyboardInterrupt:
        watcher.stop()
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if args.headless:
        return run_headless(JsonConfigStore(), args.interval)
    app = App(sys.argv[:1])
    return app.run()


if __name__ == "__main__":
    raise SystemExit(main())
