"""Main window showing the last formatted call number."""

from __future__ import annotations

from typing import Callable, Optional

from call_number import IDLE_STATUS_TEXT, PLACEHOLDER_TEXT, status_text
from models import FormatEvent

try:
    from PySide6.QtCore import QSize, Qt, QUrl
    from PySide6.QtGui import QAction, QBrush, QColor, QDesktopServices, QFont, QIcon, QPainter, QPixmap
    from PySide6.QtWidgets import QLabel, QMainWindow, QMessageBox
except Exception:  # pragma: no cover
    QSize = None  # type: ignore
    Qt = None  # type: ignore
    QUrl = None  # type: ignore
    QAction = None  # type: ignore
    QBrush = None  # type: ignore
    QColor = None  # type: ignore
    QDesktopServices = None  # type: ignore
    QFont = None  # type: ignore
    QIcon = None  # type: ignore
    QPainter = None  # type: ignore
    QPixmap = None  # type: ignore
    QLabel = object  # type: ignore
    QMainWindow = object  # type: ignore
    QMessageBox = None  # type: ignore

FRIENDLY_NAME = "Clipboard Call Number Formatter"
VERSION = "1.0.0"

HEADQUARTERS_URL = "https://www.patreon.com/publicdomain"
SOURCE_CODE_URL = "https://github.com/publicdomain"
ORIGINAL_THREAD_URL = (
    "https://www.reddit.com/r/software/comments/dcxn9m/"
    "software_that_copy_text_changes_it_and_then_paste/"
)

MADE_FOR_TEXT = "Made for: u/sindinha\nReddit.com\nWeek #41 @ October 2019"

ICON_COLOR = "#2E7D32"

LICENSE_TEXT = (
    "CC0 1.0 Universal (CC0 1.0) - Public Domain Dedication\n"
    "https://creativecommons.org/publicdomain/zero/1.0/legalcode\n\n"
    "Libraries and icons have separate licenses.\n\n"
    "Document copy icon by Clker-Free-Vector-Images - Pixabay License\n"
    "https://pixabay.com/vectors/document-button-duplicate-copy-35941/\n\n"
    "Patreon icon used according to published brand guidelines\n"
    "https://www.patreon.com/brand\n\n"
    "GitHub mark icon used according to published logos and usage guidelines\n"
    "https://github.com/logos\n\n"
    "Reddit icon used according to published brand guidelines\n"
    "https://www.reddit.com/wiki/licensing#wiki_using_the_reddit_brand\n"
)


def _create_icon(color: str = ICON_COLOR, size: int = 32) -> QIcon:
    """Draw a document-like window icon with two copy sheets."""
    pixmap = QPixmap(QSize(size, size))
    pixmap.fill(QColor(0, 0, 0, 0))  # transparent background
    painter = QPainter(pixmap)
    painter.setRenderHint(QPainter.Antialiasing, True)
    painter.setPen(QColor(color))
    painter.setBrush(QBrush(QColor("#FFFFFF")))
    sheet = size * 5 // 8
    painter.drawRoundedRect(2, 2, sheet, sheet, 3, 3)
    painter.setBrush(QBrush(QColor(color)))
    painter.drawRoundedRect(size - sheet - 2, size - sheet - 2, sheet, sheet, 3, 3)
    painter.end()
    return QIcon(pixmap)


class MainWindow(QMainWindow):
    def __init__(
        self,
        on_new: Optional[Callable[[], None]] = None,
        on_always_on_top: Optional[Callable[[bool], None]] = None,
        always_on_top: bool = False,
    ) -> None:
        if Qt is None:
            raise RuntimeError("PySide6 is not installed")
        super().__init__()
        self._on_new = on_new
        self._on_always_on_top = on_always_on_top

        self.setWindowTitle(f"{FRIENDLY_NAME} {VERSION}")
        self.setWindowIcon(_create_icon())
        self.setMinimumSize(360, 140)

        self._label = QLabel(PLACEHOLDER_TEXT)
        self._label.setAlignment(Qt.AlignCenter)
        font = QFont()
        font.setPointSize(20)
        font.setBold(True)
        self._label.setFont(font)
        self.setCentralWidget(self._label)

        self.statusBar().showMessage(IDLE_STATUS_TEXT)
        self._setup_menu(always_on_top)
        if always_on_top:
            self.setWindowFlag(Qt.WindowStaysOnTopHint, True)

    def _setup_menu(self, always_on_top: bool) -> None:
        menu_bar = self.menuBar()

        file_menu = menu_bar.addMenu("&File")
        new_action = QAction("&New", self)
        new_action.setShortcut("Ctrl+N")
        new_action.triggered.connect(self._new)
        file_menu.addAction(new_action)
        file_menu.addSeparator()
        exit_action = QAction("E&xit", self)
        exit_action.triggered.connect(self.close)
        file_menu.addAction(exit_action)

        options_menu = menu_bar.addMenu("&Options")
        self._top_action = QAction("&Always on top", self)
        self._top_action.setCheckable(True)
        self._top_action.setChecked(always_on_top)
        self._top_action.toggled.connect(self._set_always_on_top)
        options_menu.addAction(self._top_action)

        help_menu = menu_bar.addMenu("&Help")
        for title, url in (
            ("&Headquarters @ Patreon.com", HEADQUARTERS_URL),
            ("Source code @ &GitHub.com", SOURCE_CODE_URL),
            ("&Original thread @ Reddit.com", ORIGINAL_THREAD_URL),
        ):
            action = QAction(title, self)
            action.triggered.connect(lambda _checked=False, u=url: self._open_url(u))
            help_menu.addAction(action)
        help_menu.addSeparator()
        about_action = QAction("&About...", self)
        about_action.triggered.connect(self.show_about)
        help_menu.addAction(about_action)

    # ------------------------------------------------------------------
    # Display collaborator
    # ------------------------------------------------------------------

    def show_formatted(self, event: FormatEvent) -> None:
        self._label.setText(event.formatted)
        self.statusBar().showMessage(status_text(event.count))

    def show_reset(self) -> None:
        self._label.setText(PLACEHOLDER_TEXT)
        self.statusBar().showMessage(IDLE_STATUS_TEXT)

    # ------------------------------------------------------------------
    # Menu handlers
    # ------------------------------------------------------------------

    def _new(self) -> None:
        if self._on_new:
            self._on_new()
        else:
            self.show_reset()

    def _set_always_on_top(self, checked: bool) -> None:
        self.setWindowFlag(Qt.WindowStaysOnTopHint, checked)
        # Changing window flags hides the window.
        self.show()
        if self._on_always_on_top:
            self._on_always_on_top(checked)

    def _open_url(self, url: str) -> None:
        QDesktopServices.openUrl(QUrl(url))

    def show_about(self) -> None:
        box = QMessageBox(self)
        box.setWindowTitle(f"About {FRIENDLY_NAME}")
        box.setText(f"{FRIENDLY_NAME} {VERSION}")
        box.setInformativeText(MADE_FOR_TEXT)
        box.setDetailedText(LICENSE_TEXT)
        box.setWindowIcon(self.windowIcon())
        if self._top_action.isChecked():
            box.setWindowFlag(Qt.WindowStaysOnTopHint, True)
        box.exec()
