"""PySide6 viewer for TINY source: highlighted editor plus the scanner listing."""

from __future__ import annotations

import io
import sys
from pathlib import Path

from PySide6 import QtCore, QtGui, QtWidgets

from tiny.lexer import Lexer

from .highlighter import TinyHighlighter
from .keyword_help import KeywordHelp

SETTINGS_ORG = "TinyScanner"
SETTINGS_APP = "tinyview"


def scan_listing(source: str) -> str:
    """Run the scanner over ``source`` and return the classic listing text."""
    out = io.StringIO()
    Lexer.from_string(source, listing=out, echo_source=True, trace_scan=True).scan()
    return out.getvalue()


class MainWindow(QtWidgets.QMainWindow):
    def __init__(self):
        super().__init__()
        self._current_path: Path | None = None
        self.settings = QtCore.QSettings(SETTINGS_ORG, SETTINGS_APP)
        self.setWindowTitle("TINY Viewer")
        self._build_ui()
        self._setup_menu()

    def _build_ui(self):
        self.editor = QtWidgets.QPlainTextEdit()
        self.editor.setPlaceholderText("TINY source…")
        self.highlighter = TinyHighlighter(self.editor.document())

        self.listing_view = QtWidgets.QPlainTextEdit()
        self.listing_view.setReadOnly(True)
        self.listing_view.setPlaceholderText("Scanner listing will appear here…")

        font = QtGui.QFontDatabase.systemFont(QtGui.QFontDatabase.FixedFont)
        self.editor.setFont(font)
        self.listing_view.setFont(font)

        self.splitter = QtWidgets.QSplitter()
        self.splitter.setOrientation(QtCore.Qt.Horizontal)
        self.splitter.addWidget(self.editor)
        self.splitter.addWidget(self.listing_view)
        self.splitter.setSizes([3, 2])
        self.setCentralWidget(self.splitter)

        listing_visible = self.settings.value("listing_visible", True, type=bool)
        self.listing_view.setVisible(listing_visible)

        # Rescan shortly after typing stops rather than on every keystroke.
        self._rescan_timer = QtCore.QTimer(self)
        self._rescan_timer.setSingleShot(True)
        self._rescan_timer.setInterval(250)
        self._rescan_timer.timeout.connect(self.refresh_listing)
        self.editor.textChanged.connect(self._rescan_timer.start)
        self.editor.cursorPositionChanged.connect(self._show_keyword_help)

    def _setup_menu(self):
        menubar = self.menuBar()

        file_menu = menubar.addMenu("File")
        open_action = QtGui.QAction("Open…", self)
        open_action.setShortcut(QtGui.QKeySequence.Open)
        open_action.triggered.connect(self.open_file)
        quit_action = QtGui.QAction("Quit", self)
        quit_action.setShortcut(QtGui.QKeySequence.Quit)
        quit_action.triggered.connect(self.close)
        file_menu.addAction(open_action)
        file_menu.addSeparator()
        file_menu.addAction(quit_action)

        view_menu = menubar.addMenu("View")
        toggle_listing = QtGui.QAction("Show/Hide Listing Pane", self)
        toggle_listing.triggered.connect(self._toggle_listing_visibility)
        view_menu.addAction(toggle_listing)

    # --- file ops ---
    def open_file(self):
        start_dir = self.settings.value("last_dir", str(Path.cwd()))
        path, _ = QtWidgets.QFileDialog.getOpenFileName(
            self,
            "Open TINY file",
            start_dir,
            "TINY Files (*.tny);;All Files (*)",
        )
        if not path:
            return
        self.load_file(Path(path))

    def load_file(self, path: Path):
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            QtWidgets.QMessageBox.warning(self, "Open failed", f"{path}: {e}")
            return
        self._current_path = path
        self.settings.setValue("last_dir", str(path.parent))
        self.editor.setPlainText(text)
        self.setWindowTitle(f"TINY Viewer - {path.name}")
        self.refresh_listing()

    # --- scanner ---
    def refresh_listing(self):
        self.listing_view.setPlainText(scan_listing(self.editor.toPlainText()))

    def _show_keyword_help(self):
        cursor = self.editor.textCursor()
        word = KeywordHelp.word_at(cursor.block().text(), cursor.positionInBlock())
        help_text = KeywordHelp.get_help(word)
        if help_text:
            self.statusBar().showMessage(f"{word}: {help_text}")
        else:
            self.statusBar().clearMessage()

    def _toggle_listing_visibility(self):
        visible = not self.listing_view.isVisible()
        self.listing_view.setVisible(visible)
        self.settings.setValue("listing_visible", visible)


def main():
    app = QtWidgets.QApplication(sys.argv)
    window = MainWindow()
    args = app.arguments()[1:]
    if args:
        window.load_file(Path(args[0]))
    window.resize(900, 700)
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
