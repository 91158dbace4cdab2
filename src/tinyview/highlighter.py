"""Syntax highlighting for TINY source, driven by the scanner."""

from __future__ import annotations

from PySide6 import QtGui

from . import spans as _spans

# Block state for a line that ends inside an open { comment.
IN_COMMENT = 1

COLORS = {
    _spans.KEYWORD: "#0057b7",
    _spans.NUMBER: "#b71c1c",
    _spans.IDENTIFIER: "#000000",
    _spans.OPERATOR: "#6a1b9a",
    _spans.ERROR: "#d50000",
    _spans.COMMENT: "#9e9e9e",
}


class TinyHighlighter(QtGui.QSyntaxHighlighter):
    def __init__(self, parent=None, colors: dict[str, str] | None = None):
        super().__init__(parent)
        self.formats = {}
        for name, color in {**COLORS, **(colors or {})}.items():
            fmt = QtGui.QTextCharFormat()
            fmt.setForeground(QtGui.QColor(color))
            self.formats[name] = fmt
        self.formats[_spans.KEYWORD].setFontWeight(QtGui.QFont.Bold)
        self.formats[_spans.ERROR].setFontUnderline(True)
        self.formats[_spans.COMMENT].setFontItalic(True)

    def highlightBlock(self, text: str):
        in_comment = self.previousBlockState() == IN_COMMENT
        found, open_comment = _spans.highlight_spans(text, in_comment)
        for start, length, name in _spans.to_utf16(text, found):
            self.setFormat(start, length, self.formats[name])
        self.setCurrentBlockState(IN_COMMENT if open_comment else 0)
