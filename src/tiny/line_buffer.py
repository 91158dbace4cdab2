"""
Line-at-a-time source buffer with one character of pushback.

The scanner pulls characters from here and never touches the underlying
source directly. A fresh line is read whenever the current one is used up.
"""

from __future__ import annotations

import io
from typing import Optional, TextIO

from . import listing as _listing

# Returned by next_char() once the source is exhausted.
EOF = ""


class LineBuffer:
    def __init__(
        self,
        source: TextIO,
        listing: Optional[TextIO] = None,
        echo_source: bool = False,
    ):
        self.source = source
        self.listing = listing
        self.echo_source = echo_source
        self.line = ""
        self.linepos = 0
        self.bufsize = 0
        self.lineno = 0
        self.at_eof = False
        self.read_error: Optional[Exception] = None

    @classmethod
    def from_string(cls, text: str, **options) -> "LineBuffer":
        return cls(io.StringIO(text), **options)

    @property
    def column(self) -> int:
        """1-based column of the character last returned by next_char()."""
        return self.linepos

    def next_char(self) -> str:
        if self.linepos < self.bufsize:
            return self._advance()
        if self.at_eof or not self._fill():
            return EOF
        return self._advance()

    def unget(self) -> None:
        # Nothing was drawn from the line for the EOF sentinel.
        if not self.at_eof:
            self.linepos -= 1

    def _advance(self) -> str:
        ch = self.line[self.linepos]
        self.linepos += 1
        return ch

    def _fill(self) -> bool:
        try:
            line = self.source.readline()
        except (OSError, UnicodeDecodeError) as e:
            # Unreadable input ends the stream like a normal EOF.
            self.read_error = e
            line = ""
        if not line:
            self.at_eof = True
            return False
        self.lineno += 1
        self.line = line
        self.bufsize = len(line)
        self.linepos = 0
        if self.echo_source and self.listing is not None:
            _listing.echo_line(self.lineno, line, self.listing)
        return True


__all__ = ["EOF", "LineBuffer"]
