"""
TINY scanner.

A DFA over character classes. Each get_token() call starts in START, pulls
characters from a LineBuffer, and stops in DONE with exactly one token.
Lexical errors come back as ERROR tokens; nothing here raises on bad input.
"""

from __future__ import annotations

import io
import string
import sys
from contextlib import contextmanager
from enum import Enum, auto
from pathlib import Path
from typing import Iterator, List, Optional, TextIO, Union

from . import listing as _listing
from .line_buffer import EOF, LineBuffer
from .tokens import MAXTOKENLEN, Token, TokenType, reserved_lookup


class State(Enum):
    START = auto()
    INASSIGN = auto()
    INCOMMENT = auto()
    INNUM = auto()
    INID = auto()
    DONE = auto()


DIGITS = frozenset(string.digits)
LETTERS = frozenset(string.ascii_letters)
WHITESPACE = frozenset(" \t\n\r\f\v")

# Single-character tokens recognized straight from START.
PUNCTUATION = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.TIMES,
    "/": TokenType.OVER,
    ";": TokenType.SEMI,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    "<": TokenType.LT,
    "=": TokenType.EQ,
}


class Lexer:
    """
    Scanner over a text source or an existing LineBuffer.

    Echoing source lines is the buffer's job: with a LineBuffer, configure
    echo on the buffer itself.
    """

    def __init__(
        self,
        source: Union[TextIO, LineBuffer],
        listing: Optional[TextIO] = None,
        echo_source: bool = False,
        trace_scan: bool = False,
    ):
        if listing is None and (echo_source or trace_scan):
            listing = sys.stdout
        if isinstance(source, LineBuffer):
            if echo_source:
                raise ValueError("echo_source is set on the LineBuffer, not the Lexer")
            self.buffer = source
        else:
            self.buffer = LineBuffer(source, listing=listing, echo_source=echo_source)
        self.listing = listing
        self.trace_scan = trace_scan

    @classmethod
    def from_string(cls, text: str, **options) -> "Lexer":
        return cls(io.StringIO(text), **options)

    @property
    def lineno(self) -> int:
        return self.buffer.lineno

    def scan(self) -> List[Token]:
        """Return every token up to and including the first ENDFILE."""
        return list(self)

    def __iter__(self) -> Iterator[Token]:
        while True:
            tok = self.get_token()
            yield tok
            if tok.kind == TokenType.ENDFILE:
                return

    def get_token(self) -> Token:
        buf = self.buffer
        text: List[str] = []
        state = State.START
        kind = TokenType.ERROR
        line = col = 0

        while state != State.DONE:
            c = buf.next_char()
            save = True

            if state == State.START:
                line, col = buf.lineno, buf.column
                if c in DIGITS:
                    state = State.INNUM
                elif c in LETTERS:
                    state = State.INID
                elif c == "{":
                    save = False
                    state = State.INCOMMENT
                elif c in WHITESPACE:
                    save = False
                elif c == ":":
                    state = State.INASSIGN
                elif c == EOF:
                    save = False
                    state = State.DONE
                    kind = TokenType.ENDFILE
                elif c in PUNCTUATION:
                    save = False
                    state = State.DONE
                    kind = PUNCTUATION[c]
                else:
                    state = State.DONE
                    kind = TokenType.ERROR
            elif state == State.INID:
                if c not in LETTERS:
                    buf.unget()
                    save = False
                    state = State.DONE
                    kind = TokenType.IDENTIFIER
            elif state == State.INNUM:
                if c not in DIGITS:
                    buf.unget()
                    save = False
                    state = State.DONE
                    kind = TokenType.NUMBER
            elif state == State.INASSIGN:
                state = State.DONE
                if c == "=":
                    kind = TokenType.ASSIGN
                else:
                    buf.unget()
                    save = False
                    kind = TokenType.ERROR
            elif state == State.INCOMMENT:
                save = False
                if c == "}":
                    state = State.START
                elif c == EOF:
                    # An unterminated comment runs to the end of input.
                    line, col = buf.lineno, buf.column
                    state = State.DONE
                    kind = TokenType.ENDFILE
            else:
                raise AssertionError(f"scanner reached unexpected state {state}")

            # Overlong lexemes keep consuming but stop storing.
            if save and len(text) < MAXTOKENLEN:
                text.append(c)

        lexeme = "".join(text)
        if kind == TokenType.IDENTIFIER:
            kind = reserved_lookup(lexeme)
        tok = Token(kind, lexeme, line, col)
        if self.trace_scan and self.listing is not None:
            _listing.trace_token(buf.lineno, tok, self.listing)
        return tok


@contextmanager
def open_lexer(path: Union[str, Path], **options) -> Iterator[Lexer]:
    """Open ``path`` for scanning; the file is closed when the block exits."""
    with open(path, encoding="utf-8") as handle:
        yield Lexer(handle, **options)


__all__ = ["Lexer", "State", "open_lexer"]
