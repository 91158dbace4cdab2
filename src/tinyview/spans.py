"""Split a line of TINY source into highlight spans using the scanner."""

from __future__ import annotations

from typing import List, Tuple

from tiny.lexer import DIGITS, LETTERS, Lexer
from tiny.tokens import Token, TokenType, is_reserved

KEYWORD = "keyword"
NUMBER = "number"
IDENTIFIER = "identifier"
OPERATOR = "operator"
ERROR = "error"
COMMENT = "comment"

Span = Tuple[int, int, str]


def highlight_spans(text: str, in_comment: bool = False) -> Tuple[List[Span], bool]:
    """
    Return ``(spans, open_comment)`` for one line of source.

    ``text`` is a single line without its newline. ``in_comment`` says the
    line starts inside a ``{ ... }`` comment left open by an earlier line;
    ``open_comment`` says whether this line leaves one open.
    """
    spans: List[Span] = []
    offset = 0
    if in_comment:
        close = text.find("}")
        if close < 0:
            return ([(0, len(text), COMMENT)] if text else []), True
        spans.append((0, close + 1, COMMENT))
        offset = close + 1

    rest = text[offset:]
    gap = 0
    for tok in Lexer.from_string(rest):
        if tok.kind == TokenType.ENDFILE:
            break
        start = tok.col - 1
        comments, _ = _comment_spans(rest, gap, start)
        spans.extend((offset + s, n, c) for s, n, c in comments)
        width = token_width(tok, rest)
        spans.append((offset + start, width, category(tok)))
        gap = start + width

    comments, open_comment = _comment_spans(rest, gap, len(rest))
    spans.extend((offset + s, n, c) for s, n, c in comments)
    return spans, open_comment


def category(tok: Token) -> str:
    if is_reserved(tok.kind):
        return KEYWORD
    if tok.kind == TokenType.NUMBER:
        return NUMBER
    if tok.kind == TokenType.IDENTIFIER:
        return IDENTIFIER
    if tok.kind == TokenType.ERROR:
        return ERROR
    return OPERATOR


def token_width(tok: Token, text: str) -> int:
    """Characters the token covers in ``text``, including truncated ones."""
    start = tok.col - 1
    if tok.kind == TokenType.NUMBER:
        return _run_length(text, start, DIGITS)
    if tok.kind == TokenType.IDENTIFIER or is_reserved(tok.kind):
        return _run_length(text, start, LETTERS)
    if tok.kind == TokenType.ASSIGN:
        return 2
    return 1


def _run_length(text: str, start: int, chars) -> int:
    end = start
    while end < len(text) and text[end] in chars:
        end += 1
    return end - start


def _comment_spans(text: str, lo: int, hi: int) -> Tuple[List[Span], bool]:
    # Between two tokens there is only whitespace and comments.
    spans: List[Span] = []
    pos = text.find("{", lo, hi)
    while pos >= 0:
        close = text.find("}", pos, hi)
        if close < 0:
            spans.append((pos, hi - pos, COMMENT))
            return spans, True
        spans.append((pos, close - pos + 1, COMMENT))
        pos = text.find("{", close + 1, hi)
    return spans, False


def to_utf16(text: str, spans: List[Span]) -> List[Span]:
    """Re-express code-point spans in the UTF-16 units Qt positions use."""
    if text.isascii():
        return spans
    units = [0]
    for ch in text:
        units.append(units[-1] + (2 if ord(ch) > 0xFFFF else 1))
    return [(units[s], units[s + n] - units[s], c) for s, n, c in spans]
