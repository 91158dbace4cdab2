"""Listing output: echoed source lines, token traces and driver messages."""

from __future__ import annotations

import sys
from typing import TextIO

from .tokens import Token, TokenType, is_reserved

_SYMBOLS = {
    TokenType.ASSIGN: ":=",
    TokenType.LT: "<",
    TokenType.EQ: "=",
    TokenType.LPAREN: "(",
    TokenType.RPAREN: ")",
    TokenType.SEMI: ";",
    TokenType.PLUS: "+",
    TokenType.MINUS: "-",
    TokenType.TIMES: "*",
    TokenType.OVER: "/",
}


def format_token(kind: TokenType, lexeme: str) -> str:
    if is_reserved(kind):
        return f"reserved word: {lexeme}"
    if kind in _SYMBOLS:
        return _SYMBOLS[kind]
    if kind == TokenType.ENDFILE:
        return "EOF"
    if kind == TokenType.NUMBER:
        return f"NUM, val= {lexeme}"
    if kind == TokenType.IDENTIFIER:
        return f"ID, name= {lexeme}"
    if kind == TokenType.ERROR:
        return f"ERROR: {lexeme}"
    return f"Unknown token: {kind!r}"


def echo_line(lineno: int, line: str, stream: TextIO) -> None:
    end = "" if line.endswith("\n") else "\n"
    print(f"{lineno:4d}: {line}", end=end, file=stream)


def trace_token(lineno: int, token: Token, stream: TextIO) -> None:
    print(f"\t{lineno}: {format_token(token.kind, token.lexeme)}", file=stream)


def log_error(msg: str, stream: TextIO = sys.stderr) -> None:
    print(f"[tinylex:error] {msg}", file=stream)
