"""Token kinds, the token record and the reserved-word table."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from types import MappingProxyType

# Longest lexeme kept; longer runs are consumed but truncated.
MAXTOKENLEN = 40


class TokenType(Enum):
    # Book-keeping
    ENDFILE = auto()
    ERROR = auto()

    # Reserved words
    IF = auto()
    THEN = auto()
    ELSE = auto()
    END = auto()
    REPEAT = auto()
    UNTIL = auto()
    READ = auto()
    WRITE = auto()

    # Multi-character tokens
    IDENTIFIER = auto()
    NUMBER = auto()

    # Special symbols
    ASSIGN = auto()
    EQ = auto()
    LT = auto()
    PLUS = auto()
    MINUS = auto()
    TIMES = auto()
    OVER = auto()
    LPAREN = auto()
    RPAREN = auto()
    SEMI = auto()


RESERVED_WORDS = MappingProxyType(
    {
        "if": TokenType.IF,
        "then": TokenType.THEN,
        "else": TokenType.ELSE,
        "end": TokenType.END,
        "repeat": TokenType.REPEAT,
        "until": TokenType.UNTIL,
        "read": TokenType.READ,
        "write": TokenType.WRITE,
    }
)


def reserved_lookup(lexeme: str) -> TokenType:
    """Return the keyword kind for ``lexeme``, or IDENTIFIER."""
    return RESERVED_WORDS.get(lexeme, TokenType.IDENTIFIER)


_RESERVED_KINDS = frozenset(RESERVED_WORDS.values())


def is_reserved(kind: TokenType) -> bool:
    return kind in _RESERVED_KINDS


@dataclass(frozen=True)
class Token:
    kind: TokenType
    lexeme: str
    line: int
    col: int

    def __repr__(self):
        return f"Token({self.kind.name}, {self.lexeme!r}, line={self.line}, col={self.col})"


__all__ = [
    "MAXTOKENLEN",
    "RESERVED_WORDS",
    "Token",
    "TokenType",
    "is_reserved",
    "reserved_lookup",
]
