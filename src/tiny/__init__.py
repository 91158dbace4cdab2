from .line_buffer import EOF, LineBuffer
from .lexer import Lexer, State, open_lexer
from .tokens import MAXTOKENLEN, RESERVED_WORDS, Token, TokenType

__all__ = [
    "EOF",
    "LineBuffer",
    "Lexer",
    "State",
    "open_lexer",
    "MAXTOKENLEN",
    "RESERVED_WORDS",
    "Token",
    "TokenType",
]
