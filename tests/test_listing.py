import io
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.append(str(SRC))

from tiny.listing import echo_line, format_token, log_error, trace_token  # noqa: E402
from tiny.tokens import RESERVED_WORDS, Token, TokenType  # noqa: E402


@pytest.mark.parametrize(
    "kind, lexeme, expected",
    [
        (TokenType.IF, "if", "reserved word: if"),
        (TokenType.WRITE, "write", "reserved word: write"),
        (TokenType.ASSIGN, ":=", ":="),
        (TokenType.LT, "", "<"),
        (TokenType.EQ, "", "="),
        (TokenType.OVER, "", "/"),
        (TokenType.ENDFILE, "", "EOF"),
        (TokenType.NUMBER, "42", "NUM, val= 42"),
        (TokenType.IDENTIFIER, "fact", "ID, name= fact"),
        (TokenType.ERROR, "$", "ERROR: $"),
    ],
)
def test_format_token(kind, lexeme, expected):
    assert format_token(kind, lexeme) == expected


def test_every_kind_has_listing_text():
    for kind in TokenType:
        assert not format_token(kind, "x").startswith("Unknown token")


def test_reserved_table_is_read_only():
    assert all(word.islower() and word.isalpha() for word in RESERVED_WORDS)
    with pytest.raises(TypeError):
        RESERVED_WORDS["while"] = TokenType.REPEAT


def test_echo_line_adds_missing_newline():
    out = io.StringIO()
    echo_line(3, "x := 1\n", out)
    echo_line(12, "end", out)
    assert out.getvalue() == "   3: x := 1\n  12: end\n"


def test_trace_token():
    out = io.StringIO()
    trace_token(7, Token(TokenType.NUMBER, "10", 7, 4), out)
    assert out.getvalue() == "\t7: NUM, val= 10\n"


def test_log_error():
    out = io.StringIO()
    log_error("boom", out)
    assert out.getvalue() == "[tinylex:error] boom\n"
