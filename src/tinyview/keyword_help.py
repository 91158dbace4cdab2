"""Reserved-word help shown by the TINY viewer."""

from __future__ import annotations

from tiny.lexer import LETTERS


class KeywordHelp:
    """Help text for each TINY reserved word."""

    KEYWORDS = {
        # Control flow
        "if": "Conditional: if <exp> then <stmts> [else <stmts>] end",
        "then": "Starts the statements run when the if condition holds",
        "else": "Starts the statements run when the if condition fails",
        "end": "Closes an if statement",
        "repeat": "Loop: repeat <stmts> until <exp>",
        "until": "Ends a repeat loop; the loop stops once <exp> is true",
        # I/O
        "read": "Input: read <identifier>",
        "write": "Output: write <exp>",
    }

    @classmethod
    def get_help(cls, keyword: str) -> str:
        """Get help text for a keyword (case-sensitive, like the scanner)."""
        return cls.KEYWORDS.get(keyword, "")

    @classmethod
    def get_all_keywords(cls) -> list[str]:
        return sorted(cls.KEYWORDS.keys())

    @classmethod
    def is_keyword(cls, word: str) -> bool:
        return word in cls.KEYWORDS

    @staticmethod
    def word_at(text: str, pos: int) -> str:
        """Return the run of letters touching index ``pos`` in ``text``."""
        start = end = pos
        while start > 0 and text[start - 1] in LETTERS:
            start -= 1
        while end < len(text) and text[end] in LETTERS:
            end += 1
        return text[start:end]
