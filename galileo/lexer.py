# galileo/lexer.py
# This file is part of Galileo-Parse - A Dynamic Fault Tree Model Parser
#
# Lexical analyzer for Galileo model tokenization using SLY

"""Lexical analyzer for Galileo fault tree models.

This module breaks Galileo model text into the typed tokens consumed by the
parser. Keywords are reserved only in their bare form; the same word written
in double quotes is an ordinary name.

Supported Tokens:
- Punctuation: ; [ ] , =
- Keywords: toplevel, or, and, of, lambda, ph, prob, dorm, repair, failurestates
- INT: unsigned integer literals (payload ``int``)
- NUMBER: signed, decimal or exponent literals (payload ``float``)
- NAME: bare identifiers or double-quoted strings (quotes stripped)
- Whitespace, // line comments and /* block */ comments: ignored
"""

from typing import Iterator

from sly import Lexer

from .exceptions import IllegalCharacter
from .tokens import SourcePosition, Token, TokenKind
from utils.logger import get_logger


class GalileoLexer(Lexer):
    """SLY-based lexer for Galileo model text.

    Attributes:
        tokens: Set of valid token types, named after ``TokenKind`` members
        ignore: Characters to skip during tokenization
    """

    tokens = {
        "SEMICOLON",
        "LBRACKET",
        "RBRACKET",
        "COMMA",
        "EQ",
        "OR",
        "AND",
        "OF",
        "TOPLEVEL",
        "LAMBDA",
        "PH",
        "PROBABILITY",
        "DORMANCY",
        "REPAIR",
        "FAILURE_STATES",
        "INT",
        "NUMBER",
        "NAME",
    }

    ignore = " \t\r"
    ignore_line_comment = r"//[^\n]*"

    @_(r"/\*[\s\S]*?\*/")
    def ignore_block_comment(self, t):
        self.lineno += t.value.count("\n")

    @_(r"\n+")
    def ignore_newline(self, t):
        self.lineno += len(t.value)

    SEMICOLON = r";"
    LBRACKET = r"\["
    RBRACKET = r"\]"
    COMMA = r","
    EQ = r"="

    # Must precede INT: a bare digit run is left for INT
    @_(
        r"[+-]?(?:(?:\d+\.\d*|\.\d+)(?:[eE][+-]?\d+)?|\d+[eE][+-]?\d+)",
        r"[+-]\d+",
    )
    def NUMBER(self, t):
        t.value = float(t.value)
        return t

    @_(r"\d+")
    def INT(self, t):
        t.value = int(t.value)
        return t

    NAME = r'"[^"\n]*"|[a-zA-Z_][a-zA-Z0-9_\-.]*'

    # Keyword mapping: reassign token types for reserved words
    NAME["toplevel"] = "TOPLEVEL"
    NAME["or"] = "OR"
    NAME["and"] = "AND"
    NAME["of"] = "OF"
    NAME["lambda"] = "LAMBDA"
    NAME["ph"] = "PH"
    NAME["prob"] = "PROBABILITY"
    NAME["dorm"] = "DORMANCY"
    NAME["repair"] = "REPAIR"
    NAME["failurestates"] = "FAILURE_STATES"

    def NAME(self, t):
        if t.value.startswith('"'):
            t.value = t.value[1:-1]
        return t

    def error(self, t):
        """Handle illegal characters during tokenization.

        Args:
            t: SLY token object containing error context

        Raises:
            IllegalCharacter: Always raised with character and position
        """
        illegal_char = t.value[0]
        position = source_position(self.text, self.index, self.lineno)

        get_logger().debug(f"Illegal character '{illegal_char}' at {position}")

        self.index += 1
        raise IllegalCharacter(illegal_char, position)


def source_position(text: str, index: int, lineno: int) -> SourcePosition:
    """Translate a character offset into a line/column position."""
    line_start = text.rfind("\n", 0, index) + 1
    return SourcePosition(line=lineno, column=index - line_start + 1, index=index)


def tokenize(text: str) -> Iterator[Token]:
    """Lazily convert Galileo model text into parser tokens.

    Args:
        text: Complete model source

    Yields:
        Token: Classified tokens in source order, without a trailing EOF

    Raises:
        IllegalCharacter: On the first character no token pattern accepts
    """
    lexer = GalileoLexer()
    for tok in lexer.tokenize(text):
        yield Token(
            kind=TokenKind[tok.type],
            value=tok.value,
            position=source_position(text, tok.index, tok.lineno),
            width=tok.end - tok.index,
        )
