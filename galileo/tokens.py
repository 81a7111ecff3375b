# galileo/tokens.py
# This file is part of Galileo-Parse - A Dynamic Fault Tree Model Parser
#
# Token kinds and the lookahead token stream consumed by the parser

"""Token types and the bounded-lookahead token stream.

The parser never reads characters. It consumes a lazy sequence of typed
tokens through ``TokenStream``, which buffers just enough tokens to answer
``peek(0)``, ``peek(1)`` and ``peek(2)`` and synthesizes a terminal ``EOF``
token once the underlying iterator is exhausted.
"""

from __future__ import annotations
from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Any, Deque, Iterable, Iterator


class TokenKind(Enum):
    """Token categories recognized by the Galileo grammar.

    Values are the literal spellings used in diagnostics.
    """

    SEMICOLON = "';'"
    LBRACKET = "'['"
    RBRACKET = "']'"
    COMMA = "','"
    EQ = "'='"
    OR = "'or'"
    AND = "'and'"
    OF = "'of'"
    TOPLEVEL = "'toplevel'"
    LAMBDA = "'lambda'"
    PH = "'ph'"
    PROBABILITY = "'prob'"
    DORMANCY = "'dorm'"
    REPAIR = "'repair'"
    FAILURE_STATES = "'failurestates'"
    INT = "INT"
    NUMBER = "NUMBER"
    NAME = "NAME"
    EOF = "EOF"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class SourcePosition:
    """Location of a token in the model text.

    Attributes:
        line: 1-based line number
        column: 1-based column number
        index: 0-based character offset
    """

    line: int = 1
    column: int = 1
    index: int = 0

    def __str__(self) -> str:
        return f"line {self.line}, column {self.column}"


@dataclass(frozen=True, slots=True)
class Token:
    """A single classified token with its literal payload.

    Attributes:
        kind: Token category
        value: Literal payload, already converted by the tokenizer
        position: Location of the first source character
        width: Number of source characters the token spans
    """

    kind: TokenKind
    value: Any
    position: SourcePosition = SourcePosition()
    width: int = 0

    def __str__(self) -> str:
        if self.kind is TokenKind.EOF:
            return "end of input"
        return f"{self.kind.name} {self.value!r}"


class TokenStream:
    """Lazy token source with bounded lookahead.

    Wraps any iterable of ``Token`` objects. Tokens are pulled from the
    iterable only when a lookahead request needs them. Once the iterable is
    exhausted every further request yields an ``EOF`` token positioned just
    after the last real token.

    Attributes:
        MAX_LOOKAHEAD: Largest offset accepted by ``peek``
    """

    MAX_LOOKAHEAD = 2

    def __init__(self, tokens: Iterable[Token]):
        self._source: Iterator[Token] = iter(tokens)
        self._buffer: Deque[Token] = deque()
        self._exhausted = False
        self._eof = Token(TokenKind.EOF, None, SourcePosition())

    def _fill(self, count: int) -> None:
        while len(self._buffer) < count:
            if self._exhausted:
                self._buffer.append(self._eof)
                continue
            try:
                token = next(self._source)
            except StopIteration:
                self._exhausted = True
                continue
            self._buffer.append(token)
            self._eof = Token(TokenKind.EOF, None, _after(token))

    def peek(self, offset: int = 0) -> TokenKind:
        """Return the kind of the token ``offset`` places ahead."""
        if not 0 <= offset <= self.MAX_LOOKAHEAD:
            raise ValueError(
                f"Lookahead offset {offset} outside 0..{self.MAX_LOOKAHEAD}"
            )
        self._fill(offset + 1)
        return self._buffer[offset].kind

    def current_token(self) -> Token:
        self._fill(1)
        return self._buffer[0]

    def advance(self) -> Token:
        """Consume the current token and return it."""
        self._fill(1)
        token = self._buffer.popleft()
        if token.kind is TokenKind.EOF:
            # EOF is sticky
            self._buffer.appendleft(token)
        return token

    def position(self) -> SourcePosition:
        return self.current_token().position


def _after(token: Token) -> SourcePosition:
    pos = token.position
    return SourcePosition(pos.line, pos.column + token.width, pos.index + token.width)
