# galileo/exceptions.py
# This file is part of Galileo-Parse - A Dynamic Fault Tree Model Parser
#
# Custom exceptions for fault tree model parsing

"""Domain-specific exceptions for Galileo model processing.

Every failure aborts the parse that raised it. The exceptions carry the
source position of the offending token so that callers can build their own
diagnostics or resynchronize and parse again.
"""

from __future__ import annotations
from typing import FrozenSet, Iterable, Optional

from .tokens import SourcePosition, TokenKind


class ParseError(RuntimeError):
    """Exception raised when a Galileo model cannot be parsed.

    Base class for every error signalled by the tokenizer and the parser.

    Attributes:
        position: Source location of the failure, if known
    """

    def __init__(self, message: str, position: Optional[SourcePosition] = None):
        if position is not None:
            message = f"{message} at {position}"
        super().__init__(message)
        self.position = position


class IllegalCharacter(ParseError):
    """Raised by the tokenizer for characters outside the Galileo alphabet."""

    def __init__(self, char: str, position: SourcePosition):
        super().__init__(f"Illegal character {char!r}", position)
        self.char = char


class UnexpectedToken(ParseError):
    """The current token matches no grammar alternative at this point.

    Attributes:
        expected: Token kinds that would have been accepted
        found: Kind of the token actually present
    """

    def __init__(
        self,
        expected: Iterable[TokenKind],
        found: TokenKind,
        position: SourcePosition,
        message: Optional[str] = None,
    ):
        self.expected: FrozenSet[TokenKind] = frozenset(expected)
        self.found = found
        if message is None:
            message = f"Expected {_describe(self.expected)} but found {found}"
        super().__init__(message, position)


class UnexpectedEndOfInput(UnexpectedToken):
    """End of input reached where a specific token was required."""

    def __init__(self, expected: Iterable[TokenKind], position: SourcePosition):
        expected = frozenset(expected)
        super().__init__(
            expected,
            TokenKind.EOF,
            position,
            f"Unexpected end of input, expected {_describe(expected)}",
        )


class AmbiguousOrInvalidEntity(UnexpectedToken):
    """The token after an entity name starts neither a gate nor a basic event."""

    def __init__(
        self, name: str, expected: Iterable[TokenKind], found: TokenKind, position: SourcePosition
    ):
        self.name = name
        super().__init__(
            expected,
            found,
            position,
            f"Entity '{name}' is neither a gate nor a basic event: "
            f"unexpected {found}",
        )


def _describe(kinds: FrozenSet[TokenKind]) -> str:
    names = sorted(str(kind) for kind in kinds)
    if len(names) == 1:
        return names[0]
    return "one of " + ", ".join(names)
