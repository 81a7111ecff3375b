# galileo/__init__.py
# This file is part of Galileo-Parse - A Dynamic Fault Tree Model Parser
#
# Model parsing components for Galileo dynamic fault trees

"""Galileo dynamic fault tree model parsing.

This package turns Galileo model text into an immutable abstract syntax
tree. The Galileo language describes system failure logic as gates (OR, AND,
k-of-n voting) over basic events, together with the stochastic failure
characteristics of each basic event.

The parsing pipeline has two stages. The tokenizer classifies the text into
typed tokens; the recursive-descent parser consumes those tokens through a
bounded-lookahead stream and builds the tree. Callers that already have a
token sequence can skip the tokenizer with ``parse_tokens``.

The result is purely syntactic. Name resolution, rate matrix shape checks,
duplicate property resolution and defaults for absent properties are left to
the analysis tooling that consumes the tree.

Core Functions:
    parse: Parse model text into a FaultTree
    parse_tokens: Parse an already tokenized model
    parse_file: Read and parse a model file

Example:
    >>> from galileo import parse
    >>> tree = parse("toplevel TOP; TOP or A B; A lambda=0.001; B lambda=0.002;")
    >>> [type(e).__name__ for e in tree.entities]
    ['Gate', 'BasicEvent', 'BasicEvent']
"""

from pathlib import Path
from typing import Iterable, Union

from .ast_nodes import FaultTree
from .exceptions import (
    AmbiguousOrInvalidEntity,
    IllegalCharacter,
    ParseError,
    UnexpectedEndOfInput,
    UnexpectedToken,
)
from .grammar import GalileoParser
from .lexer import tokenize
from .tokens import Token, TokenKind
from utils.logger import get_logger
from utils.model_reader import read_model_file


def parse_tokens(tokens: Iterable[Token]) -> FaultTree:
    """Parse a token sequence into a FaultTree.

    Uses a fresh parser for each invocation, so repeated parses of
    independent streams never share state.

    Args:
        tokens: Typed tokens in source order; a trailing EOF is optional

    Returns:
        Root node of the parsed model

    Raises:
        ParseError: The tokens do not form a valid Galileo model
    """
    logger = get_logger()
    parser = GalileoParser(tokens)

    try:
        result = parser.parse_fault_tree()
        logger.debug(
            f"Model parsed successfully: top event '{result.top_event}', "
            f"{len(result.entities)} entities"
        )
        return result

    except ParseError as exc:
        logger.debug(f"{type(exc).__name__} encountered during model parsing: {exc}")
        raise

    except Exception as exc:
        logger.debug(f"Unexpected parsing error: {type(exc).__name__}: {exc}")
        raise ParseError(str(exc)) from exc


def parse(source: str) -> FaultTree:
    """Parse Galileo model text into a FaultTree.

    Args:
        source: Complete Galileo model

    Returns:
        Root node of the parsed model

    Raises:
        ParseError: The text contains illegal characters or is malformed

    Example:
        >>> tree = parse("toplevel T; T 2 of 3 X Y Z;")
        >>> tree.entities[0].operation
        VotingOf(k=2, n=3)
    """
    get_logger().debug(f"Parsing model ({len(source)} characters)")
    return parse_tokens(tokenize(source))


def parse_file(path: Union[str, Path]) -> FaultTree:
    """Read a Galileo model file and parse it.

    Raises:
        ModelFileError: The file is missing, unreadable or empty
        ParseError: The file content is malformed
    """
    return parse(read_model_file(path))


__all__ = [
    "parse",
    "parse_tokens",
    "parse_file",
    "FaultTree",
    "GalileoParser",
    "Token",
    "TokenKind",
    "ParseError",
    "IllegalCharacter",
    "UnexpectedToken",
    "UnexpectedEndOfInput",
    "AmbiguousOrInvalidEntity",
]

__version__ = "1.0.0"
__description__ = "Galileo dynamic fault tree model parsing components"
