# galileo/grammar.py
# This file is part of Galileo-Parse - A Dynamic Fault Tree Model Parser
#
# Recursive-descent parser for Galileo dynamic fault tree models

"""Galileo grammar implementation as a recursive-descent parser.

Grammar:
    faulttree   := top ';' ( (gate | basicevent) ';' )* EOF
    top         := 'toplevel' NAME
    gate        := NAME operation NAME*
    basicevent  := NAME property*
    operation   := 'or' | 'and' | INT 'of' INT
    property    := 'lambda' '=' number
                 | 'ph' '=' rateMatrix
                 | 'prob' '=' number
                 | 'dorm' '=' number
                 | 'repair' '=' number
                 | 'failurestates' '=' INT
    rateMatrix  := '[' matrixRow (';' matrixRow)* ']'
    matrixRow   := number (',' number)*

Every decision is a direct match on the current token kind, except the
gate/basic event choice, which looks one token past the entity name. The
starter sets at each decision point are disjoint, so the parser never
backtracks and runs in time linear in the number of tokens.
"""

from typing import Callable, Dict, FrozenSet, Iterable, List

from .ast_nodes import (
    And,
    BasicEvent,
    Dormancy,
    Entity,
    FaultTree,
    Gate,
    Lambda,
    MatrixRow,
    Number,
    NumFailureStates,
    Operation,
    Or,
    Phase,
    Probability,
    Property,
    RateMatrix,
    Repair,
    VotingOf,
)
from .exceptions import AmbiguousOrInvalidEntity, UnexpectedEndOfInput, UnexpectedToken
from .tokens import Token, TokenKind, TokenStream
from utils.logger import get_logger

OPERATION_START: FrozenSet[TokenKind] = frozenset(
    {TokenKind.OR, TokenKind.AND, TokenKind.INT}
)

PROPERTY_START: FrozenSet[TokenKind] = frozenset(
    {
        TokenKind.LAMBDA,
        TokenKind.PH,
        TokenKind.PROBABILITY,
        TokenKind.DORMANCY,
        TokenKind.REPAIR,
        TokenKind.FAILURE_STATES,
    }
)

# An empty basic event is terminated directly by ';'
BASIC_EVENT_START: FrozenSet[TokenKind] = PROPERTY_START | {TokenKind.SEMICOLON}

NUMBER_KINDS: FrozenSet[TokenKind] = frozenset({TokenKind.NUMBER, TokenKind.INT})


class GalileoParser:
    """Recursive-descent parser for one Galileo token stream.

    A parser instance owns its token stream and is used for a single parse.
    All results are built bottom-up as immutable nodes; the parser keeps no
    state beyond its position in the stream.
    """

    def __init__(self, tokens: Iterable[Token]):
        self.stream = tokens if isinstance(tokens, TokenStream) else TokenStream(tokens)
        self._property_parsers: Dict[TokenKind, Callable[[], Property]] = {
            TokenKind.LAMBDA: lambda: Lambda(self.parse_number()),
            TokenKind.PH: lambda: Phase(self.parse_rate_matrix()),
            TokenKind.PROBABILITY: lambda: Probability(self.parse_number()),
            TokenKind.DORMANCY: lambda: Dormancy(self.parse_number()),
            TokenKind.REPAIR: lambda: Repair(self.parse_number()),
            TokenKind.FAILURE_STATES: lambda: NumFailureStates(self.parse_int()),
        }

    # Primitive literals

    def _fail(self, expected: Iterable[TokenKind]) -> UnexpectedToken:
        found = self.stream.peek()
        position = self.stream.position()
        if found is TokenKind.EOF:
            return UnexpectedEndOfInput(expected, position)
        return UnexpectedToken(expected, found, position)

    def expect(self, kind: TokenKind) -> Token:
        """Consume the current token if it is of ``kind``.

        Raises:
            UnexpectedEndOfInput: The stream is at EOF and ``kind`` is not EOF
            UnexpectedToken: Any other mismatch
        """
        if self.stream.peek() is kind:
            return self.stream.advance()
        raise self._fail({kind})

    def parse_identifier(self) -> str:
        return self.expect(TokenKind.NAME).value

    def parse_number(self) -> Number:
        """Parse a NUMBER literal; integer literals are accepted as numbers."""
        if self.stream.peek() in NUMBER_KINDS:
            return self.stream.advance().value
        raise self._fail(NUMBER_KINDS)

    def parse_int(self) -> int:
        return self.expect(TokenKind.INT).value

    # Gate operations

    def parse_operation(self) -> Operation:
        kind = self.stream.peek()
        if kind is TokenKind.OR:
            self.stream.advance()
            return Or()
        if kind is TokenKind.AND:
            self.stream.advance()
            return And()
        if kind is TokenKind.INT:
            k = self.parse_int()
            self.expect(TokenKind.OF)
            n = self.parse_int()
            return VotingOf(k, n)
        raise self._fail(OPERATION_START)

    # Basic event properties

    def parse_property(self) -> Property:
        """Parse one ``KEYWORD '=' VALUE`` property."""
        value_parser = self._property_parsers.get(self.stream.peek())
        if value_parser is None:
            raise self._fail(PROPERTY_START)
        self.stream.advance()
        self.expect(TokenKind.EQ)
        return value_parser()

    def parse_rate_matrix(self) -> RateMatrix:
        """Parse ``'[' row (';' row)* ']'``.

        A separator must always be followed by another row or cell, so
        ``[1,]`` and ``[1;]`` fail at the closing bracket.
        """
        self.expect(TokenKind.LBRACKET)
        rows: List[MatrixRow] = [self.parse_matrix_row()]
        while self.stream.peek() is TokenKind.SEMICOLON:
            self.stream.advance()
            rows.append(self.parse_matrix_row())
        self.expect(TokenKind.RBRACKET)
        return RateMatrix(tuple(rows))

    def parse_matrix_row(self) -> MatrixRow:
        cells: List[Number] = [self.parse_number()]
        while self.stream.peek() is TokenKind.COMMA:
            self.stream.advance()
            cells.append(self.parse_number())
        return MatrixRow(tuple(cells))

    # Entities

    def parse_entity(self) -> Entity:
        """Parse one gate or basic event.

        Both alternatives start with the entity name, so the choice is made
        on the token that follows it: an operation starter selects a gate,
        a property keyword or ';' selects a basic event.

        Raises:
            AmbiguousOrInvalidEntity: The token after the name starts neither
        """
        if self.stream.peek() is not TokenKind.NAME:
            raise self._fail({TokenKind.NAME})

        lookahead = self.stream.peek(1)
        if lookahead in OPERATION_START:
            return self.parse_gate()
        if lookahead in BASIC_EVENT_START:
            return self.parse_basic_event()

        name = self.stream.advance().value
        raise AmbiguousOrInvalidEntity(
            name,
            OPERATION_START | BASIC_EVENT_START,
            lookahead,
            self.stream.position(),
        )

    def parse_gate(self) -> Gate:
        name = self.parse_identifier()
        operation = self.parse_operation()
        inputs: List[str] = []
        while self.stream.peek() is TokenKind.NAME:
            inputs.append(self.stream.advance().value)
        return Gate(name, operation, tuple(inputs))

    def parse_basic_event(self) -> BasicEvent:
        name = self.parse_identifier()
        properties: List[Property] = []
        while self.stream.peek() in PROPERTY_START:
            properties.append(self.parse_property())
        return BasicEvent(name, tuple(properties))

    # Document

    def parse_fault_tree(self) -> FaultTree:
        """Parse a complete model: header, entities, end of input."""
        logger = get_logger()

        self.expect(TokenKind.TOPLEVEL)
        top_event = self.parse_identifier()
        self.expect(TokenKind.SEMICOLON)
        logger.debug(f"Top event: {top_event}")

        entities: List[Entity] = []
        while self.stream.peek() is TokenKind.NAME:
            entity = self.parse_entity()
            self.expect(TokenKind.SEMICOLON)
            logger.debug(f"Parsed {type(entity).__name__}: {entity}")
            entities.append(entity)

        # Only a further entity name or the end of input may follow
        if self.stream.peek() is not TokenKind.EOF:
            raise self._fail({TokenKind.NAME, TokenKind.EOF})

        return FaultTree(top_event, tuple(entities))
