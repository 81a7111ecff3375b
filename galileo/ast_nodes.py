# galileo/ast_nodes.py
# This file is part of Galileo-Parse - A Dynamic Fault Tree Model Parser
#
# Abstract Syntax Tree node classes for dynamic fault tree models

"""AST node classes for representing parsed Galileo models.

This module defines immutable and hashable node classes describing a dynamic
fault tree: a named top event and an ordered list of entities, each of which
is either a gate combining other entities or a basic event with stochastic
properties.

Node Types:
    FaultTree: Document root
    Gate, BasicEvent: Entities (closed union ``Entity``)
    Or, And, VotingOf: Gate operations (closed union ``Operation``)
    Lambda, Phase, Probability, Dormancy, Repair, NumFailureStates:
        Basic event properties (closed union ``Property``)
    RateMatrix, MatrixRow: Phase-type rate matrix literal

Every node renders back to Galileo syntax through ``__str__``, so that
``parse(str(tree)) == tree`` holds for any parsed tree. The parser performs
no semantic checks; repeated property kinds on one basic event are kept in
source order and resolving them is up to the consumer.
"""

from __future__ import annotations
import re
from dataclasses import dataclass
from typing import Iterator, Tuple, Union

_BARE_NAME = re.compile(r"[a-zA-Z_][a-zA-Z0-9_\-.]*\Z")
_KEYWORDS = frozenset(
    {"toplevel", "or", "and", "of", "lambda", "ph", "prob", "dorm", "repair", "failurestates"}
)

Number = Union[int, float]


def format_name(name: str) -> str:
    """Return ``name`` as Galileo source, quoting it when required."""
    if _BARE_NAME.match(name) and name not in _KEYWORDS:
        return name
    return f'"{name}"'


def format_number(value: Number) -> str:
    return repr(value)


# Gate operations


@dataclass(frozen=True, slots=True)
class Or:
    """Gate fails when any input fails."""

    def __str__(self) -> str:
        return "or"


@dataclass(frozen=True, slots=True)
class And:
    """Gate fails when all inputs fail."""

    def __str__(self) -> str:
        return "and"


@dataclass(frozen=True, slots=True)
class VotingOf:
    """k-out-of-n voting gate.

    No relation between ``k`` and ``n`` (or the actual input count) is
    enforced by the parser.

    Attributes:
        k: Number of failed inputs that fail the gate
        n: Declared number of inputs
    """

    k: int
    n: int

    def __str__(self) -> str:
        return f"{self.k} of {self.n}"


Operation = Union[Or, And, VotingOf]


# Rate matrix literal


@dataclass(frozen=True, slots=True)
class MatrixRow:
    """One row of a rate matrix; at least one cell."""

    cells: Tuple[Number, ...]

    def __str__(self) -> str:
        return ", ".join(format_number(cell) for cell in self.cells)


@dataclass(frozen=True, slots=True)
class RateMatrix:
    """Phase-type rate matrix literal ``[a, b; c, d]``.

    Rows may differ in length; rectangularity is a consumer concern.

    Attributes:
        rows: Matrix rows in source order, at least one
    """

    rows: Tuple[MatrixRow, ...]

    def to_lists(self) -> list[list[Number]]:
        """Return the cells as nested lists, row by row."""
        return [list(row.cells) for row in self.rows]

    def __str__(self) -> str:
        return "[" + "; ".join(str(row) for row in self.rows) + "]"


# Basic event properties


@dataclass(frozen=True, slots=True)
class Lambda:
    """Exponential failure rate."""

    value: Number

    def __str__(self) -> str:
        return f"lambda={format_number(self.value)}"


@dataclass(frozen=True, slots=True)
class Phase:
    """Phase-type distribution given by its rate matrix."""

    matrix: RateMatrix

    def __str__(self) -> str:
        return f"ph={self.matrix}"


@dataclass(frozen=True, slots=True)
class Probability:
    value: Number

    def __str__(self) -> str:
        return f"prob={format_number(self.value)}"


@dataclass(frozen=True, slots=True)
class Dormancy:
    """Dormancy factor applied while the event is a cold or warm spare."""

    value: Number

    def __str__(self) -> str:
        return f"dorm={format_number(self.value)}"


@dataclass(frozen=True, slots=True)
class Repair:
    value: Number

    def __str__(self) -> str:
        return f"repair={format_number(self.value)}"


@dataclass(frozen=True, slots=True)
class NumFailureStates:
    """Number of failure states of a phase-type basic event."""

    count: int

    def __str__(self) -> str:
        return f"failurestates={self.count}"


Property = Union[Lambda, Phase, Probability, Dormancy, Repair, NumFailureStates]


# Entities


@dataclass(frozen=True, slots=True)
class Gate:
    """Gate combining the named inputs with an operation.

    Attributes:
        name: Gate name
        operation: Or, And or VotingOf
        inputs: Input names in source order, possibly empty
    """

    name: str
    operation: Operation
    inputs: Tuple[str, ...] = ()

    def __str__(self) -> str:
        parts = [format_name(self.name), str(self.operation)]
        parts.extend(format_name(inp) for inp in self.inputs)
        return " ".join(parts)


@dataclass(frozen=True, slots=True)
class BasicEvent:
    """Basic event with its declared properties.

    Attributes:
        name: Event name
        properties: Properties in source order, possibly empty or repeated
    """

    name: str
    properties: Tuple[Property, ...] = ()

    def __str__(self) -> str:
        parts = [format_name(self.name)]
        parts.extend(str(prop) for prop in self.properties)
        return " ".join(parts)


Entity = Union[Gate, BasicEvent]


@dataclass(frozen=True, slots=True)
class FaultTree:
    """Root of a parsed Galileo model.

    Attributes:
        top_event: Name declared by the ``toplevel`` header
        entities: Gates and basic events in source order
    """

    top_event: str
    entities: Tuple[Entity, ...] = ()

    @property
    def gates(self) -> Tuple[Gate, ...]:
        return tuple(e for e in self.entities if isinstance(e, Gate))

    @property
    def basic_events(self) -> Tuple[BasicEvent, ...]:
        return tuple(e for e in self.entities if isinstance(e, BasicEvent))

    def __len__(self) -> int:
        return len(self.entities)

    def __iter__(self) -> Iterator[Entity]:
        return iter(self.entities)

    def __str__(self) -> str:
        lines = [f"toplevel {format_name(self.top_event)};"]
        lines.extend(f"{entity};" for entity in self.entities)
        return "\n".join(lines) + "\n"
