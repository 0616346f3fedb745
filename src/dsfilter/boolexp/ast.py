"""
Boolexp AST - expression nodes produced by the parser.

Nodes are immutable; the evaluator walks them, so one parsed expression
can be evaluated against any number of variable stores.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Union


class Comparator(Enum):
    """Comparison operators."""
    EQ = "=="
    NE = "!="
    LT = "<"
    GT = ">"
    LE = "<="
    GE = ">="


@dataclass(frozen=True)
class Literal:
    """A string, number or boolean constant."""
    value: Union[str, int, float, bool]


@dataclass(frozen=True)
class Variable:
    """
    A reference to a variable in the store.

    Represents: os.family or %{[os.family]}
    """
    name: str


@dataclass(frozen=True)
class Call:
    """
    A call to a registered function.

    Represents: name(arg, ...)
    """
    name: str
    arguments: tuple["Expression", ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class Compare:
    """Represents: left comparator right"""
    comparator: Comparator
    left: "Expression"
    right: "Expression"


@dataclass(frozen=True)
class And:
    left: "Expression"
    right: "Expression"


@dataclass(frozen=True)
class Or:
    left: "Expression"
    right: "Expression"


@dataclass(frozen=True)
class Not:
    operand: "Expression"


Expression = Union[Literal, Variable, Call, Compare, And, Or, Not]
