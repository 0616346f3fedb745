"""dsfilter boolexp module - Grammar, AST, parser and evaluator for constraint expressions."""

from dsfilter.boolexp.ast import (
    Expression,
    Literal,
    Variable,
    Call,
    Compare,
    Comparator,
    And,
    Or,
    Not,
)
from dsfilter.boolexp.parser import BoolexpParser, parse
from dsfilter.boolexp.registry import Function, FunctionRegistry
from dsfilter.boolexp.values import Value, ValueKind
from dsfilter.boolexp.evaluator import Evaluator, evaluate

__all__ = [
    "BoolexpParser",
    "parse",
    "Evaluator",
    "evaluate",
    "Function",
    "FunctionRegistry",
    "Value",
    "ValueKind",
    "Expression",
    "Literal",
    "Variable",
    "Call",
    "Compare",
    "Comparator",
    "And",
    "Or",
    "Not",
]
