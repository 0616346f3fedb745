"""
Boolexp Evaluator - walks expression ASTs against variables and functions.

Usage:
    registry = FunctionRegistry()
    store = VariableStore({"os.family": "linux"})
    result = evaluate("os.family == 'linux'", registry, store.lookup)
"""

import functools
import operator
from typing import Any, Callable, Optional

from dsfilter.boolexp.ast import (
    And,
    Call,
    Compare,
    Comparator,
    Expression,
    Literal,
    Not,
    Or,
    Variable,
)
from dsfilter.boolexp.parser import BoolexpParser
from dsfilter.boolexp.registry import FunctionRegistry
from dsfilter.boolexp.values import Value, ValueKind, kind_of
from dsfilter.exceptions import (
    ExpressionError,
    ExpressionTypeError,
    FilterError,
    FunctionCallError,
    UnknownFunctionError,
    UnknownVariableError,
)


_COMPARISON_OPS: dict[Comparator, Callable[[Any, Any], bool]] = {
    Comparator.EQ: operator.eq,
    Comparator.NE: operator.ne,
    Comparator.LT: operator.lt,
    Comparator.GT: operator.gt,
    Comparator.LE: operator.le,
    Comparator.GE: operator.ge,
}

_ORDERABLE = (ValueKind.NUMBER, ValueKind.STRING)

# name -> (value, found)
VariableLookup = Callable[[str], tuple[Optional[Any], bool]]


@functools.lru_cache(maxsize=None)
def default_parser() -> BoolexpParser:
    """Shared parser instance; building the LALR tables is the costly part."""
    return BoolexpParser()


def _chain(node: Expression, kind: type) -> list[Expression]:
    """Operands of a left-nested chain of `kind` nodes, left to right."""
    operands = []
    while isinstance(node, kind):
        operands.append(node.right)
        node = node.left
    operands.append(node)
    operands.reverse()
    return operands


class Evaluator:
    """
    Evaluates parsed expressions.

    `and` and `or` short-circuit left to right, so a function on the
    right-hand side is only called when its result can change the outcome.
    Chains of the same operator are walked in a loop, so long flat chains
    do not grow the call stack.
    """

    def __init__(self, functions: FunctionRegistry, lookup: VariableLookup):
        self._functions = functions
        self._lookup = lookup

    def evaluate(self, node: Expression) -> Any:
        if isinstance(node, Literal):
            return node.value
        if isinstance(node, Variable):
            value, found = self._lookup(node.name)
            if not found:
                raise UnknownVariableError(node.name)
            return value
        if isinstance(node, Call):
            return self._call(node)
        if isinstance(node, Compare):
            return self._compare(node)
        if isinstance(node, And):
            return all(self._boolean(operand) for operand in _chain(node, And))
        if isinstance(node, Or):
            return any(self._boolean(operand) for operand in _chain(node, Or))
        if isinstance(node, Not):
            return not self._boolean(node.operand)
        raise ExpressionTypeError(f"unsupported expression node {type(node).__name__}")

    def _boolean(self, node: Expression) -> bool:
        value = self.evaluate(node)
        if not isinstance(value, bool):
            raise ExpressionTypeError(
                f"expected a boolean, got {kind_of(value).value} {value!r}"
            )
        return value

    def _compare(self, node: Compare) -> bool:
        left = self.evaluate(node.left)
        right = self.evaluate(node.right)
        left_kind, right_kind = kind_of(left), kind_of(right)

        if node.comparator in (Comparator.EQ, Comparator.NE):
            equal = left_kind is right_kind and left == right
            return equal if node.comparator is Comparator.EQ else not equal

        if left_kind is not right_kind or left_kind not in _ORDERABLE:
            raise ExpressionTypeError(
                f"cannot compare {left_kind.value} {left!r} "
                f"{node.comparator.value} {right_kind.value} {right!r}"
            )
        return _COMPARISON_OPS[node.comparator](left, right)

    def _call(self, node: Call) -> bool:
        function = self._functions.get(node.name)
        if function is None:
            raise UnknownFunctionError(node.name)

        arguments = [Value.of(self.evaluate(arg)) for arg in node.arguments]
        try:
            result = function(arguments)
        except FilterError:
            raise
        except Exception as e:
            raise FunctionCallError(f"{node.name}: {e}") from e

        if not isinstance(result, bool):
            raise ExpressionTypeError(
                f"function '{node.name}' returned {type(result).__name__}, expected bool"
            )
        return result


def evaluate(
    expression: str,
    functions: FunctionRegistry,
    lookup: VariableLookup,
) -> bool:
    """
    Parse and evaluate a constraint expression.

    Args:
        expression: Expression text
        functions: Functions callable from the expression
        lookup: Variable name -> (value, found)

    Returns:
        The boolean verdict

    Raises:
        ExpressionError: If the expression cannot be parsed or evaluated
    """
    tree = default_parser().parse(expression)
    try:
        result = Evaluator(functions, lookup).evaluate(tree)
    except RecursionError as e:
        raise ExpressionError(
            "expression is nested too deeply", constraint=expression
        ) from e
    if not isinstance(result, bool):
        raise ExpressionTypeError(
            f"expression evaluates to {kind_of(result).value}, expected bool",
            constraint=expression,
        )
    return result
