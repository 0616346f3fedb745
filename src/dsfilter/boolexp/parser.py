"""
Boolexp Parser - Lark-based parser for constraint expressions.

Parses expression strings into AST nodes that the evaluator walks.
"""

from lark import Lark, Transformer
from lark.exceptions import LarkError

from dsfilter.boolexp.grammar import get_grammar
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
from dsfilter.exceptions import ExpressionSyntaxError


class BoolexpTransformer(Transformer):
    """
    Lark Transformer that converts the parse tree to boolexp AST nodes.
    """

    # --- Literals ---

    def string(self, items):
        # Remove surrounding quotes
        return Literal(str(items[0])[1:-1])

    def number(self, items):
        s = str(items[0])
        return Literal(float(s) if '.' in s else int(s))

    def true_val(self, _):
        return Literal(True)

    def false_val(self, _):
        return Literal(False)

    # --- References ---

    def variable(self, items):
        return Variable(".".join(str(i) for i in items))

    def argument_list(self, items):
        return tuple(items)

    def call(self, items):
        name = str(items[0])
        arguments = items[1] if len(items) > 1 and items[1] is not None else ()
        return Call(name=name, arguments=arguments)

    # --- Operators ---

    def compare(self, items):
        left, comparator, right = items
        return Compare(comparator=Comparator(str(comparator)), left=left, right=right)

    def and_op(self, items):
        return And(items[0], items[1])

    def or_op(self, items):
        return Or(items[0], items[1])

    def not_op(self, items):
        return Not(items[0])


class BoolexpParser:
    """
    Constraint expression parser using Lark.

    Example:
        parser = BoolexpParser()
        expr = parser.parse("os.family == 'linux'")
    """

    def __init__(self):
        self._parser = Lark(
            get_grammar(),
            parser='lalr',
            transformer=BoolexpTransformer(),
        )

    def parse(self, expression: str) -> Expression:
        """
        Parse an expression string into an AST.

        Args:
            expression: The constraint expression to parse

        Returns:
            Root Expression node

        Raises:
            ExpressionSyntaxError: If parsing fails
        """
        try:
            return self._parser.parse(expression)
        except LarkError as e:
            raise ExpressionSyntaxError(
                f"invalid expression: {e}", constraint=expression
            ) from e


def parse(expression: str) -> Expression:
    """
    Convenience function to parse a constraint expression.

    For repeated parsing, use BoolexpParser directly for better performance.
    """
    return BoolexpParser().parse(expression)
