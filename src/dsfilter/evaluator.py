"""
Constraint evaluator - evaluates one constraint against an evaluation context.
"""

from typing import Optional

from dsfilter.boolexp.evaluator import evaluate
from dsfilter.context import EvaluationContext, get_context
from dsfilter.exceptions import FilterError


def evaluate_constraint(
    expression: str,
    context: Optional[EvaluationContext] = None,
) -> bool:
    """
    Evaluate a constraint expression.

    Args:
        expression: Constraint text, e.g. "os.family == 'linux'"
        context: Context to evaluate against; the process-wide context
            is used if None

    Returns:
        The boolean verdict

    Raises:
        ExpressionError: If the expression cannot be parsed or evaluated
        ContextError: If the process-wide context cannot be built
    """
    if context is None:
        context = get_context()

    try:
        return evaluate(expression, context.functions, context.variables.lookup)
    except FilterError as e:
        e.annotate(constraint=expression)
        raise
