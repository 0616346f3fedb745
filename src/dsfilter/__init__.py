"""
dsfilter - constraint based datasource filtering for agent configurations.

Datasources in an agent configuration can declare constraints, boolean
expressions over facts about the running agent and host. The filter
removes every datasource whose constraints do not hold.

Components:
- constraint_filter: Rewrites a configuration tree in place
- evaluate_constraint: Evaluates a single constraint expression
- EvaluationContext: Variables and functions available to constraints
- dsfilter.boolexp: Expression grammar, parser and evaluator
- dsfilter.tree: Configuration tree nodes and operations

Usage:
    from dsfilter import constraint_filter
    from dsfilter.tree import new_tree, to_python

    tree = new_tree({
        "datasources": [
            {"id": "system", "constraints": ["os.family == 'linux'"]},
        ],
    })
    constraint_filter(tree)
    config = to_python(tree)
"""

from dsfilter.release import VERSION
from dsfilter.config import Settings
from dsfilter.context import (
    EvaluationContext,
    build_context,
    get_context,
    reset_context,
)
from dsfilter.evaluator import evaluate_constraint
from dsfilter.filter import constraint_filter, datasource_identifier
from dsfilter.exceptions import (
    FilterError,
    ConstraintTypeError,
    ExpressionError,
    ContextError,
    TreeError,
)

__all__ = [
    # Filter
    "constraint_filter",
    "datasource_identifier",
    "evaluate_constraint",
    # Context
    "EvaluationContext",
    "Settings",
    "build_context",
    "get_context",
    "reset_context",
    # Errors
    "FilterError",
    "ConstraintTypeError",
    "ExpressionError",
    "ContextError",
    "TreeError",
]

__version__ = VERSION
