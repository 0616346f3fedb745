# -*- encoding: utf-8 -*-
"""
Datasource filter - drops datasources whose constraints do not hold.

A datasource may carry a list of constraint expressions:

    datasources:
      - namespace: default
        use_output: default
        constraints:
          - "os.family == 'linux'"
          - "validate_version(agent.version, '>=7.0.0')"
        inputs: ...

All constraints must hold for the datasource to be kept; a datasource
without constraints is always kept. Survivors keep their order and node
identity, and a tree whose datasources all match is not touched at all.
"""

import logging
from typing import Optional

from dsfilter.context import EvaluationContext
from dsfilter.evaluator import evaluate_constraint
from dsfilter.exceptions import ConstraintTypeError, FilterError
from dsfilter.tree import Key, List, Node, StrVal, lookup, replace

logger = logging.getLogger(__name__)

DATASOURCES_KEY = "datasources"
CONSTRAINTS_KEY = "constraints"


def constraint_filter(
    tree: Node,
    context: Optional[EvaluationContext] = None,
) -> None:
    """
    Remove datasources whose constraints do not hold from `tree`, in place.

    Trees without a datasources list are left alone. Errors abort the pass
    before the tree is modified; the rewrite itself is a single replace.

    Args:
        tree: Configuration tree root
        context: Evaluation context; the process-wide context is used if None

    Raises:
        ConstraintTypeError: If constraints are not a list of strings
        ExpressionError: If a constraint cannot be evaluated
        ContextError: If the process-wide context cannot be built
        TreeError: If the datasources list cannot be replaced
    """
    datasources = lookup(tree, DATASOURCES_KEY)
    if not isinstance(datasources, List):
        return

    kept = [ds for ds in datasources.value if _matches(ds, context)]
    if len(kept) == len(datasources.value):
        return

    logger.debug(
        "constraints removed %d of %d datasources",
        len(datasources.value) - len(kept), len(datasources.value),
    )
    replace(tree, DATASOURCES_KEY, List(kept))


def _matches(datasource: Node, context: Optional[EvaluationContext]) -> bool:
    constraints_key = datasource.find(CONSTRAINTS_KEY)
    if constraints_key is None:
        return True

    constraints = constraints_key.value if isinstance(constraints_key, Key) else constraints_key
    if not isinstance(constraints, List):
        raise ConstraintTypeError(
            "constraints not a list", datasource=datasource_identifier(datasource)
        )

    for node in constraints.value:
        if not isinstance(node, StrVal):
            raise ConstraintTypeError(
                "constraints is not a string", datasource=datasource_identifier(datasource)
            )

        constraint = node.value
        try:
            matched = evaluate_constraint(constraint, context)
        except FilterError as e:
            e.annotate(constraint=constraint, datasource=datasource_identifier(datasource))
            raise

        if not matched:
            logger.info(
                "constraint '%s' not matching for datasource '%s'",
                constraint, datasource_identifier(datasource),
            )
            return False

    return True


def _field(datasource: Node, name: str, default: str) -> str:
    key = datasource.find(name)
    if isinstance(key, Key) and key.value is not None:
        return str(key.value)
    return default


def datasource_identifier(datasource: Node) -> str:
    """Human readable identifier: namespace:X, output:Y, id:Z"""
    namespace = _field(datasource, "namespace", "default")
    output = _field(datasource, "use_output", "default")
    ds_id = _field(datasource, "id", "unknown")
    return f"namespace:{namespace}, output:{output}, id:{ds_id}"
