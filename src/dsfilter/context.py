# -*- encoding: utf-8 -*-
"""
Evaluation context - the variables and functions constraints run against.

The process-wide context is built on first use and cached for the rest of
the process. Callers that want a different context (tests, embedding)
build one with build_context() and pass it explicitly.
"""

import logging
import threading
from dataclasses import dataclass
from typing import Optional

from dsfilter.boolexp.registry import FunctionRegistry
from dsfilter.config import Settings
from dsfilter.facts import VariableStore, gather
from dsfilter.functions import register_builtins

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EvaluationContext:
    """Variable store and function registry bound together."""
    variables: VariableStore
    functions: FunctionRegistry


def build_context(settings: Optional[Settings] = None) -> EvaluationContext:
    """
    Build a new evaluation context.

    Functions are registered before facts are gathered, so a broken
    registry fails fast without touching the host.

    Raises:
        DuplicateFunctionError: If built-ins collide
        HostFactsError: If host facts cannot be read
    """
    functions = register_builtins(FunctionRegistry())
    variables = gather(settings)
    return EvaluationContext(variables=variables, functions=functions)


_context: Optional[EvaluationContext] = None
_context_lock = threading.Lock()


def get_context() -> EvaluationContext:
    """
    Return the process-wide evaluation context, building it on first use.

    Concurrent first callers block until one build finishes. A failed build
    is not cached; the next caller tries again.
    """
    global _context

    context = _context
    if context is not None:
        return context

    with _context_lock:
        if _context is None:
            _context = build_context()
            logger.debug(
                "evaluation context built with %d variables and functions %s",
                len(_context.variables), _context.functions.names(),
            )
        return _context


def reset_context() -> None:
    """Drop the cached process-wide context."""
    global _context
    with _context_lock:
        _context = None
