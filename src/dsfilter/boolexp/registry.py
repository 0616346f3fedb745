"""
Function registry - host functions callable from constraint expressions.

Usage:
    registry = FunctionRegistry()
    registry.register("validate_version", validate_version)

    fn = registry.get("validate_version")
"""

import threading
from typing import Callable, Optional, Sequence

from dsfilter.boolexp.values import Value
from dsfilter.exceptions import DuplicateFunctionError

Function = Callable[[Sequence[Value]], bool]


class FunctionRegistry:
    """
    Registry of constraint functions by name.

    Names are bound once; a second registration under the same name is
    rejected rather than replacing the first.
    """

    def __init__(self):
        self._functions: dict[str, Function] = {}
        self._lock = threading.Lock()

    def register(self, name: str, function: Function) -> None:
        """
        Register `function` under `name`.

        Raises:
            TypeError: If `function` is not callable
            DuplicateFunctionError: If `name` is already registered
        """
        if not callable(function):
            raise TypeError(f"Expected callable, got {type(function).__name__}")
        with self._lock:
            if name in self._functions:
                raise DuplicateFunctionError(name)
            self._functions[name] = function

    def get(self, name: str) -> Optional[Function]:
        """Get a function by name, or None if not registered."""
        return self._functions.get(name)

    def names(self) -> list[str]:
        """List all registered function names."""
        return list(self._functions.keys())

    def __len__(self) -> int:
        return len(self._functions)

    def __contains__(self, name: str) -> bool:
        return name in self._functions
