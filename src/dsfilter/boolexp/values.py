"""
Typed values handed to registered functions.

Function arguments arrive as tagged Values so a function can check the
kind of each argument before using it.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Union

from dsfilter.exceptions import ExpressionTypeError


class ValueKind(Enum):
    STRING = "string"
    NUMBER = "number"
    BOOL = "bool"


Raw = Union[str, int, float, bool]


def kind_of(value: Raw) -> ValueKind:
    """Return the kind of a raw Python value."""
    # bool first, it is an int subclass
    if isinstance(value, bool):
        return ValueKind.BOOL
    if isinstance(value, (int, float)):
        return ValueKind.NUMBER
    if isinstance(value, str):
        return ValueKind.STRING
    raise ExpressionTypeError(f"unsupported value type {type(value).__name__}")


@dataclass(frozen=True)
class Value:
    """A function argument tagged with its kind."""
    kind: ValueKind
    value: Raw

    @classmethod
    def of(cls, value: Raw) -> "Value":
        return cls(kind=kind_of(value), value=value)

    @property
    def is_string(self) -> bool:
        return self.kind is ValueKind.STRING
