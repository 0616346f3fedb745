"""
Configuration tree nodes.

The tree mirrors a parsed agent configuration: dictionaries are ordered
lists of keys, lists keep their element order, and leaves are typed
scalars. Nodes compare by value; callers that care about identity use `is`.
"""

from abc import ABC
from dataclasses import dataclass, field
from typing import Optional, Union


class Node(ABC):
    """Base class for every tree node."""

    def find(self, name: str) -> Optional["Node"]:
        """Return the child named `name`, or None when there is none."""
        return None


@dataclass
class Key(Node):
    """
    A named entry of a Dict.

    Represents: name: value
    """
    name: str
    value: Optional[Node] = None

    def find(self, name: str) -> Optional[Node]:
        if self.value is None:
            return None
        return self.value.find(name)

    def __str__(self) -> str:
        return "" if self.value is None else str(self.value)


@dataclass
class Dict(Node):
    """An ordered mapping of Key nodes."""
    value: list[Key] = field(default_factory=list)

    def find(self, name: str) -> Optional[Key]:
        for key in self.value:
            if key.name == name:
                return key
        return None

    def __str__(self) -> str:
        return "{" + ", ".join(f"{k.name}: {k}" for k in self.value) + "}"


@dataclass
class List(Node):
    """An ordered sequence of nodes; children are addressed by index."""
    value: list[Node] = field(default_factory=list)

    def find(self, name: str) -> Optional[Node]:
        try:
            index = int(name)
        except ValueError:
            return None
        if 0 <= index < len(self.value):
            return self.value[index]
        return None

    def __str__(self) -> str:
        return "[" + ", ".join(str(n) for n in self.value) + "]"


@dataclass
class StrVal(Node):
    value: str

    def __str__(self) -> str:
        return self.value


@dataclass
class IntVal(Node):
    value: int

    def __str__(self) -> str:
        return str(self.value)


@dataclass
class FloatVal(Node):
    value: float

    def __str__(self) -> str:
        return str(self.value)


@dataclass
class BoolVal(Node):
    value: bool

    def __str__(self) -> str:
        return "true" if self.value else "false"


Scalar = Union[StrVal, IntVal, FloatVal, BoolVal]
