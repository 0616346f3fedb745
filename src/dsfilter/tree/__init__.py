"""dsfilter tree module - configuration tree nodes and operations."""

from dsfilter.tree.ast import (
    Node,
    Key,
    Dict,
    List,
    StrVal,
    IntVal,
    FloatVal,
    BoolVal,
)
from dsfilter.tree.ops import (
    new_tree,
    to_python,
    lookup,
    replace,
    insert,
    remove_key,
)

__all__ = [
    "Node",
    "Key",
    "Dict",
    "List",
    "StrVal",
    "IntVal",
    "FloatVal",
    "BoolVal",
    "new_tree",
    "to_python",
    "lookup",
    "replace",
    "insert",
    "remove_key",
]
