"""
Tree operations - build, convert, look up and rewrite configuration trees.

Paths are dot separated key names; list elements are addressed by their
index (e.g. "datasources.0.constraints").
"""

import logging
from typing import Any, Optional

from dsfilter.exceptions import TreeError
from dsfilter.tree.ast import (
    BoolVal,
    Dict,
    FloatVal,
    IntVal,
    Key,
    List,
    Node,
    StrVal,
)

logger = logging.getLogger(__name__)


def new_tree(data: Any) -> Node:
    """
    Build a tree from plain Python data.

    Args:
        data: Nested dicts, lists and scalars (str, int, float, bool)

    Returns:
        Root node of the new tree

    Raises:
        TreeError: If a value has no node representation
    """
    if isinstance(data, dict):
        return Dict([
            Key(str(name), None if value is None else new_tree(value))
            for name, value in data.items()
        ])
    if isinstance(data, (list, tuple)):
        return List([new_tree(item) for item in data])
    if isinstance(data, str):
        return StrVal(data)
    # bool first, it is an int subclass
    if isinstance(data, bool):
        return BoolVal(data)
    if isinstance(data, int):
        return IntVal(data)
    if isinstance(data, float):
        return FloatVal(data)
    raise TreeError(f"cannot convert value of type {type(data).__name__} to a tree node")


def to_python(node: Optional[Node]) -> Any:
    """Convert a tree back into plain Python data."""
    if node is None:
        return None
    if isinstance(node, Dict):
        return {key.name: to_python(key.value) for key in node.value}
    if isinstance(node, Key):
        return to_python(node.value)
    if isinstance(node, List):
        return [to_python(item) for item in node.value]
    return node.value


def lookup(root: Node, path: str) -> Optional[Node]:
    """
    Find the node stored at `path`.

    Keys are unwrapped: looking up "datasources" returns the List held by
    the key, not the Key itself.

    Returns:
        The node at `path`, or None if any segment is missing
    """
    current: Optional[Node] = root
    for segment in path.split("."):
        if current is None:
            return None
        current = current.find(segment)
    if isinstance(current, Key):
        return current.value
    return current


def _split(path: str) -> tuple[str, str]:
    parent, _, name = path.rpartition(".")
    return parent, name


def _parent_dict(root: Node, parent_path: str) -> Dict:
    parent = root if not parent_path else lookup(root, parent_path)
    if not isinstance(parent, Dict):
        raise TreeError(f"'{parent_path or '.'}' is not a dictionary")
    return parent


def replace(root: Node, path: str, node: Node) -> None:
    """
    Swap the value held by the existing key at `path` for `node`.

    The swap is a single assignment, so the key is never observed missing.

    Raises:
        TreeError: If the parent is not a dictionary or the key is absent;
            the tree is left untouched
    """
    parent_path, name = _split(path)
    key = _parent_dict(root, parent_path).find(name)
    if key is None:
        raise TreeError(f"key '{path}' not found")
    key.value = node


def insert(root: Node, node: Node, path: str) -> None:
    """
    Store `node` at `path`, creating intermediate dictionaries.

    Raises:
        TreeError: If an intermediate segment holds a non dictionary value
    """
    current = root
    segments = path.split(".")
    for segment in segments[:-1]:
        if not isinstance(current, Dict):
            raise TreeError(f"cannot insert '{path}': '{segment}' has no dictionary parent")
        key = current.find(segment)
        if key is None:
            key = Key(segment, Dict())
            current.value.append(key)
        elif key.value is None:
            key.value = Dict()
        current = key.value

    if not isinstance(current, Dict):
        raise TreeError(f"cannot insert '{path}': parent is not a dictionary")
    key = current.find(segments[-1])
    if key is None:
        current.value.append(Key(segments[-1], node))
    else:
        key.value = node


def remove_key(root: Node, path: str) -> None:
    """Remove the key at `path`. Missing keys are ignored."""
    parent_path, name = _split(path)
    parent = root if not parent_path else lookup(root, parent_path)
    if not isinstance(parent, Dict):
        logger.debug("remove '%s': parent is not a dictionary", path)
        return
    parent.value = [key for key in parent.value if key.name != name]
