"""Key path extraction from parsed translation trees."""

from enum import Enum
from typing import Any, Iterator, Set, Tuple


class NodeKind(Enum):
    """How a translation value contributes to the key set."""

    LEAF = "leaf"
    TRANSLATION_LEAF = "translation_leaf"
    BRANCH = "branch"


def classify(value: Any) -> NodeKind:
    """Decide whether a value is a leaf, a translation object or a nested namespace.

    Objects carrying a string ``translation`` field are terminal; their other
    fields are metadata. Arrays are namespaces indexed by position.
    """
    if isinstance(value, dict):
        if isinstance(value.get("translation"), str):
            return NodeKind.TRANSLATION_LEAF
        return NodeKind.BRANCH
    if isinstance(value, list):
        return NodeKind.BRANCH
    return NodeKind.LEAF


def _children(node: Any) -> Iterator[Tuple[str, Any]]:
    if isinstance(node, list):
        for index, value in enumerate(node):
            yield str(index), value
    else:
        for key, value in node.items():
            yield str(key), value


def extract_key_paths(prefix: str, node: Any) -> Set[str]:
    """Return the dotted key paths of every translatable leaf under ``node``.

    Args:
        prefix: Key prefix every path is qualified with; empty for none
        node: Parsed translation object

    Returns:
        Set of key paths such as ``"common.buttons.save"``
    """
    key_paths: Set[str] = set()

    for key, value in _children(node):
        key_path = f"{prefix}.{key}" if prefix else key
        kind = classify(value)

        if kind is NodeKind.BRANCH:
            key_paths |= extract_key_paths(key_path, value)
        else:
            key_paths.add(key_path)

    return key_paths
