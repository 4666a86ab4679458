"""Null-safe walking of decoded JSON trees.

Upstream responses are parsed as plain ``dict``/``list`` trees; these helpers
give every missing or mistyped field a defined result (``None`` or empty)
instead of a ``KeyError``/``TypeError``.
"""
from __future__ import annotations

from typing import Any, Iterator, List, Mapping, Optional, Union

PathKey = Union[str, int]


def json_get(tree: Any, *path: PathKey) -> Any:
    """Follow ``path`` through mappings (str keys) and lists (int indexes).

    Returns ``None`` as soon as a step is missing or has the wrong type.
    """
    node = tree
    for key in path:
        if isinstance(key, int) and not isinstance(key, bool):
            if not isinstance(node, list) or not -len(node) <= key < len(node):
                return None
            node = node[key]
        elif isinstance(node, Mapping):
            node = node.get(key)
        else:
            return None
        if node is None:
            return None
    return node


def json_str(tree: Any, *path: PathKey) -> Optional[str]:
    """Like :func:`json_get` but only returns string leaves."""
    value = json_get(tree, *path)
    return value if isinstance(value, str) else None


def json_list(tree: Any, *path: PathKey) -> List[Any]:
    """Like :func:`json_get` but returns ``[]`` unless the leaf is a list."""
    value = json_get(tree, *path)
    return value if isinstance(value, list) else []


def iter_objects(items: Any) -> Iterator[Mapping[str, Any]]:
    """Yield the mapping elements of ``items`` in order, skipping the rest."""
    if not isinstance(items, list):
        return
    for item in items:
        if isinstance(item, Mapping):
            yield item


def join_fragments(fragments: List[str]) -> str:
    """Newline-join text fragments in document order."""
    return "\n".join(fragments)


__all__ = ["json_get", "json_str", "json_list", "iter_objects", "join_fragments", "PathKey"]
