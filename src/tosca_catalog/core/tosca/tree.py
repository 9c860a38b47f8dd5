"""Shape-aware access to decoded TOSCA attribute trees.

A decoded document is a generic tree of mappings, lists and scalars. This
module names the handful of TOSCA tags the catalog needs and provides the
lookup used for every section access:

- :func:`find_element` searches a tree for a tag at any depth, returning the
  first value with the requested :class:`Shape` or ``None`` when absent.
- :func:`as_mapping` turns a value that must be a mapping into one, failing
  with :class:`DocumentShapeError` instead of an unchecked cast.
"""
from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Set

from tosca_catalog.core.exceptions import DocumentShapeError

NODE_TYPES = "node_types"
NODE_TEMPLATES = "node_templates"
SUBSTITUTION_MAPPINGS = "substitution_mappings"
DATA_TYPES = "data_types"
NODE_TYPE = "node_type"
TYPE = "type"
DERIVED_FROM = "derived_from"


class Shape(Enum):
    MAP = "map"
    LIST = "list"
    SCALAR = "scalar"
    ANY = "any"

    def matches(self, value: Any) -> bool:
        if self is Shape.ANY:
            return True
        return shape_of(value) is self


def shape_of(value: Any) -> Shape:
    if isinstance(value, Mapping):
        return Shape.MAP
    if isinstance(value, list):
        return Shape.LIST
    return Shape.SCALAR


def _collect(
    tree: Mapping[str, Any],
    name: str,
    shape: Shape,
    found: List[Any],
    visited: Set[int],
) -> None:
    # recursive YAML anchors alias a mapping inside itself
    if id(tree) in visited:
        return
    visited.add(id(tree))
    skip = None
    if name in tree:
        skip = name
        if shape.matches(tree[name]):
            found.append(tree[name])
            return
    for key, value in tree.items():
        if key == skip:
            continue
        if isinstance(value, Mapping):
            _collect(value, name, shape, found, visited)
        elif isinstance(value, list):
            for item in value:
                if isinstance(item, Mapping):
                    _collect(item, name, shape, found, visited)
        if found:
            return


def find_element(tree: Optional[Mapping[str, Any]], name: str, shape: Shape = Shape.MAP) -> Any:
    """Return the first value stored under ``name`` with the given shape.

    The key at the current level wins over nested occurrences; nested
    mappings (and mappings inside lists) are then searched in document order.
    Returns ``None`` when no matching element exists.
    """
    if not tree:
        return None
    found: List[Any] = []
    _collect(tree, name, shape, found, set())
    return found[0] if found else None


def as_mapping(value: Any, what: str) -> Dict[str, Any]:
    """Return ``value`` as a mapping; ``None`` is an empty mapping."""
    if value is None:
        return {}
    if isinstance(value, Mapping):
        return value  # type: ignore[return-value]
    raise DocumentShapeError(
        f"Expected a mapping for {what}, got {type(value).__name__}",
        context={"element": what, "shape": shape_of(value).value},
    )


__all__ = [
    "Shape",
    "shape_of",
    "find_element",
    "as_mapping",
    "NODE_TYPES",
    "NODE_TEMPLATES",
    "SUBSTITUTION_MAPPINGS",
    "DATA_TYPES",
    "NODE_TYPE",
    "TYPE",
    "DERIVED_FROM",
]
