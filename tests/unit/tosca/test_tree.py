from __future__ import annotations

import pytest

from tosca_catalog.core.exceptions import DocumentShapeError
from tosca_catalog.core.tosca import Shape, as_mapping, find_element, shape_of


def test_shape_of_classifies_values() -> None:
    assert shape_of({"a": 1}) is Shape.MAP
    assert shape_of([1, 2]) is Shape.LIST
    assert shape_of("x") is Shape.SCALAR
    assert shape_of(None) is Shape.SCALAR


def test_find_element_prefers_current_level() -> None:
    tree = {
        "topology_template": {"node_templates": {"inner": {"type": "B"}}},
        "node_templates": {"outer": {"type": "A"}},
    }
    assert find_element(tree, "node_templates") == {"outer": {"type": "A"}}


def test_find_element_searches_nested_mappings() -> None:
    tree = {"topology_template": {"substitution_mappings": {"node_type": "T"}}}
    assert find_element(tree, "substitution_mappings") == {"node_type": "T"}


def test_find_element_searches_mappings_inside_lists() -> None:
    tree = {"imports": [{"other": 1}, {"data_types": {"D": {}}}]}
    assert find_element(tree, "data_types") == {"D": {}}


def test_find_element_skips_wrong_shape_without_descending() -> None:
    tree = {
        "node_types": ["not", "a", "map"],
        "later": {"node_types": {"T": {}}},
    }
    assert find_element(tree, "node_types") == {"T": {}}
    assert find_element(tree, "node_types", Shape.LIST) == ["not", "a", "map"]


def test_find_element_returns_none_when_absent() -> None:
    assert find_element({"a": {"b": 1}}, "node_types") is None
    assert find_element({}, "node_types") is None
    assert find_element(None, "node_types") is None


def test_find_element_any_shape() -> None:
    assert find_element({"a": {"type": "x"}}, "type", Shape.ANY) == "x"


def test_as_mapping() -> None:
    assert as_mapping(None, "thing") == {}
    assert as_mapping({"k": 1}, "thing") == {"k": 1}
    with pytest.raises(DocumentShapeError) as exc:
        as_mapping(["x"], "node type 'T'")
    assert "node type 'T'" in str(exc.value)
    assert exc.value.context["shape"] == "list"


def test_find_element_tolerates_self_referencing_trees() -> None:
    tree: dict = {"a": {}}
    tree["a"]["b"] = tree
    assert find_element(tree, "node_types") is None
    tree["a"]["node_types"] = {"T": {}}
    assert find_element(tree, "node_types") == {"T": {}}


def test_find_element_visits_shared_subtrees() -> None:
    shared = {"node_types": {"T": {}}}
    assert find_element({"x": ["plain", shared], "y": shared}, "node_types") == {"T": {}}
