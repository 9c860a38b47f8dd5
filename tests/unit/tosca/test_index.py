from __future__ import annotations

import pytest

from helpers.archives import MAIN, make_archive, service_template
from tosca_catalog.core.exceptions import ArchiveEntryNotFoundError, DocumentShapeError
from tosca_catalog.core.tosca import DocumentIndex


def _index() -> DocumentIndex:
    archive = make_archive(
        {
            MAIN: service_template(
                node_types={"org.openecomp.resource.vfc.A": {"derived_from": "tosca.nodes.Root"}},
                node_templates={"a1": "org.openecomp.resource.vfc.A", "fw": "vendor.nodes.Firewall"},
                substitutes="org.openecomp.resource.vf.Main",
                data_types={"D": {"properties": {"x": {"type": "integer"}}}},
            ),
            "Definitions/Empty.yaml": {"tosca_definitions_version": "tosca_simple_yaml_1_1"},
        }
    )
    return DocumentIndex(archive)


def test_section_accessors() -> None:
    index = _index()
    assert set(index.node_types(MAIN)) == {"org.openecomp.resource.vfc.A"}
    assert set(index.node_templates(MAIN)) == {"a1", "fw"}
    assert index.substitution_mappings(MAIN) == {"node_type": "org.openecomp.resource.vf.Main"}
    assert "D" in index.data_types(MAIN)


def test_absent_sections_are_none() -> None:
    index = _index()
    path = "Definitions/Empty.yaml"
    assert index.node_types(path) is None
    assert index.node_templates(path) is None
    assert index.substitution_mappings(path) is None
    assert index.data_types(path) is None
    assert index.node_types_defined(path) == set()
    assert index.node_types_used(path) == set()


def test_defined_and_used_types() -> None:
    index = _index()
    assert index.node_types_defined(MAIN) == {"org.openecomp.resource.vfc.A"}
    assert index.node_types_used(MAIN) == {"org.openecomp.resource.vfc.A", "vendor.nodes.Firewall"}


def test_documents_are_decoded_once() -> None:
    index = _index()
    first = index.document(MAIN)
    index.node_types(MAIN)
    index.data_types(MAIN)
    assert index.document(MAIN) is first
    assert index.cached_paths() == [MAIN]


def test_register_seeds_cache() -> None:
    index = _index()
    tree = {"node_types": {"X": {}}}
    index.register("Definitions/Virtual.yaml", tree)
    assert index.node_types_defined("Definitions/Virtual.yaml") == {"X"}


def test_missing_document_raises_not_found() -> None:
    with pytest.raises(ArchiveEntryNotFoundError):
        _index().document("Definitions/Missing.yaml")


def test_node_template_with_wrong_shape_is_reported() -> None:
    archive = make_archive({MAIN: {"topology_template": {"node_templates": {"bad": ["x"]}}}})
    with pytest.raises(DocumentShapeError):
        DocumentIndex(archive).node_types_used(MAIN)


def test_node_template_without_type_is_ignored() -> None:
    archive = make_archive({MAIN: {"topology_template": {"node_templates": {"n": {"properties": {}}}}}})
    assert DocumentIndex(archive).node_types_used(MAIN) == set()
