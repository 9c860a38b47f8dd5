from __future__ import annotations

from helpers.archives import PREFIX, service_template
from tosca_catalog.core.catalog import NodeTypeInfo, mark_nested


def _info(name: str, *, substitution: bool) -> NodeTypeInfo:
    return NodeTypeInfo(
        type_name=name,
        source_document_path="Definitions/X.yaml",
        scoped_document={},
        is_substitution_mapping=substitution,
    )


def test_marks_user_defined_substitution_types() -> None:
    user = f"{PREFIX}abstract.nodes.heat.pd_server"
    catalog = {user: _info(user, substitution=True)}
    mark_nested(service_template(node_templates={"srv": user}), catalog, PREFIX)
    assert catalog[user].is_nested is True


def test_library_namespace_is_never_nested() -> None:
    lib = "tosca.nodes.nfv.VDU.Compute"
    catalog = {lib: _info(lib, substitution=True)}
    mark_nested(service_template(node_templates={"vdu": lib}), catalog, PREFIX)
    assert catalog[lib].is_nested is False


def test_plain_types_are_left_alone() -> None:
    user = f"{PREFIX}vfc.Plain"
    catalog = {user: _info(user, substitution=False)}
    mark_nested(service_template(node_templates={"p": user}), catalog, PREFIX)
    assert catalog[user].is_nested is False


def test_types_not_instantiated_by_main_template_are_left_alone() -> None:
    user = f"{PREFIX}abstract.Unused"
    catalog = {user: _info(user, substitution=True)}
    mark_nested(service_template(node_templates={"other": "tosca.nodes.Root"}), catalog, PREFIX)
    mark_nested({}, catalog, PREFIX)
    assert catalog[user].is_nested is False
