"""Node-type catalog construction.

The catalog is built in three passes over the archive:

1. Every service template that is not a global substitution library is
   scanned. A ``substitution_mappings`` naming a node type the template does
   not define itself yields a substitution-mapping entry; the types used by
   the template's node templates are collected.
2. When global substitution libraries are present, their node type
   definitions first attach ``derived_from`` to entries already in the
   catalog, then import the types that are used by some node template but
   not yet cataloged.
3. The nesting marker flags user-defined substitution-mapping types
   instantiated by the main template (see :mod:`.nesting`).

Step 2 runs the ``derived_from`` pass to completion before the import pass so
that substitution-mapping entries always take precedence over library
definitions of the same name.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Iterator, Set, Tuple

from tosca_catalog.core.tosca import DocumentIndex, as_mapping
from tosca_catalog.core.tosca.tree import DERIVED_FROM, NODE_TYPE, NODE_TYPES

from .model import NodeTypeInfo
from .nesting import mark_nested

logger = logging.getLogger(__name__)

Catalog = Dict[str, NodeTypeInfo]


class NodeTypeCatalogBuilder:
    """Builds the node-type catalog of one archive.

    Args:
        index: Document index of the archive; decoded templates are shared
            with the caller through it.
        namespace_prefix: Marker of user-defined node type names, used by the
            nesting pass.
    """

    def __init__(self, index: DocumentIndex, namespace_prefix: str) -> None:
        self.index = index
        self.archive = index.archive
        self.namespace_prefix = namespace_prefix

    def build(self, main_template: Dict[str, Any]) -> Catalog:
        catalog: Catalog = {}
        used_types: Set[str] = set()
        for path in self.archive.template_paths():
            self._extract_from_template(path, catalog, used_types)

        if self.archive.global_substitution_paths():
            self._set_derived_from(catalog)
            self._import_global_types(catalog, used_types)

        mark_nested(main_template, catalog, self.namespace_prefix)
        logger.debug("Extracted %d node types: %s", len(catalog), sorted(catalog))
        return catalog

    def _extract_from_template(self, path: str, catalog: Catalog, used_types: Set[str]) -> None:
        substitution = self.index.substitution_mappings(path)
        if substitution is not None:
            self._handle_substitution_mappings(path, substitution, catalog)
        used_types.update(self.index.node_types_used(path))

    def _handle_substitution_mappings(self, path: str, substitution: Dict[str, Any], catalog: Catalog) -> None:
        type_name = substitution.get(NODE_TYPE)
        if type_name is None:
            return
        if type_name in self.index.node_types_defined(path):
            logger.debug("Skipping substitution of %s: defined locally in %s", type_name, path)
            return
        catalog[type_name] = NodeTypeInfo(
            type_name=type_name,
            source_document_path=path,
            scoped_document=self.index.document(path),
            is_substitution_mapping=True,
        )

    def _iter_global_node_types(self) -> Iterator[Tuple[str, str, Dict[str, Any]]]:
        for path in self.archive.global_substitution_paths():
            for name, definition in (self.index.node_types(path) or {}).items():
                yield path, name, as_mapping(definition, f"node type '{name}' in {path}")

    def _set_derived_from(self, catalog: Catalog) -> None:
        for _path, name, definition in self._iter_global_node_types():
            if definition.get(DERIVED_FROM) is not None and name in catalog:
                catalog[name].derived_from = [definition[DERIVED_FROM]]

    def _import_global_types(self, catalog: Catalog, used_types: Set[str]) -> None:
        for path, name, definition in self._iter_global_node_types():
            if name in catalog or name not in used_types:
                continue
            logger.debug("Importing %s from global substitution library %s", name, path)
            parent = definition.get(DERIVED_FROM)
            catalog[name] = NodeTypeInfo(
                type_name=name,
                source_document_path=path,
                scoped_document=self._scope_document(path, name),
                is_substitution_mapping=False,
                is_nested=True,
                derived_from=[parent] if parent is not None else [],
            )

    def _scope_document(self, path: str, type_name: str) -> Dict[str, Any]:
        """Copy of a library document whose ``node_types`` holds only ``type_name``."""
        all_node_types = self.index.node_types(path) or {}
        scoped = dict(self.index.document(path))
        scoped[NODE_TYPES] = {type_name: all_node_types.get(type_name)}
        return scoped


__all__ = ["NodeTypeCatalogBuilder", "Catalog"]
