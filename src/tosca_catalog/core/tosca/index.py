"""Per-session index of decoded service templates.

Each archive entry is decoded at most once; section accessors return the
section value or ``None`` when the document does not declare it.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Set

from tosca_catalog.core.archive import ArchiveView

from .decode import decode_document
from .tree import (
    DATA_TYPES,
    NODE_TEMPLATES,
    NODE_TYPES,
    SUBSTITUTION_MAPPINGS,
    TYPE,
    Shape,
    as_mapping,
    find_element,
)

logger = logging.getLogger(__name__)


class DocumentIndex:
    """Memoized decoding and section lookup over an :class:`ArchiveView`."""

    def __init__(self, archive: ArchiveView) -> None:
        self.archive = archive
        self._documents: Dict[str, Dict[str, Any]] = {}

    def register(self, path: str, tree: Dict[str, Any]) -> None:
        """Seed the cache with an already decoded document."""
        self._documents[path] = tree

    def document(self, path: str) -> Dict[str, Any]:
        tree = self._documents.get(path)
        if tree is None:
            logger.debug("Decoding template document %s", path)
            tree = decode_document(self.archive.bytes_of(path), path=path)
            self._documents[path] = tree
        return tree

    def cached_paths(self) -> List[str]:
        return list(self._documents)

    def section(self, path: str, name: str, shape: Shape = Shape.MAP) -> Any:
        return find_element(self.document(path), name, shape)

    def node_types(self, path: str) -> Optional[Dict[str, Any]]:
        return self.section(path, NODE_TYPES)

    def node_templates(self, path: str) -> Optional[Dict[str, Any]]:
        return self.section(path, NODE_TEMPLATES)

    def substitution_mappings(self, path: str) -> Optional[Dict[str, Any]]:
        return self.section(path, SUBSTITUTION_MAPPINGS)

    def data_types(self, path: str) -> Optional[Dict[str, Any]]:
        return self.section(path, DATA_TYPES)

    def node_types_defined(self, path: str) -> Set[str]:
        return set(self.node_types(path) or {})

    def node_types_used(self, path: str) -> Set[str]:
        """Types referenced by the node templates of a document."""
        used: Set[str] = set()
        for name, template in (self.node_templates(path) or {}).items():
            type_name = as_mapping(template, f"node template '{name}' in {path}").get(TYPE)
            if type_name is not None:
                used.add(str(type_name))
        return used


__all__ = ["DocumentIndex"]
