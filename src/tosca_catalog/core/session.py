"""Extraction session over one CSAR archive.

A session owns everything derived from one immutable archive snapshot: the
decoded documents, the node-type catalog, the merged data types and the
composition queue used while nested components are expanded. Nothing is
shared between sessions.

Typical use by a downstream builder::

    session = CsarSession(archive, "Definitions/MainServiceTemplate.yaml",
                          vf_resource_name="vFW")
    for name, info in session.extract_types_info().items():
        if info.is_nested:
            session.enqueue_nested(name)
            ...  # expand the nested component, recursing as needed
            session.dequeue_nested()
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from tosca_catalog.core.archive import ArchiveView
from tosca_catalog.core.catalog import Catalog, CompositionQueue, NodeTypeCatalogBuilder
from tosca_catalog.core.config import CsarConfig
from tosca_catalog.core.tosca import DocumentIndex, decode_document

logger = logging.getLogger(__name__)

SOFTWARE_INFORMATION = "onap_sw_information"


class CsarSession:
    """Node-type extraction session for one archive.

    Args:
        archive: The archive entries.
        main_template_name: Path of the main service template.
        main_template_content: Content of the main template; read from the
            archive when omitted.
        vf_resource_name: Name of the component being built, reported in
            nesting cycle errors.
        csar_uuid: Identifier of the archive.
        csar_version_id: Version identifier of the archive.
        is_update: Whether the downstream build updates an existing component.
        config: Classification settings for templates, libraries and metadata
            folders; defaults to the archive's config.

    Raises:
        DocumentDecodeError: The main template cannot be decoded.
        ArchiveEntryNotFoundError: No content was given and the main template
            is not in the archive.
    """

    def __init__(
        self,
        archive: ArchiveView,
        main_template_name: str,
        main_template_content: bytes | str | None = None,
        *,
        vf_resource_name: Optional[str] = None,
        csar_uuid: Optional[str] = None,
        csar_version_id: Optional[str] = None,
        is_update: bool = False,
        config: Optional[CsarConfig] = None,
    ) -> None:
        self.config = config or archive.config
        if self.config is not archive.config:
            # reclassify entries under the session's config
            archive = ArchiveView(archive, config=self.config)
        self.archive = archive
        self.main_template_name = main_template_name
        self.vf_resource_name = vf_resource_name
        self.csar_uuid = csar_uuid
        self.csar_version_id = csar_version_id
        self.is_update = is_update

        self.index = DocumentIndex(archive)
        if main_template_content is None:
            self.main_template = self.index.document(main_template_name)
        else:
            self.main_template = decode_document(main_template_content, path=main_template_name)
            self.index.register(main_template_name, self.main_template)

        self.created_nodes_tosca_resource_names: Dict[str, str] = {}
        self.created_nodes: Dict[str, Any] = {}
        self._queue = CompositionQueue(vf_resource_name)
        self._data_types: Optional[Dict[str, Any]] = None

    def __repr__(self) -> str:
        return f"CsarSession({self.main_template_name!r}, vf_resource_name={self.vf_resource_name!r})"

    # ---------- node types ----------

    def extract_types_info(self) -> Catalog:
        """Build the node-type catalog of the archive."""
        builder = NodeTypeCatalogBuilder(self.index, self.config.user_defined_namespace_prefix)
        return builder.build(self.main_template)

    # ---------- data types ----------

    def data_types(self) -> Dict[str, Any]:
        """Data types of the global substitution libraries and the main template.

        Main template definitions override library ones of the same name.
        Computed on first call and cached for the session.
        """
        if self._data_types is None:
            merged: Dict[str, Any] = {}
            for path in self.archive.global_substitution_paths():
                merged.update(self.index.data_types(path) or {})
            merged.update(self.index.data_types(self.main_template_name) or {})
            logger.debug("Merged %d data types", len(merged))
            self._data_types = merged
        return self._data_types

    # ---------- nested component expansion ----------

    @property
    def composition_queue(self) -> CompositionQueue:
        return self._queue

    def enqueue_nested(self, node_name: str) -> None:
        self._queue.enqueue(node_name)

    def dequeue_nested(self) -> str:
        return self._queue.dequeue()

    # ---------- metadata ----------

    def software_information_path(self) -> Optional[str]:
        """Path of the software information artifact, when the archive has one."""
        return self.archive.find_folder_entry(SOFTWARE_INFORMATION)


def extract_node_type_catalog(
    archive: ArchiveView,
    main_template: str,
    *,
    config: Optional[CsarConfig] = None,
) -> Catalog:
    """Build the node-type catalog of ``archive`` in a fresh session."""
    return CsarSession(archive, main_template, config=config).extract_types_info()


def data_types(session: CsarSession) -> Dict[str, Any]:
    return session.data_types()


__all__ = ["CsarSession", "extract_node_type_catalog", "data_types", "SOFTWARE_INFORMATION"]
