"""Read-only view over the entries of a CSAR archive.

The view maps archive paths to their byte content and classifies paths
purely from their names: service templates by pattern, global substitution
libraries by membership in a reserved set of file names.
"""
from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import Iterator, List, Optional

from tosca_catalog.core.config import CsarConfig
from tosca_catalog.core.exceptions import ArchiveEntryNotFoundError

logger = logging.getLogger(__name__)


class ArchiveView(Mapping):
    """Immutable mapping of archive path to byte content.

    Args:
        entries: Archive content keyed by path. Copied on construction.
        config: Classification settings; bundled defaults when omitted.
    """

    def __init__(self, entries: Mapping[str, bytes], *, config: Optional[CsarConfig] = None) -> None:
        self._entries = MappingProxyType(dict(entries))
        self.config = config or CsarConfig()

    def __getitem__(self, path: str) -> bytes:
        return self.bytes_of(path)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"ArchiveView({len(self._entries)} entries)"

    def list_entries(self) -> frozenset[str]:
        return frozenset(self._entries)

    def bytes_of(self, path: str) -> bytes:
        try:
            return self._entries[path]
        except KeyError:
            raise ArchiveEntryNotFoundError(path) from None

    def is_template_document(self, path: str) -> bool:
        return self.config.service_template_pattern.fullmatch(path) is not None

    def is_global_substitution_file(self, path: str) -> bool:
        return path.lower() in self.config.global_substitution_files

    def template_paths(self) -> List[str]:
        """Service templates that are not global substitution libraries."""
        return [
            p for p in self._entries
            if self.is_template_document(p) and not self.is_global_substitution_file(p)
        ]

    def global_substitution_paths(self) -> List[str]:
        return [
            p for p in self._entries
            if self.is_template_document(p) and self.is_global_substitution_file(p)
        ]

    def find_folder_entry(self, artifact_type: str) -> Optional[str]:
        """Return the first entry stored under the folder of a non-MANO artifact type."""
        if not self._entries:
            return None
        folder = self.config.folder_type_path(artifact_type)
        for path in self._entries:
            if path.startswith(folder):
                return path
        logger.debug("No entry found under %s for %s", folder, artifact_type)
        return None


__all__ = ["ArchiveView"]
