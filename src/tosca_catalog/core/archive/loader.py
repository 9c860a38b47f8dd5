"""Loading archive content from disk.

A CSAR is a zip container; an already unpacked directory is accepted too.
Both produce an :class:`ArchiveView` keyed by forward-slash relative paths.
"""
from __future__ import annotations

import logging
import zipfile
from pathlib import Path
from typing import Dict, Optional

from tosca_catalog.core.config import CsarConfig
from tosca_catalog.core.exceptions import ArchiveReadError

from .view import ArchiveView

logger = logging.getLogger(__name__)


def _read_zip(path: Path) -> Dict[str, bytes]:
    try:
        with zipfile.ZipFile(path) as zf:
            return {
                info.filename: zf.read(info)
                for info in zf.infolist()
                if not info.is_dir()
            }
    except (zipfile.BadZipFile, OSError) as exc:
        raise ArchiveReadError(f"Cannot read archive {path}: {exc}", context={"path": str(path)}) from exc


def _read_directory(path: Path) -> Dict[str, bytes]:
    entries: Dict[str, bytes] = {}
    for item in sorted(path.rglob("*")):
        if item.is_file():
            entries[item.relative_to(path).as_posix()] = item.read_bytes()
    return entries


def load_archive(path: Path | str, *, config: Optional[CsarConfig] = None) -> ArchiveView:
    """Load a CSAR file or unpacked CSAR directory into an :class:`ArchiveView`."""
    path = Path(path)
    if not path.exists():
        raise ArchiveReadError(f"Archive not found: {path}", context={"path": str(path)})
    if path.is_dir():
        entries = _read_directory(path)
    else:
        entries = _read_zip(path)
    logger.debug("Loaded %d entries from %s", len(entries), path)
    return ArchiveView(entries, config=config)


__all__ = ["load_archive"]
