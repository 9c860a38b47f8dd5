"""Archive access: the read-only entry view and its loaders."""
from __future__ import annotations

from .view import ArchiveView
from .loader import load_archive

__all__ = ["ArchiveView", "load_archive"]
