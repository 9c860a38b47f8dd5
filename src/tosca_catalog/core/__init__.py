"""Core engine: archive access, document index, catalog and session."""
from __future__ import annotations

from .session import CsarSession, data_types, extract_node_type_catalog

__all__ = ["CsarSession", "data_types", "extract_node_type_catalog"]
