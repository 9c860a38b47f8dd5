"""Node-type catalog: model, builder, nesting marker and composition queue."""
from __future__ import annotations

from .model import NodeTypeInfo
from .nesting import mark_nested
from .queue import CompositionQueue
from .builder import Catalog, NodeTypeCatalogBuilder

__all__ = [
    "NodeTypeInfo",
    "mark_nested",
    "CompositionQueue",
    "Catalog",
    "NodeTypeCatalogBuilder",
]
