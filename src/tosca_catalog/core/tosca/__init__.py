"""TOSCA document decoding, shape-aware lookup and the per-session index."""
from __future__ import annotations

from .decode import decode_document
from .index import DocumentIndex
from .tree import Shape, as_mapping, find_element, shape_of

__all__ = [
    "decode_document",
    "DocumentIndex",
    "Shape",
    "as_mapping",
    "find_element",
    "shape_of",
]
