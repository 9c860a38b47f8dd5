from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass
class NodeTypeInfo:
    """One node type of the catalog and the document needed to build it.

    ``scoped_document`` is the full template for substitution-mapping entries
    and, for types imported from a global substitution library, that library
    with its ``node_types`` section narrowed to this single type.
    """

    type_name: str
    source_document_path: str
    scoped_document: Dict[str, Any] = field(repr=False)
    is_substitution_mapping: bool = False
    is_nested: bool = False
    derived_from: List[str] = field(default_factory=list)

    def to_dict(self, *, include_document: bool = False) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "type": self.type_name,
            "template_file": self.source_document_path,
            "substitution_mapping": self.is_substitution_mapping,
            "nested": self.is_nested,
            "derived_from": list(self.derived_from),
        }
        if include_document:
            data["template"] = self.scoped_document
        return data


__all__ = ["NodeTypeInfo"]
