"""Marking of nested composite components.

Only substitution-mapping types from the user-defined namespace that are
instantiated by the main template are expanded recursively; library types
stay leaf types even when they carry a substitution mapping.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Mapping

from tosca_catalog.core.tosca import as_mapping, find_element
from tosca_catalog.core.tosca.tree import NODE_TEMPLATES, TYPE

from .model import NodeTypeInfo

logger = logging.getLogger(__name__)


def mark_nested(
    main_template: Mapping[str, Any],
    catalog: Dict[str, NodeTypeInfo],
    namespace_prefix: str,
) -> None:
    """Flag catalog entries instantiated by ``main_template`` as nested."""
    node_templates = find_element(main_template, NODE_TEMPLATES) or {}
    for name, template in node_templates.items():
        type_name = as_mapping(template, f"node template '{name}'").get(TYPE)
        info = catalog.get(type_name) if isinstance(type_name, str) else None
        if info is None:
            continue
        if info.is_substitution_mapping and namespace_prefix in type_name:
            logger.debug("Marking %s as nested (node template %s)", type_name, name)
            info.is_nested = True


__all__ = ["mark_nested"]
