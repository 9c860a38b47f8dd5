"""Domain-specific configuration for archive classification.

Covers the ``csar`` section (service template pattern, reserved global
substitution file names, user-defined namespace prefix) and the ``non_mano``
section mapping artifact types to their folders inside the archive.
"""
from __future__ import annotations

import re
from functools import cached_property
from typing import FrozenSet

from tosca_catalog.core.exceptions import ConfigurationError

from ..base import BaseDomainConfig


class CsarConfig(BaseDomainConfig):
    def _config_section(self) -> str:
        return "csar"

    @cached_property
    def service_template_pattern(self) -> re.Pattern[str]:
        raw = self.section.get("service_template_pattern") or r"^Definitions/[^/]+\.ya?ml$"
        try:
            return re.compile(raw)
        except re.error as exc:
            raise ConfigurationError(
                f"Invalid csar.service_template_pattern {raw!r}: {exc}",
                context={"pattern": raw},
            ) from exc

    @cached_property
    def global_substitution_files(self) -> FrozenSet[str]:
        """Reserved library file names, lower-cased for case-insensitive matching."""
        names = self.section.get("global_substitution_files") or []
        return frozenset(str(n).lower() for n in names)

    @cached_property
    def user_defined_namespace_prefix(self) -> str:
        return str(self.section.get("user_defined_namespace_prefix") or "org.openecomp.resource.")

    @cached_property
    def non_mano(self) -> dict:
        return self._config.get("non_mano", {}) or {}

    def folder_type_path(self, artifact_type: str) -> str:
        """Return the archive folder configured for a non-MANO artifact type."""
        entry = self.non_mano.get(artifact_type.lower())
        if not entry:
            raise ConfigurationError(
                f"Unknown non-MANO artifact type: {artifact_type}",
                context={"artifact_type": artifact_type},
            )
        return f"Artifacts/{entry['type']}/{entry['location']}"


__all__ = ["CsarConfig"]
