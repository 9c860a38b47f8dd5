"""Base class for domain-specific configuration accessors.

Domain configs wrap one top-level section of the merged configuration and
expose typed, cached properties over it. The merged dictionary is passed in
explicitly; when omitted, the bundled defaults (plus environment overrides)
are loaded.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from functools import cached_property
from typing import Any, Dict, Mapping, Optional

from .manager import ConfigManager


class BaseDomainConfig(ABC):
    """Abstract base class for domain-specific configuration accessors.

    Usage:
        class MyConfig(BaseDomainConfig):
            def _config_section(self) -> str:
                return "mySection"

            @cached_property
            def my_setting(self) -> str:
                return self.section.get("mySetting", "default")
    """

    def __init__(self, config: Optional[Mapping[str, Any]] = None) -> None:
        if config is None:
            config = ConfigManager().load_config()
        self._config: Dict[str, Any] = dict(config)

    @abstractmethod
    def _config_section(self) -> str:
        """Return the top-level config key for this domain."""
        ...

    @cached_property
    def section(self) -> Dict[str, Any]:
        """This domain's configuration section, or an empty dict."""
        return self._config.get(self._config_section(), {}) or {}


__all__ = ["BaseDomainConfig"]
