"""Configuration system.

Usage:
    from tosca_catalog.core.config import ConfigManager, CsarConfig

    config = ConfigManager([Path("project.yaml")]).load_config()
    csar = CsarConfig(config)
    csar.user_defined_namespace_prefix
"""
from __future__ import annotations

from .manager import ConfigManager, deep_merge
from .base import BaseDomainConfig
from .domains import CsarConfig, LoggingConfig

__all__ = [
    "ConfigManager",
    "deep_merge",
    "BaseDomainConfig",
    "CsarConfig",
    "LoggingConfig",
]
