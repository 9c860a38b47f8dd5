"""
Bundled data resources.

Provides access to the default configuration files and JSON schemas shipped
with the package, using importlib.resources.
"""

from __future__ import annotations

from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any

import yaml


def get_data_path(subpackage: str, filename: str = "") -> Path:
    """
    Get absolute path to a bundled data file or directory.

    Example:
        >>> get_data_path("config", "defaults.yaml")
        PosixPath('/path/to/tosca_catalog/data/config/defaults.yaml')
    """
    pkg = resources.files("tosca_catalog.data")
    base = Path(str(pkg / subpackage))
    return base / filename if filename else base


@lru_cache(maxsize=16)
def read_yaml(subpackage: str, filename: str) -> dict[str, Any]:
    """Read and parse a bundled YAML data file (cached)."""
    path = get_data_path(subpackage, filename)
    return yaml.safe_load(path.read_text(encoding="utf-8")) or {}


__all__ = ["get_data_path", "read_yaml"]
