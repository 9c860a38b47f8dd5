"""Domain-specific configuration accessors."""
from __future__ import annotations

from .csar import CsarConfig
from .logging import LoggingConfig

__all__ = ["CsarConfig", "LoggingConfig"]
