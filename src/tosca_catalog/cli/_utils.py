"""Shared CLI utilities."""
from __future__ import annotations

import argparse
from typing import Any, Dict

from tosca_catalog.core.archive import load_archive
from tosca_catalog.core.config import ConfigManager, CsarConfig, LoggingConfig
from tosca_catalog.core.session import CsarSession
from tosca_catalog.core.stdlib_logging import configure_logging


def load_cli_config(args: argparse.Namespace) -> Dict[str, Any]:
    """Load configuration from ``--config`` files and apply ``--log-level``."""
    config = ConfigManager(getattr(args, "config", None) or ()).load_config()
    logging_cfg = LoggingConfig(config)
    level = getattr(args, "log_level", None) or logging_cfg.level
    configure_logging(level=level, log_path=logging_cfg.log_path)
    return config


def open_session(args: argparse.Namespace) -> CsarSession:
    config = CsarConfig(load_cli_config(args))
    archive = load_archive(args.archive, config=config)
    return CsarSession(archive, args.main_template)


__all__ = ["load_cli_config", "open_session"]
