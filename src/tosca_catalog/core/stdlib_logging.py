from __future__ import annotations

import logging
import sys
from pathlib import Path

_CONFIGURED_TARGET: str | None = None
_OWNED_HANDLER: logging.Handler | None = None

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _level_from_name(name: str) -> int:
    level = logging.getLevelName(str(name).upper())
    return level if isinstance(level, int) else logging.INFO


def configure_logging(*, level: str = "WARNING", log_path: Path | None = None) -> None:
    """Install one handler on the ``tosca_catalog`` logger.

    Writes to ``log_path`` when given, otherwise to stderr. Idempotent
    per-process: reconfiguring with the same target only updates the level.
    """
    global _CONFIGURED_TARGET, _OWNED_HANDLER

    target = str(Path(log_path).resolve()) if log_path is not None else "<stderr>"
    logger = logging.getLogger("tosca_catalog")
    logger.setLevel(_level_from_name(level))

    if _CONFIGURED_TARGET == target and _OWNED_HANDLER is not None:
        _OWNED_HANDLER.setLevel(_level_from_name(level))
        return

    if _OWNED_HANDLER is not None:
        logger.removeHandler(_OWNED_HANDLER)
        _OWNED_HANDLER.close()
        _OWNED_HANDLER = None

    if log_path is not None:
        Path(target).parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(target, encoding="utf-8")
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(_level_from_name(level))
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)

    _OWNED_HANDLER = handler
    _CONFIGURED_TARGET = target


def reset_logging_for_tests() -> None:
    """Test-only: remove the handler installed by :func:`configure_logging`."""
    global _CONFIGURED_TARGET, _OWNED_HANDLER
    logger = logging.getLogger("tosca_catalog")
    if _OWNED_HANDLER is not None:
        logger.removeHandler(_OWNED_HANDLER)
        _OWNED_HANDLER.close()
    logger.setLevel(logging.NOTSET)
    _CONFIGURED_TARGET = None
    _OWNED_HANDLER = None


__all__ = ["configure_logging", "reset_logging_for_tests", "LOG_FORMAT"]
