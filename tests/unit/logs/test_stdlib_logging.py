from __future__ import annotations

import logging
from pathlib import Path
from typing import List

from tosca_catalog.core.stdlib_logging import configure_logging, reset_logging_for_tests


def _handlers() -> List[logging.Handler]:
    return list(logging.getLogger("tosca_catalog").handlers)


def test_stderr_handler_is_installed_once() -> None:
    configure_logging(level="INFO")
    configure_logging(level="INFO")
    handlers = _handlers()
    assert len(handlers) == 1
    assert type(handlers[0]) is logging.StreamHandler
    assert logging.getLogger("tosca_catalog").level == logging.INFO


def test_file_handler_writes_module_records(tmp_path: Path) -> None:
    log_path = tmp_path / "logs" / "catalog.log"
    configure_logging(level="DEBUG", log_path=log_path)
    handlers = _handlers()
    assert len(handlers) == 1
    assert isinstance(handlers[0], logging.FileHandler)

    logging.getLogger("tosca_catalog.core.session").debug("Decoding %s", "main")
    handlers[0].flush()
    assert "DEBUG tosca_catalog.core.session: Decoding main" in log_path.read_text(encoding="utf-8")


def test_same_target_only_updates_level(tmp_path: Path) -> None:
    log_path = tmp_path / "catalog.log"
    configure_logging(level="WARNING", log_path=log_path)
    handler = _handlers()[0]
    configure_logging(level="DEBUG", log_path=log_path)
    assert _handlers() == [handler]
    assert handler.level == logging.DEBUG
    assert logging.getLogger("tosca_catalog").level == logging.DEBUG


def test_new_target_replaces_handler(tmp_path: Path) -> None:
    configure_logging(level="INFO")
    stderr_handler = _handlers()[0]
    configure_logging(level="INFO", log_path=tmp_path / "catalog.log")
    handlers = _handlers()
    assert len(handlers) == 1
    assert handlers[0] is not stderr_handler
    assert isinstance(handlers[0], logging.FileHandler)


def test_unknown_level_falls_back_to_info() -> None:
    configure_logging(level="chatty")
    assert logging.getLogger("tosca_catalog").level == logging.INFO


def test_reset_removes_handler(tmp_path: Path) -> None:
    configure_logging(level="DEBUG", log_path=tmp_path / "catalog.log")
    handler = _handlers()[0]
    reset_logging_for_tests()
    assert _handlers() == []
    assert logging.getLogger("tosca_catalog").level == logging.NOTSET
    assert handler.stream is None

    configure_logging()
    assert len(_handlers()) == 1
