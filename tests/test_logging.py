"""Tests for routesc.logging."""

from __future__ import annotations

import logging
from pathlib import Path

from routesc.logging import configure_logging, get_logger


def test_get_logger_nests_under_package() -> None:
    assert get_logger().name == "routesc"
    assert get_logger("detector").name == "routesc.detector"


def test_configure_logging_replaces_handlers(restore_logger: logging.Logger) -> None:
    configure_logging()
    configure_logging(verbose=True)

    assert restore_logger.level == logging.DEBUG
    assert len(restore_logger.handlers) == 1
    assert restore_logger.propagate is False


def test_configure_logging_writes_file_sink(restore_logger: logging.Logger, tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "routesc.log"
    configure_logging(log_file=log_file)

    get_logger("orchestrator").info("Compiling %s", "app.routes")
    get_logger("orchestrator").debug("suppressed at INFO")
    for handler in restore_logger.handlers:
        handler.flush()

    content = log_file.read_text(encoding="utf-8")
    assert "INFO routesc.orchestrator: Compiling app.routes" in content
    assert "suppressed" not in content
    assert len(restore_logger.handlers) == 2
