"""Logger hierarchy and sinks for routes compilation.

Modules log under ``routesc.<name>``. Build integrations turn on console or
file output through the ``logging`` section of ``.routesc.yml``, which
:meth:`routesc.orchestrator.RoutesCompiler.from_config` applies.
"""

from __future__ import annotations

import logging
from pathlib import Path

ROOT_LOGGER = "routesc"
CONSOLE_FORMAT = "[routesc] %(levelname)s %(message)s"
FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return ``routesc`` or one of its children."""
    return logging.getLogger(f"{ROOT_LOGGER}.{name}" if name else ROOT_LOGGER)


def configure_logging(
    *, verbose: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Route routesc records to stderr and, optionally, a UTF-8 log file.

    Calling this again replaces the handlers installed by the previous call.
    """
    level = logging.DEBUG if verbose else logging.INFO
    logger = get_logger()
    _drop_handlers(logger)
    logger.setLevel(level)
    logger.propagate = False

    sinks: list[logging.Handler] = [logging.StreamHandler()]
    formats = [CONSOLE_FORMAT]
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        sinks.append(logging.FileHandler(log_file, encoding="utf-8"))
        formats.append(FILE_FORMAT)

    for sink, fmt in zip(sinks, formats):
        sink.setLevel(level)
        sink.setFormatter(logging.Formatter(fmt))
        logger.addHandler(sink)
    return logger


def _drop_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


__all__ = ["configure_logging", "get_logger"]
