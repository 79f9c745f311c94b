from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

import pytest

from tests._fixtures.routes_builder import LineParser, MarkedGenerator, RoutesBuilder


@pytest.fixture
def routes_builder(tmp_path: Path) -> RoutesBuilder:
    """Provide a routes project rooted at the pytest tmp_path."""
    return RoutesBuilder(tmp_path)


@pytest.fixture
def parser() -> LineParser:
    return LineParser()


@pytest.fixture
def generator() -> MarkedGenerator:
    return MarkedGenerator()


@pytest.fixture
def restore_logger() -> Iterator[logging.Logger]:
    """Undo handler, level and propagation changes made to the routesc logger."""
    logger = logging.getLogger("routesc")
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    for handler in handlers:
        logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = propagate
