from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

import pytest

from tests._fixtures.wiki_builder import WikiBuilder


@pytest.fixture
def wiki_builder(tmp_path: Path) -> WikiBuilder:
    """Provide a reusable wiki builder rooted at the pytest tmp_path."""
    return WikiBuilder(tmp_path)


@pytest.fixture(autouse=True)
def reset_wikinav_logger() -> Iterator[None]:
    """Undo CLI logging setup so caplog sees wikinav records in every test."""
    yield
    logger = logging.getLogger("wikinav")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
