"""Shared pytest fixtures for the full envbind test suite."""

from __future__ import annotations

from typing import Iterator

import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def _reset_loguru() -> Iterator[None]:
    """Drop sinks installed by a test and restore the library's disabled default."""

    yield
    logger.remove()
    logger.disable("envbind")
