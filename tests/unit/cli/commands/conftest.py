"""Fixtures for CLI command tests."""

import logging
from collections.abc import Iterator

import pytest


@pytest.fixture
def bare_root_logger() -> Iterator[None]:
    """Strip root handlers so --debug can install its own, then restore them.

    logging.basicConfig is a no-op while pytest's capture handlers are attached.
    """
    root = logging.getLogger()
    saved_handlers = root.handlers[:]
    saved_level = root.level
    root.handlers = []
    yield
    for handler in root.handlers:
        handler.close()
    root.handlers = saved_handlers
    root.setLevel(saved_level)
