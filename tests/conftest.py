"""Shared pytest configuration for starlight tests."""

import logging

import pytest


@pytest.fixture(autouse=True)
def _restore_starlight_logger():
    """Undo handlers and levels that ``configure_logging`` installs during a test."""
    logger = logging.getLogger("starlight")
    handlers = list(logger.handlers)
    level = logger.level
    yield
    logger.handlers = handlers
    logger.setLevel(level)
