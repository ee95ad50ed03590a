"""Shared fixtures for the named_events test suite."""

import pytest
from loguru import logger

from named_events.settings import get_settings


@pytest.fixture(autouse=True)
def fresh_settings():
    """Make every test read settings from its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def log_messages():
    """Collect loguru records emitted by the package during a test."""
    messages: list[tuple[str, str]] = []
    logger.enable("named_events")
    handler_id = logger.add(lambda m: messages.append((m.record["level"].name, m.record["message"])), level="TRACE")
    yield messages
    logger.remove(handler_id)
    logger.disable("named_events")
