"""Pytest configuration and fixtures for schemaguard tests."""

import logging

import pytest
import structlog

from schemaguard.config import Settings, get_settings
from schemaguard.logging_config import HANDLER_NAME, LOGGER_NAME
from schemaguard.validators import ValidationEngine


@pytest.fixture(autouse=True)
def reset_structlog():
    """Restore structlog defaults after tests that reconfigure logging."""
    yield
    structlog.reset_defaults()
    stdlib_logger = logging.getLogger(LOGGER_NAME)
    for handler in list(stdlib_logger.handlers):
        if handler.get_name() == HANDLER_NAME:
            stdlib_logger.removeHandler(handler)
    stdlib_logger.setLevel(logging.NOTSET)


@pytest.fixture
def settings_cache():
    """Clear the cached settings around tests that change the environment."""
    get_settings.cache_clear()
    yield get_settings
    get_settings.cache_clear()


@pytest.fixture
def engine() -> ValidationEngine:
    """Engine with default (lax) settings."""
    return ValidationEngine(Settings())


@pytest.fixture
def strict_engine() -> ValidationEngine:
    """Engine whose date format requires a real calendar date."""
    return ValidationEngine(Settings(STRICT_DATES=True))


def codes(result) -> list[str]:
    """Error codes of a result, in order."""
    return [v.code for v in result.violations]
