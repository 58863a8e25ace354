"""Structured logging setup.

Library events go through the standard ``logging`` logger named
``schemaguard``, which carries only a NullHandler until the host application
either configures logging itself or calls configure_logging().
"""

import logging
import sys
from typing import Optional

import structlog

from schemaguard.config import Settings, get_settings

LOGGER_NAME = "schemaguard"
HANDLER_NAME = "schemaguard-console"

logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: str = LOGGER_NAME):
    """structlog logger bound to a stdlib logger under ``schemaguard``."""
    return structlog.wrap_logger(logging.getLogger(name))


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Install the structlog processor chain and a stdout handler.

    DEBUG switches the console renderer on; otherwise events render as JSON.
    Calling it again replaces the handler installed by the previous call.
    """
    settings = settings or get_settings()
    level = logging.getLevelName(settings.LOG_LEVEL.upper())
    if not isinstance(level, int):
        level = logging.INFO

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer() if settings.DEBUG else structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
    )

    stdlib_logger = logging.getLogger(LOGGER_NAME)
    for handler in list(stdlib_logger.handlers):
        if handler.get_name() == HANDLER_NAME:
            stdlib_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(logging.Formatter("%(message)s"))
    stdlib_logger.addHandler(handler)
    stdlib_logger.setLevel(level)
