"""Logging configuration for applications embedding named_events.

The package logs through loguru and is disabled on import, so nothing is
emitted until the application opts in with ``setup_logging``.
"""

import logging
import sys

from loguru import logger

from .settings import get_settings

PACKAGE_NAME = "named_events"


class InterceptHandler(logging.Handler):
    """Intercept standard logging messages toward loguru."""

    def emit(self, record):
        # Get corresponding loguru level if it exists
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Find caller from where the logged message originated
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def setup_logging(log_level: str | None = None, intercept_stdlib: bool = False) -> int:
    """Install a stderr sink and enable logging for the package.

    Args:
        log_level: Level for the sink; defaults to ``NAMED_EVENTS_LOG_LEVEL``.
        intercept_stdlib: Also route standard ``logging`` records to loguru.

    Returns:
        The loguru handler id, usable with ``logger.remove``.
    """
    log_level = (log_level or get_settings().log_level).upper()

    logger.remove()  # Remove default handler
    handler_id = logger.add(
        sys.stderr,
        format="<level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>",
        level=log_level,
        colorize=True,
    )
    logger.enable(PACKAGE_NAME)
    logger.debug(f"Log level set to: {log_level}")

    if intercept_stdlib:
        logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)

    return handler_id


def disable_logging() -> None:
    """Silence the package again (the state it starts in)."""
    logger.disable(PACKAGE_NAME)


__all__ = ["InterceptHandler", "disable_logging", "setup_logging"]
