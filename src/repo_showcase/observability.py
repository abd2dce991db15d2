"""Logging setup and the loguru-backed error reporter."""

import sys
from typing import Any

from loguru import logger

SERVICE_NAME = "repo-showcase"


def configure_logging(level: str = "INFO", serialize: bool = False) -> None:
    """Replace loguru's default sink with a single stderr sink.

    Args:
        level: Minimum level to emit
        serialize: Emit JSON records instead of formatted text
    """
    logger.remove()
    logger.add(sys.stderr, level=level.upper(), serialize=serialize)


def log_event(event: str, **kwargs: Any) -> None:
    """Emit an info record tagged with the service name and event."""
    logger.bind(service_name=SERVICE_NAME, event=event, **kwargs).info(event)


class LoguruErrorReporter:
    """ErrorReporter that writes recovered failures as warning records.

    This class satisfies the ErrorReporter protocol through structural
    typing - no explicit inheritance needed.
    """

    def report(self, operation: str, error: BaseException, **context: Any) -> None:
        logger.bind(
            service_name=SERVICE_NAME,
            event=operation,
            error_type=type(error).__name__,
            **context,
        ).warning("{} failed: {}", operation, error)
