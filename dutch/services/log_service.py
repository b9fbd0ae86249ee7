"""Logging service."""

import logging
import sys
from typing import Any

from dutch.config import settings

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Configure root logging for an application embedding the engine.

    Args:
        level: Log level name, defaults to ``settings.log_level``

    """
    level = level or settings.log_level
    logging.basicConfig(
        level=level.upper(),
        format=LOG_FORMAT,
        datefmt="%H:%M:%S",
        stream=sys.stdout,
    )
    logging.getLogger("dutch").setLevel(level.upper())


def _format(data: dict[str, Any]) -> str:
    return " | ".join(f"{k}={v}" for k, v in data.items())


class LogService:
    """Service for structured logging.

    Emits ``key=value`` pairs joined by ``|`` so game events read the same
    way wherever they are logged from.
    """

    def info(self, data: dict[str, Any]) -> None:
        """Log info message.

        Args:
            data: Log data as key-value pairs

        """
        logger.info(_format(data))

    def warning(self, data: dict[str, Any]) -> None:
        """Log warning message."""
        logger.warning(_format(data))

    def debug(self, data: dict[str, Any]) -> None:
        logger.debug(_format(data))
