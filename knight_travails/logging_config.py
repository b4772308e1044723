"""Centralized logging configuration for knight_travails."""

import logging
import sys

from knight_travails.config import settings

# Global flag to ensure handler is only initialized once
_LOGGING_CONFIGURED = False


def setup_logging(name: str | None = None) -> logging.Logger:
    """
    Configure and return a logger with simple formatting.

    Uses StreamHandler to stderr with print-like formatting (module name only).
    Handler is configured once globally on first call, at the level given by
    the LOG_LEVEL setting.

    Args:
        name: Logger name (typically __name__ from the calling module).
              If None, returns the package logger.

    Returns:
        Configured logger instance.
    """
    global _LOGGING_CONFIGURED

    if not _LOGGING_CONFIGURED:
        root_logger = logging.getLogger("knight_travails")
        root_logger.setLevel(settings.LOG_LEVEL.upper())

        handler = logging.StreamHandler(sys.stderr)
        formatter = logging.Formatter("%(name)s: %(message)s")
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

        # Prevent propagation to avoid duplicate logs
        root_logger.propagate = False

        _LOGGING_CONFIGURED = True

    return logging.getLogger(name) if name else logging.getLogger("knight_travails")
