"""Global logger configuration for the slicekit package."""

import logging
import sys

from slicekit.core.config import settings

__all__ = ["logger", "setup_logger"]


def setup_logger(
    name: str = "slicekit",
    level: str | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """
    Configure and return a logger instance.

    Args:
        name: Logger name (package name or a dotted child of it)
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Falls back
            to the configured ``SLICEKIT_LOG_LEVEL``.
        format_string: Custom format string

    Returns:
        Configured logger instance
    """
    level = level or settings.LOG_LEVEL
    format_string = format_string or (
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    logger = logging.getLogger(name)

    # One stdout handler per name; handlers added by other code are ignored
    if not any(type(h) is logging.StreamHandler for h in logger.handlers):
        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter(fmt=format_string, datefmt="%Y-%m-%d %H:%M:%S")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(getattr(logging, level.upper()))
        logger.propagate = False

    return logger


# Default logger instance for the package
logger = setup_logger()
