"""Project logger for mapfold, configured from ``mapfold.core.config``."""

import logging
import sys

from mapfold.core.config import Settings, settings

__all__ = ["logger", "setup_logger"]


def setup_logger(name: str = "mapfold", level: str | None = None) -> logging.Logger:
    """Return the named logger, attaching a stdout handler on first use.

    Args:
        name: Logger name.
        level: Level name overriding ``settings.LOG_LEVEL``; validated the
            same way the settings are.

    Returns:
        The configured, non-propagating logger. Later calls for the same
        name return it unchanged.
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    resolved = settings if level is None else Settings(
        LOG_LEVEL=level, LOG_FORMAT=settings.LOG_FORMAT
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        logging.Formatter(fmt=resolved.LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    )
    logger.addHandler(handler)
    logger.setLevel(logging.getLevelName(resolved.LOG_LEVEL))
    logger.propagate = False
    return logger


logger = setup_logger()
