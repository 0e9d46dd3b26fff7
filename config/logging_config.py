"""
Centralized logging configuration.
All modules log through children of the 'texpages' logger.
"""
import logging
import logging.handlers
from pathlib import Path
from typing import Optional

from .constants import (
    LOG_LEVEL, LOG_FORMAT, LOG_MAX_SIZE_MB, LOG_BACKUP_COUNT,
    APP_LOGGER_NAME,
)


def setup_logger(
    name: str = None,
    level: str = LOG_LEVEL,
    log_file: Optional[str] = None,
) -> logging.Logger:
    """
    Get or create a configured logger.

    Usage:
        from config.logging_config import setup_logger
        logger = setup_logger(__name__)
        logger.info("Message here")

    Args:
        name: Logger name. If None, uses 'texpages'.
        level: Level name for the logger (DEBUG, INFO, ...).
        log_file: Optional path for a rotating file handler.

    Returns:
        Configured logging.Logger instance.
    """
    logger = logging.getLogger(name or APP_LOGGER_NAME)

    # Avoid adding handlers multiple times
    if not logger.handlers:
        logger.setLevel(getattr(logging, level.upper(), logging.INFO))

        console = logging.StreamHandler()
        console.setLevel(logging.DEBUG)
        console.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(console)

    has_file_handler = any(
        isinstance(handler, logging.handlers.RotatingFileHandler) for handler in logger.handlers
    )
    if log_file and not has_file_handler:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            str(log_path),
            maxBytes=LOG_MAX_SIZE_MB * 1024 * 1024,
            backupCount=LOG_BACKUP_COUNT
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str = None) -> logging.Logger:
    """
    Return a logger under the application logger.

    Usage:
        from config.logging_config import get_logger
        logger = get_logger(__name__)

    Child loggers carry no handlers of their own; records propagate to
    the configured 'texpages' logger.
    """
    setup_logger(APP_LOGGER_NAME)
    if not name or name == APP_LOGGER_NAME:
        return logging.getLogger(APP_LOGGER_NAME)
    if not name.startswith(APP_LOGGER_NAME + '.'):
        name = f"{APP_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


# Singleton logger for quick imports
# Usage: from config.logging_config import logger
logger = setup_logger(APP_LOGGER_NAME)
