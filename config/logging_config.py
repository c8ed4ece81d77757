"""
Logging setup for multiformat_export.

Modules call get_logger(__name__). Each logger gets a console handler at
LOG_LEVEL and, when LOG_FILE is set, a rotating file handler that records
everything from DEBUG up.
"""
import logging
import logging.handlers
from pathlib import Path
from .constants import (
    LOG_LEVEL, LOG_FORMAT, LOG_FILE,
    LOG_MAX_SIZE_MB, LOG_BACKUP_COUNT
)

ROOT_LOGGER_NAME = 'multiformat_export'


def _parse_level(level: str) -> int:
    numeric = getattr(logging, str(level).upper(), None)
    if not isinstance(numeric, int):
        raise ValueError(f"Invalid log level: {level}")
    return numeric


def _console_handler(level: int) -> logging.Handler:
    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    return handler


def _file_handler(path: str) -> logging.Handler:
    Path(path).parent.mkdir(parents=True, exist_ok=True)
    handler = logging.handlers.RotatingFileHandler(
        path,
        maxBytes=LOG_MAX_SIZE_MB * 1024 * 1024,
        backupCount=LOG_BACKUP_COUNT,
        encoding='utf-8',
    )
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    return handler


def _is_console(handler: logging.Handler) -> bool:
    # RotatingFileHandler is itself a StreamHandler subclass
    return isinstance(handler, logging.StreamHandler) and not isinstance(handler, logging.FileHandler)


def setup_logger(name: str = None) -> logging.Logger:
    """
    Get or create a configured logger.

    Usage:
        from config.logging_config import setup_logger
        logger = setup_logger(__name__)
        logger.info("Rendering template")

    Args:
        name: Logger name. If None, uses 'multiformat_export'.

    Returns:
        Configured logging.Logger instance.
    """
    logger = logging.getLogger(name or ROOT_LOGGER_NAME)

    # Configured once per name
    if logger.handlers:
        return logger

    level = _parse_level(LOG_LEVEL)
    logger.setLevel(level)
    logger.addHandler(_console_handler(level))
    if LOG_FILE:
        logger.addHandler(_file_handler(LOG_FILE))

    return logger


def get_logger(name: str = None) -> logging.Logger:
    """Alias for setup_logger."""
    return setup_logger(name)


def set_log_level(level: str) -> None:
    """
    Change the level of every configured logger and of its console handler.

    File handlers keep logging at DEBUG.

    Raises:
        ValueError: if level is not a logging level name
    """
    numeric = _parse_level(level)
    for existing in list(logging.Logger.manager.loggerDict.values()):
        if not isinstance(existing, logging.Logger) or not existing.handlers:
            continue
        existing.setLevel(numeric)
        for handler in existing.handlers:
            if _is_console(handler):
                handler.setLevel(numeric)


# Usage: from config.logging_config import logger
logger = setup_logger(ROOT_LOGGER_NAME)
