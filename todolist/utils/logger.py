"""
Logging configuration

One package logger ("todolist") writes to stdout and, when TODOLIST_LOG_FILE
is set, to a file. Components log through child loggers from get_logger().
"""

import logging
import sys
from pathlib import Path
from typing import Optional, Union
from todolist.config.settings import settings
from todolist.config.constants import LOG_FORMAT, LOG_DATE_FORMAT

ROOT_LOGGER_NAME = "todolist"


def _level(name: str) -> int:
    return getattr(logging, name.upper(), logging.INFO)


def _build_handler(handler: logging.Handler, level: int) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, LOG_DATE_FORMAT))
    return handler


def setup_logger(
    name: str = ROOT_LOGGER_NAME,
    level: Optional[str] = None,
    log_file: Optional[Union[str, Path]] = None,
) -> logging.Logger:
    """
    Setup and configure logger

    Args:
        name: Logger name
        level: Level name (defaults to TODOLIST_LOG_LEVEL)
        log_file: Optional log file (defaults to TODOLIST_LOG_FILE)

    Returns:
        Configured logger instance
    """
    console_level = _level(level or settings.LOG_LEVEL)
    log_file = log_file or settings.LOG_FILE

    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG if log_file else console_level)
    logger.propagate = False

    # Reconfiguring replaces earlier handlers
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    logger.addHandler(_build_handler(logging.StreamHandler(sys.stdout), console_level))

    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        logger.addHandler(_build_handler(logging.FileHandler(path, encoding="utf-8"), logging.DEBUG))

    return logger


def get_logger(component: str) -> logging.Logger:
    """Child of the package logger, e.g. "todolist.repository" """
    return logging.getLogger(ROOT_LOGGER_NAME).getChild(component)


# Global logger instance
logger = setup_logger()
