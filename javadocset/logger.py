"""
Logging configuration for the javadoc docset indexer.

Every module logs through a child of the "javadocset" logger; the CLI calls
setup_logger() once to attach handlers.
"""

import logging
import os
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _make_handler(handler: logging.Handler, level: int) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    return handler


def _has_file_handler(logger: logging.Logger, log_file: str) -> bool:
    path = os.path.abspath(log_file)
    return any(
        isinstance(h, logging.FileHandler) and h.baseFilename == path
        for h in logger.handlers
    )


def setup_logger(
    name: str = "javadocset",
    level: int = logging.INFO,
    log_file: Optional[str] = None
) -> logging.Logger:
    """
    Set up and return the package logger.

    Args:
        name: Logger name
        level: Logging level (default: INFO)
        log_file: Optional file path for logging

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Repeated calls adjust the level of existing handlers and only add
    # what is missing: the console handler once, one handler per log file.
    for handler in logger.handlers:
        handler.setLevel(level)

    if not any(type(h) is logging.StreamHandler for h in logger.handlers):
        logger.addHandler(_make_handler(logging.StreamHandler(sys.stdout), level))

    if log_file and not _has_file_handler(logger, log_file):
        logger.addHandler(_make_handler(logging.FileHandler(log_file), level))

    return logger


def get_module_logger(module_name: str) -> logging.Logger:
    """
    Get a child logger for a specific module, e.g. "javadocset.indexer".

    Child loggers propagate to the handlers installed by setup_logger(), and
    their name shows which stage produced each message.
    """
    return logging.getLogger(f"javadocset.{module_name}")
