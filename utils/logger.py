# -*- coding: utf-8 -*-
"""
Logging configuration.

All modules log through children of the ``cip136`` logger:

    logger = get_logger(__name__)
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

ROOT_LOGGER_NAME = "cip136"

# Will be set by setup_logger
_logger: Optional[logging.Logger] = None


def _file_handler(config) -> RotatingFileHandler:
    config.LOGS_DIR.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        config.LOGS_DIR / config.LOG_FILE,
        maxBytes=config.LOG_MAX_BYTES,
        backupCount=config.LOG_BACKUP_COUNT,
        encoding="utf-8"
    )
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(
        "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    ))
    return handler


def setup_logger(console_level: int = logging.INFO) -> logging.Logger:
    """
    Setup application logger with a rotating file handler and a console handler.

    If the logs directory cannot be created the logger keeps the console
    handler only.
    """
    global _logger

    # Import here to avoid circular imports
    from app.config import Config

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(logging.DEBUG)
    logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(logging.Formatter("%(levelname)-8s | %(message)s"))
    logger.addHandler(console_handler)

    if Config.LOG_TO_FILE:
        try:
            logger.addHandler(_file_handler(Config))
        except OSError as e:
            logger.warning(f"File logging disabled ({Config.LOGS_DIR}): {e}")

    _logger = logger
    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a child logger for a module.
    """
    global _logger

    if _logger is None:
        _logger = setup_logger()

    return _logger.getChild(name)
