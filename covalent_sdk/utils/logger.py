"""
logger.py

This module provides centralized logging for the SDK. All modules obtain their
logger through `get_logger` so that output format and levels stay consistent.
Logs go to the console and, when LOG_FILE is configured, to a file as well.
"""

import logging
import os
from covalent_sdk.utils.config import LOG_LEVEL, LOG_FILE

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def get_logger(name: str) -> logging.Logger:
    """
    Configures and returns a logger instance with the specified name.

    :param name: The name of the logger, typically the module name.
    :return: Configured logger instance.
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, LOG_LEVEL, logging.INFO))

    # Ensure no duplicate handlers are added
    if not logger.handlers:
        formatter = logging.Formatter(LOG_FORMAT)

        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.DEBUG)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

        if LOG_FILE:
            log_directory = os.path.dirname(LOG_FILE)
            if log_directory and not os.path.exists(log_directory):
                os.makedirs(log_directory)

            file_handler = logging.FileHandler(LOG_FILE)
            file_handler.setLevel(logging.INFO)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

    return logger


def enable_debug(name: str) -> None:
    """
    Lowers the level of the named logger to DEBUG.

    :param name: The logger name.
    """
    get_logger(name).setLevel(logging.DEBUG)
