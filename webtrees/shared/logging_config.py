"""
Common logging configuration for the webtrees application
"""

import logging
import os
import sys


LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def setup_logger(name: str, level: str = "INFO", log_file: str = None) -> logging.Logger:
    """
    Setup a logger with consistent formatting across the application

    Args:
        name: Logger name (typically __name__)
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file path to write logs to

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    # Already configured by an earlier call
    if logger.handlers:
        return logger

    logger.setLevel(getattr(logging, level.upper()))

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def get_project_logger(module_name: str, verbose: bool = False) -> logging.Logger:
    """
    Get a logger configured for the webtrees application

    The level comes from WEBTREES_LOG_LEVEL when set, DEBUG when verbose,
    otherwise INFO.

    Args:
        module_name: Name of the module (typically __name__)
        verbose: Enable debug level logging

    Returns:
        Configured logger that logs to stdout only
    """
    level = "DEBUG" if verbose else os.environ.get('WEBTREES_LOG_LEVEL', 'INFO')
    return setup_logger(module_name, level, log_file=None)

