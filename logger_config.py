"""
Logging configuration for the AWS job.

Every module asks for its own named logger; each one writes to stdout so
the output lands in CloudWatch when run on Lambda and in the terminal
when run from the console entry point.
"""
import logging
import os
import sys
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def get_logger(name: Optional[str] = None, level: Optional[str] = None) -> logging.Logger:
    """
    Get a configured logger instance.

    Args:
        name: Logger name (defaults to this module's name)
        level: Log level name; falls back to LOG_LEVEL, then INFO

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name or __name__)

    # Avoid adding handlers multiple times
    if logger.handlers:
        if level:
            set_level(logger, level)
        return logger

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)

    set_level(logger, level or os.environ.get('LOG_LEVEL', 'INFO'))

    # Prevent propagation to root logger to avoid duplicate logs
    logger.propagate = False

    return logger


def set_level(logger: logging.Logger, level: str) -> None:
    """Apply a level name to a logger and all of its handlers."""
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logger.setLevel(numeric_level)
    for handler in logger.handlers:
        handler.setLevel(numeric_level)
