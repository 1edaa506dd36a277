"""
Logging Configuration
Attaches console (and optionally file) output to the 'densematrix' logger.
The library itself only logs; applications opt in by calling setup_logging().
"""
import logging
import sys
from typing import Optional

from densematrix.config import get_log_level

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATEFMT = '%H:%M:%S'


def setup_logging(level: Optional[int] = None, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configures the logger for the 'densematrix' namespace.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO).
            Defaults to the level named by DENSEMATRIX_LOG_LEVEL, else INFO.
        log_file: Optional path to save logs to a file.

    Returns:
        The configured package logger.
    """
    if level is None:
        level = get_log_level()

    logger = logging.getLogger("densematrix")
    logger.setLevel(level)
    # replaces the NullHandler and any earlier setup
    logger.handlers.clear()

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT)
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.info("Logging initialized.")
    return logger
