"""
Logging Configuration
Console (and optional file) output for the pulse sandbox loggers.
"""
import logging
import sys
from typing import Optional

NAMESPACE = "pulse_sandbox"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%H:%M:%S'


def _handler(handler: logging.Handler, level: int, formatter: logging.Formatter) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(formatter)
    return handler


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Route every pulse_sandbox.* logger to stdout and, if given, to log_file.

    Calling it again (e.g. from tests) replaces the previous handlers.
    """
    logger = logging.getLogger(NAMESPACE)
    logger.setLevel(level)
    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    logger.addHandler(_handler(logging.StreamHandler(sys.stdout), level, formatter))
    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        logger.addHandler(_handler(file_handler, level, formatter))

    logger.debug(f"Logging to stdout{' and ' + log_file if log_file else ''} at {logging.getLevelName(level)}")
    return logger
