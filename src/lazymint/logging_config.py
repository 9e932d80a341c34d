"""
Logging configuration for lazymint
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(levelname)-8s %(name)s %(filename)s:%(lineno)d %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: int = logging.INFO, logger_name: str = "lazymint") -> logging.Logger:
    """
    Attach a stdout handler with timestamp, file and line number information

    Args:
        level: Logging level (default: INFO)
        logger_name: Logger to configure; "" configures the root logger

    Returns:
        The configured logger
    """
    target = logging.getLogger(logger_name)
    target.setLevel(level)

    # Remove existing handlers to avoid duplicates
    for handler in target.handlers[:]:
        target.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    target.addHandler(console_handler)
    return target


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance with the given name

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
