"""
Logging Configuration

Centralized logging configuration for tletrack.
All modules should use this logger for consistent output.

The package never configures handlers on import. Applications opt in:

    from tletrack.logging_config import configure_logging, get_logger

    configure_logging()
    logger = get_logger(__name__)
    logger.info("Ground track computed")
    logger.warning("No antemeridian crossing found")
"""

import logging
import sys
from typing import Optional, Union

from tletrack import config

# Default logging format
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: Union[int, str, None] = None, log_file: Optional[str] = None) -> None:
    """
    Configure logging for the entire application.

    Parameters
    ----------
    level : int or str, optional
        Logging level (e.g., logging.DEBUG, "INFO"). Defaults to
        ``TLETRACK_LOG_LEVEL``.
    log_file : str, optional
        Path to log file. If None, logs only to console.
    """
    if level is None:
        level = config.LOG_LEVEL
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    handlers = [logging.StreamHandler(sys.stdout)]

    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        handlers=handlers
    )


def get_logger(name: str) -> logging.Logger:
    """Logger for a tletrack module, named after it (pass ``__name__``)."""
    return logging.getLogger(name)
