"""Logging setup for pagepress.

Progress lines go to stderr at the configured level. An optional log file
receives everything down to DEBUG, including payload and upload details.
"""

import logging
import sys
from pathlib import Path

from ..config import LogLevel

ROOT_LOGGER = "pagepress"


def setup_logging(level: LogLevel = "INFO", log_file: Path | None = None) -> logging.Logger:
    """Configure the ``pagepress`` logger.

    Args:
        level: Level for stderr output
        log_file: Optional file that also receives DEBUG records

    Returns:
        The configured package logger
    """
    logger = logging.getLogger(ROOT_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    logger.addHandler(console_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )
        logger.addHandler(file_handler)
        # The console handler keeps filtering at its own level
        logger.setLevel(logging.DEBUG)
    else:
        logger.setLevel(level)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the pagepress namespace."""
    if name == ROOT_LOGGER or name.startswith(f"{ROOT_LOGGER}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")
