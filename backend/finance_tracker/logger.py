"""Logging configuration for the finance tracker.

Sets up logging to both file (with date-based naming) and console.
"""

import logging
from datetime import date

from .config import Settings

LOGGER_NAME = "finance_tracker"


def setup_logging(settings: Settings) -> logging.Logger:
    """Set up application logging with file and console handlers.

    Args:
        settings: Application settings containing log settings.

    Returns:
        Configured logger instance.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(settings.log_level)

    # Clear any existing handlers (in case this is called multiple times)
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()

    detailed_formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    console_formatter = logging.Formatter("%(levelname)s - %(message)s")

    if settings.log_to_file:
        settings.log_dir.mkdir(parents=True, exist_ok=True)
        log_file_path = settings.log_dir / f"finance-{date.today().isoformat()}.log"
        file_handler = logging.FileHandler(log_file_path)
        file_handler.setLevel(settings.log_level)
        file_handler.setFormatter(detailed_formatter)
        logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(settings.log_level)
    console_handler.setFormatter(console_formatter)
    logger.addHandler(console_handler)

    return logger


def get_logger() -> logging.Logger:
    """Get the application logger."""
    return logging.getLogger(LOGGER_NAME)
