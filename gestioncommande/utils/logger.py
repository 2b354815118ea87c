"""
Logger utility for consistent logging across the persistence layer.

This module provides a standardized way to create and configure loggers,
ensuring consistent log formatting and behavior.

Features:
- Console handler on stdout
- Rotating file handler for errors
- SQLAlchemy engine logging tied to the DEBUG setting
- No duplicate handlers when called multiple times
"""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional

from gestioncommande.utils.config import Settings, get_settings

# Default log format
DEFAULT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
VERBOSE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(pathname)s:%(lineno)d - %(message)s'
DEFAULT_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def setup_logging(settings: Optional[Settings] = None) -> logging.Logger:
    """
    Configure global logging for the application.

    Args:
        settings: Settings to read LOG_LEVEL, LOG_DIR and DEBUG from.
            Defaults to the cached application settings.

    Returns:
        logging.Logger: Logger for the application package
    """
    settings = settings or get_settings()
    log_level_name = settings.LOG_LEVEL.upper()
    log_level = getattr(logging, log_level_name, logging.INFO)

    log_dir = Path(settings.LOG_DIR)
    log_dir.mkdir(parents=True, exist_ok=True)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Remove existing handlers to avoid duplicates when reloading
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    verbose_formatter = logging.Formatter(VERBOSE_FORMAT, datefmt=DEFAULT_DATE_FORMAT)
    standard_formatter = logging.Formatter(DEFAULT_FORMAT, datefmt=DEFAULT_DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(standard_formatter)
    console_handler.setLevel(logging.DEBUG if settings.DEBUG else log_level)
    root_logger.addHandler(console_handler)

    error_file_handler = logging.handlers.RotatingFileHandler(
        log_dir / "error.log",
        maxBytes=10 * 1024 * 1024,  # 10 MB
        backupCount=5
    )
    error_file_handler.setLevel(logging.ERROR)
    error_file_handler.setFormatter(verbose_formatter)
    root_logger.addHandler(error_file_handler)

    logging.getLogger('sqlalchemy.engine').setLevel(
        logging.INFO if settings.DEBUG else logging.WARNING
    )

    logger = logging.getLogger('gestioncommande')
    logger.info(f"Logging initialized with level {log_level_name}")

    return logger


def get_logger(name: Optional[str] = None, level: Optional[int] = None) -> logging.Logger:
    """
    Get a logger instance.

    Args:
        name: Optional name for the logger. Using __name__ creates a logger
            hierarchy that matches the module structure.
        level: Optional logging level to set on the logger.

    Returns:
        logging.Logger: Logger instance ready for use.
    """
    logger = logging.getLogger(name or 'gestioncommande')
    if level is not None:
        logger.setLevel(level)
    return logger
