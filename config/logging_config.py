"""Logging configuration for the meter dashboard."""

import logging
import sys
from pathlib import Path
from datetime import datetime
from typing import Optional

from config.settings import PROJECT_ROOT, AppConfig, config

ROOT_LOGGER_NAME = "meter_dashboard"


def setup_logging(
    log_level: str = "INFO",
    log_file: Optional[Path] = None,
    log_to_console: bool = True,
) -> logging.Logger:
    """
    Configure logging for the application.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional path to log file
        log_to_console: Whether to also log to console

    Returns:
        Configured logger instance
    """
    level = getattr(logging, log_level.upper())

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)

    # Clear any existing handlers
    logger.handlers.clear()

    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    if log_to_console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str = ROOT_LOGGER_NAME) -> logging.Logger:
    """
    Get a logger instance.

    Args:
        name: Logger name (will be prefixed with 'meter_dashboard.')

    Returns:
        Logger instance
    """
    if name == ROOT_LOGGER_NAME:
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


# Default log file path
DEFAULT_LOG_FILE = PROJECT_ROOT / "logs" / f"dashboard_{datetime.now().strftime('%Y%m%d')}.log"


def setup_app_logging(app_config: Optional[AppConfig] = None) -> logging.Logger:
    """
    Configure logging from the application settings.

    Args:
        app_config: Settings to use, defaults to the global config

    Returns:
        Configured logger instance
    """
    app_config = app_config or config.app
    return setup_logging(
        log_level=app_config.log_level,
        log_file=DEFAULT_LOG_FILE if app_config.log_to_file else None,
    )
