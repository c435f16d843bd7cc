"""Configuration module for the meter dashboard.

Page filter schemas live in filter_schemas.yaml and are loaded through
config.config_loader.
"""

from .settings import config, AppConfig, FilterConfig, Config
from .logging_config import setup_logging, setup_app_logging, get_logger, DEFAULT_LOG_FILE

__all__ = [
    # Settings
    "config",
    "AppConfig",
    "FilterConfig",
    "Config",
    # Logging
    "setup_logging",
    "setup_app_logging",
    "get_logger",
    "DEFAULT_LOG_FILE",
]
