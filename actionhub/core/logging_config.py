"""
Logging Configuration Module.

This module provides centralized logging configuration for actionhub.

Features:
- Configurable log levels per module
- Console and optional file logging
- Simple, detailed or JSON-like line formats

Unlike library modules, which only call ``logging.getLogger(__name__)``, this
module touches the root logger, so it is never run on import. Applications call
``setup_logging()`` once at startup.
"""

import logging
from pathlib import Path
from typing import Dict, Optional

# Define log formats
SIMPLE_FORMAT = "%(levelname)s - %(name)s - %(message)s"

DETAILED_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(funcName)s() - %(message)s"

JSON_FORMAT = (
    '{"timestamp": "%(asctime)s", "level": "%(levelname)s", "logger": "%(name)s", '
    '"module": "%(filename)s", "function": "%(funcName)s", "line": %(lineno)d, '
    '"message": "%(message)s"}'
)

FORMATS: Dict[str, str] = {
    "simple": SIMPLE_FORMAT,
    "detailed": DETAILED_FORMAT,
    "json": JSON_FORMAT,
}

LOG_FILE_NAME = "actionhub.log"

# Module-specific log levels
MODULE_LOG_LEVELS = {
    "actionhub": "INFO",
    "actionhub.adapters": "INFO",
    "actionhub.runtime": "INFO",
    # Third-party libraries (reduce noise)
    "httpx": "WARNING",
    "httpcore": "WARNING",
    "asyncio": "WARNING",
}


def _resolve_format(log_format: str) -> str:
    return FORMATS.get(log_format, DETAILED_FORMAT)


def setup_logging(
    log_level: Optional[str] = None,
    log_format: Optional[str] = None,
    enable_file: Optional[bool] = None,
    log_file_dir: Optional[str] = None,
) -> None:
    """
    Configure logging for the application.

    Values left as ``None`` are read from ``actionhub.core.config.settings``.

    Args:
        log_level: Override default log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Override default format (simple, detailed, json)
        enable_file: Whether to enable file logging
        log_file_dir: Directory that receives ``actionhub.log``
    """
    from actionhub.core.config import settings

    level = (log_level or settings.log_level).upper()
    fmt = log_format or settings.log_format
    file_enabled = settings.enable_file_logging if enable_file is None else enable_file
    file_dir = log_file_dir or settings.log_file_dir

    formatter = logging.Formatter(_resolve_format(fmt), datefmt="%Y-%m-%d %H:%M:%S")

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)  # Capture all levels, filter at handler level

    # Remove existing handlers to avoid duplicates
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if file_enabled:
        Path(file_dir).mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(Path(file_dir) / LOG_FILE_NAME)
        file_handler.setLevel(logging.DEBUG)  # Always log DEBUG to file
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    for module_name, module_level in MODULE_LOG_LEVELS.items():
        logging.getLogger(module_name).setLevel(module_level)

    root_logger.info("Logging configured: level=%s, format=%s, file_logging=%s", level, fmt, file_enabled)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a module.

    Args:
        name: The module name (typically __name__)

    Returns:
        A configured logger instance
    """
    return logging.getLogger(name)
