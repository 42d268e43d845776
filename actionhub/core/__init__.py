"""
Core utilities and configuration for actionhub.

This package provides the settings model and the logging setup shared by the
adapters and the runtime.
"""

from actionhub.core.config import Settings, settings
from actionhub.core.logging_config import get_logger, setup_logging

__all__ = ["Settings", "settings", "get_logger", "setup_logging"]
