"""Configuration module for eventually."""

from eventually.config.logging import configure_logging, get_logger
from eventually.config.settings import Settings, get_settings

__all__ = ["Settings", "configure_logging", "get_logger", "get_settings"]
