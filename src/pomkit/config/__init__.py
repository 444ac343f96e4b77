"""Configuration module for pomkit.

Usage:
    from pomkit.config import get_settings

    settings = get_settings()  # Cached singleton
    print(settings.default_timeout_ms)
"""

from pomkit.config.logging import configure_logging, get_logger
from pomkit.config.settings import Settings, get_settings

__all__ = ["Settings", "configure_logging", "get_logger", "get_settings"]
