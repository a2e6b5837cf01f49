"""Configuration module for the event dispatcher.

Usage:
    from eventdispatcher.core.config import settings

    if settings.THREAD_SAFE:
        ...
"""

from eventdispatcher.core.config.enums import LogLevel
from eventdispatcher.core.config.settings import Settings

__all__ = [
    "LogLevel",
    "Settings",
    "settings",
]

# Singleton settings instance
settings = Settings()
