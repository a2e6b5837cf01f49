"""Configuration enums for type-safe settings.

These enums inherit from str so they compare equal to the raw env values.
"""

from enum import Enum


class LogLevel(str, Enum):
    """Log levels accepted by the dispatcher logger."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"
