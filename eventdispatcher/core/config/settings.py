"""Dispatcher settings with defaults.

Uses Pydantic Settings for automatic env var loading:
    EVENT_DISPATCHER_LOG_LEVEL=DEBUG
    EVENT_DISPATCHER_THREAD_SAFE=true
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from eventdispatcher.core.config.enums import LogLevel


class Settings(BaseSettings):
    """Event dispatcher configuration."""

    model_config = SettingsConfigDict(
        env_prefix="EVENT_DISPATCHER_",
        extra="ignore",
    )

    LOG_LEVEL: LogLevel = Field(LogLevel.INFO, description="Level of the eventdispatcher logger")
    LOG_FIRE_EVENTS: bool = Field(False, description="Log every fire_event call at DEBUG")
    ENFORCE_LISTENER_TYPES: bool = Field(
        False,
        description="Reject listeners that are not instances of a class listener type",
    )
    THREAD_SAFE: bool = Field(
        False, description="Wrap dispatchers built by the factory in a single lock"
    )
