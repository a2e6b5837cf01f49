"""Unit tests for Settings: defaults and env var loading."""

import pytest
from pydantic import ValidationError

from eventdispatcher.core.config import LogLevel, Settings


class TestDefaults:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("EVENT_DISPATCHER_LOG_LEVEL", raising=False)

        settings = Settings()

        assert settings.LOG_LEVEL == LogLevel.INFO
        assert settings.LOG_FIRE_EVENTS is False
        assert settings.ENFORCE_LISTENER_TYPES is False
        assert settings.THREAD_SAFE is False


class TestEnvLoading:
    def test_reads_prefixed_env_vars(self, monkeypatch):
        monkeypatch.setenv("EVENT_DISPATCHER_LOG_LEVEL", "WARNING")
        monkeypatch.setenv("EVENT_DISPATCHER_THREAD_SAFE", "true")
        monkeypatch.setenv("EVENT_DISPATCHER_ENFORCE_LISTENER_TYPES", "1")

        settings = Settings()

        assert settings.LOG_LEVEL == LogLevel.WARNING
        assert settings.THREAD_SAFE is True
        assert settings.ENFORCE_LISTENER_TYPES is True

    def test_ignores_unprefixed_env_vars(self, monkeypatch):
        monkeypatch.setenv("THREAD_SAFE", "true")

        assert Settings().THREAD_SAFE is False

    def test_rejects_unknown_log_level(self, monkeypatch):
        monkeypatch.setenv("EVENT_DISPATCHER_LOG_LEVEL", "LOUD")

        with pytest.raises(ValidationError):
            Settings()
