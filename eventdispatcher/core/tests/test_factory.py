"""Unit tests for create_event_dispatcher: settings-driven wiring."""

from unittest.mock import patch

import pytest

from eventdispatcher.adapters.event_dispatcher.in_memory import InMemoryEventDispatcher
from eventdispatcher.adapters.event_dispatcher.synchronized import SynchronizedEventDispatcher
from eventdispatcher.core.config import Settings
from eventdispatcher.core.exceptions import InvalidArgumentError
from eventdispatcher.core.factory import create_event_dispatcher


class _Listener:
    pass


class TestCreateEventDispatcher:
    def test_plain_dispatcher_by_default(self):
        dispatcher = create_event_dispatcher(Settings())

        assert isinstance(dispatcher, InMemoryEventDispatcher)

    def test_thread_safe_wraps_in_lock(self):
        dispatcher = create_event_dispatcher(Settings(THREAD_SAFE=True))

        assert isinstance(dispatcher, SynchronizedEventDispatcher)
        assert isinstance(dispatcher.inner, InMemoryEventDispatcher)

    def test_enforce_listener_types_is_passed_through(self):
        dispatcher = create_event_dispatcher(Settings(ENFORCE_LISTENER_TYPES=True))

        with pytest.raises(InvalidArgumentError):
            dispatcher.add_listener(_Listener, object())

    def test_uses_module_settings_when_omitted(self):
        with patch(
            "eventdispatcher.core.factory.default_settings", Settings(THREAD_SAFE=True)
        ):
            dispatcher = create_event_dispatcher()

        assert isinstance(dispatcher, SynchronizedEventDispatcher)
