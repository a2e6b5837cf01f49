"""Typed in-process listener registry with per-listener call budgets.

Usage:
    from eventdispatcher import InMemoryEventDispatcher

    dispatcher = InMemoryEventDispatcher()
    dispatcher.add_listener(SaveListener, autosave)
    dispatcher.add_listener(SaveListener, notifier, max_calls=1)
    dispatcher.fire_event(SaveListener, lambda listener: listener.on_save(doc))
"""

from eventdispatcher.adapters.event_dispatcher import (
    FakeEventDispatcher,
    InMemoryEventDispatcher,
    SynchronizedEventDispatcher,
)
from eventdispatcher.core.constants import INFINITE_CALLS, NOT_FOUND_CALLS
from eventdispatcher.core.exceptions import EventDispatcherException, InvalidArgumentError
from eventdispatcher.core.factory import create_event_dispatcher
from eventdispatcher.core.protocols import EventDispatcher, ListenerAction

__all__ = [
    "EventDispatcher",
    "EventDispatcherException",
    "FakeEventDispatcher",
    "INFINITE_CALLS",
    "InMemoryEventDispatcher",
    "InvalidArgumentError",
    "ListenerAction",
    "NOT_FOUND_CALLS",
    "SynchronizedEventDispatcher",
    "create_event_dispatcher",
]
