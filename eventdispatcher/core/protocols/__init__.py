"""Core protocols for dependency injection."""

from eventdispatcher.core.protocols.event_dispatcher import (
    EventDispatcher,
    ListenerAction,
    ListenerT,
)

__all__ = ["EventDispatcher", "ListenerAction", "ListenerT"]
