"""Thread-safe event dispatcher wrapper.

Runs every call of the wrapped dispatcher under one re-entrant lock. A
single lock keeps cross-type bookkeeping (dropping empty types) atomic with
respect to concurrent add/remove calls. The lock is re-entrant so listener
actions may call back into the dispatcher from inside ``fire_event``.

Listener actions run while the lock is held: a slow action blocks every
other thread using the dispatcher until it returns.
"""

import threading
from typing import Any, Hashable, Optional, overload

from eventdispatcher.core.constants import INFINITE_CALLS
from eventdispatcher.core.protocols.event_dispatcher import (
    EventDispatcher,
    ListenerAction,
    ListenerT,
)


class SynchronizedEventDispatcher:
    """EventDispatcher decorator that serializes access with a threading.RLock.

    Usage:
        dispatcher = SynchronizedEventDispatcher(InMemoryEventDispatcher())
    """

    def __init__(self, inner: EventDispatcher) -> None:
        """Wrap ``inner``; all access must go through this wrapper afterwards."""
        self._inner = inner
        self._lock = threading.RLock()

    @property
    def inner(self) -> EventDispatcher:
        """The wrapped dispatcher."""
        return self._inner

    def add_listener(
        self, listener_type: Hashable, listener: Any, max_calls: int = INFINITE_CALLS
    ) -> bool:
        """Register a listener under the lock."""
        with self._lock:
            return self._inner.add_listener(listener_type, listener, max_calls)

    def remove_listener(self, listener_type: Hashable, listener: Any) -> bool:
        """Remove a listener under the lock."""
        with self._lock:
            return self._inner.remove_listener(listener_type, listener)

    def remove_listener_type(self, listener_type: Hashable) -> bool:
        """Remove a listener type under the lock."""
        with self._lock:
            return self._inner.remove_listener_type(listener_type)

    def clear(self) -> None:
        """Remove all listeners under the lock."""
        with self._lock:
            self._inner.clear()

    def listener_count(self, listener_type: Optional[Hashable] = None) -> int:
        """Count listeners under the lock."""
        with self._lock:
            return self._inner.listener_count(listener_type)

    def listener_type_count(self) -> int:
        """Count listener types under the lock."""
        with self._lock:
            return self._inner.listener_type_count()

    def listener_types(self) -> tuple[Hashable, ...]:
        """Registered listener types, read under the lock."""
        with self._lock:
            return self._inner.listener_types()

    def has_listener(self, listener_type: Hashable, listener: Any) -> bool:
        """Membership check under the lock."""
        with self._lock:
            return self._inner.has_listener(listener_type, listener)

    def max_calls_for(self, listener_type: Hashable, listener: Any) -> int:
        """Budget of a listener, read under the lock."""
        with self._lock:
            return self._inner.max_calls_for(listener_type, listener)

    def current_calls_for(self, listener_type: Hashable, listener: Any) -> int:
        """Calls recorded for a listener, read under the lock."""
        with self._lock:
            return self._inner.current_calls_for(listener_type, listener)

    @overload
    def fire_event(
        self, listener_type: type[ListenerT], action: Optional[ListenerAction[ListenerT]]
    ) -> bool: ...

    @overload
    def fire_event(
        self, listener_type: Hashable, action: Optional[ListenerAction[Any]]
    ) -> bool: ...

    def fire_event(self, listener_type: Any, action: Any) -> bool:
        """Fire under the lock; actions run while it is held."""
        with self._lock:
            return self._inner.fire_event(listener_type, action)
