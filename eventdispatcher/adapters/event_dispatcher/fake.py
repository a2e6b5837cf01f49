"""Fake event dispatcher for testing.

Records fired listener types for assertions without invoking listeners.
"""

from typing import Any, Hashable, Optional

from eventdispatcher.adapters.event_dispatcher.in_memory import InMemoryEventDispatcher
from eventdispatcher.core.constants import INFINITE_CALLS


class FakeEventDispatcher:
    """Test implementation of EventDispatcher.

    Registrations are kept in a real InMemoryEventDispatcher so counts and
    budgets behave as in production. Fires are recorded; listeners are only
    invoked when ``call_listeners`` is True.

    Usage:
        fake = FakeEventDispatcher()
        some_component(dispatcher=fake).save()

        fake.assert_fired(SaveListener)
        assert fake.fired_count(SaveListener) == 1
    """

    def __init__(self, call_listeners: bool = False) -> None:
        """Initialize the fake event dispatcher.

        Args:
            call_listeners: If True, fires are forwarded to the registered
                            listeners. Defaults to False (just record fires).
        """
        self.fired: list[tuple[Hashable, Any]] = []
        self._inner = InMemoryEventDispatcher()
        self._call_listeners = call_listeners

    def add_listener(
        self, listener_type: Hashable, listener: Any, max_calls: int = INFINITE_CALLS
    ) -> bool:
        """Register a listener (validated like the real dispatcher)."""
        return self._inner.add_listener(listener_type, listener, max_calls)

    def remove_listener(self, listener_type: Hashable, listener: Any) -> bool:
        """Remove a listener."""
        return self._inner.remove_listener(listener_type, listener)

    def remove_listener_type(self, listener_type: Hashable) -> bool:
        """Remove a listener type."""
        return self._inner.remove_listener_type(listener_type)

    def clear(self) -> None:
        """Remove all listeners (recorded fires are kept, see reset)."""
        self._inner.clear()

    def listener_count(self, listener_type: Optional[Hashable] = None) -> int:
        """Count registered listeners."""
        return self._inner.listener_count(listener_type)

    def listener_type_count(self) -> int:
        """Count registered listener types."""
        return self._inner.listener_type_count()

    def listener_types(self) -> tuple[Hashable, ...]:
        """Registered listener types."""
        return self._inner.listener_types()

    def has_listener(self, listener_type: Hashable, listener: Any) -> bool:
        """Check if a listener is registered under the type."""
        return self._inner.has_listener(listener_type, listener)

    def max_calls_for(self, listener_type: Hashable, listener: Any) -> int:
        """Budget of a listener."""
        return self._inner.max_calls_for(listener_type, listener)

    def current_calls_for(self, listener_type: Hashable, listener: Any) -> int:
        """Calls recorded for a listener."""
        return self._inner.current_calls_for(listener_type, listener)

    def fire_event(self, listener_type: Any, action: Any) -> bool:
        """Record the fire (and optionally invoke listeners).

        Fires with a None action are ignored, like the real dispatcher.
        """
        if action is None:
            return False
        self.fired.append((listener_type, action))

        if self._call_listeners:
            return self._inner.fire_event(listener_type, action)
        return self._inner.listener_count(listener_type) > 0

    # Test helpers

    def has_fired(self, listener_type: Hashable) -> bool:
        """Check if the listener type was fired."""
        return any(fired_type == listener_type for fired_type, _ in self.fired)

    def fired_count(self, listener_type: Hashable) -> int:
        """Number of times the listener type was fired."""
        return sum(1 for fired_type, _ in self.fired if fired_type == listener_type)

    def get_actions(self, listener_type: Hashable) -> list[Any]:
        """Actions passed with each fire of the listener type, in order."""
        return [action for fired_type, action in self.fired if fired_type == listener_type]

    def reset(self) -> None:
        """Clear recorded fires and registered listeners."""
        self.fired.clear()
        self._inner.clear()

    def assert_fired(self, listener_type: Hashable) -> None:
        """Assert that the listener type was fired."""
        if not self.has_fired(listener_type):
            fired = [fired_type for fired_type, _ in self.fired]
            raise AssertionError(
                f"Expected listener type {listener_type!r} was not fired. Fired types: {fired}"
            )

    def assert_not_fired(self, listener_type: Hashable) -> None:
        """Assert that the listener type was NOT fired."""
        if self.has_fired(listener_type):
            raise AssertionError(
                f"Listener type {listener_type!r} was fired but should not have been"
            )
