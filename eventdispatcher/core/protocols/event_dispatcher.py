"""EventDispatcher protocol for typed in-process listener fan-out.

Callers register listener objects under a listener type (usually the
listener's class or Protocol) and later fire the type with an action that
is applied to every registered listener.

Usage:
    # Registration (max_calls bounds how often the listener is invoked)
    dispatcher.add_listener(ProgressListener, progress_bar)
    dispatcher.add_listener(ProgressListener, one_shot, max_calls=1)

    # Firing
    dispatcher.fire_event(ProgressListener, lambda l: l.on_progress(0.5))
"""

from typing import (
    Any,
    Callable,
    Hashable,
    Optional,
    Protocol,
    TypeVar,
    overload,
    runtime_checkable,
)

from eventdispatcher.core.constants import INFINITE_CALLS

ListenerT = TypeVar("ListenerT")

# Action applied to each listener on fire; its return value is ignored
ListenerAction = Callable[[ListenerT], object]


@runtime_checkable
class EventDispatcher(Protocol):
    """Protocol for registering listeners by type and firing them.

    Lookups that miss (unknown type, unknown listener) return False or 0
    rather than raising. Only ``add_listener`` validates its arguments.
    """

    def add_listener(
        self, listener_type: Hashable, listener: Any, max_calls: int = INFINITE_CALLS
    ) -> bool:
        """Register ``listener`` under ``listener_type``.

        Args:
            listener_type: Key identifying the listener contract.
            listener: The listener object, compared by identity.
            max_calls: Positive budget, or -1 for unlimited.

        Returns:
            True if added, False if the listener was already registered.

        Raises:
            InvalidArgumentError: On a None argument or an invalid budget.
        """
        ...

    def remove_listener(self, listener_type: Hashable, listener: Any) -> bool:
        """Remove one listener. Returns True if it was registered."""
        ...

    def remove_listener_type(self, listener_type: Hashable) -> bool:
        """Remove every listener of a type. Returns True if the type existed."""
        ...

    def clear(self) -> None:
        """Remove all listeners of all types."""
        ...

    def listener_count(self, listener_type: Optional[Hashable] = None) -> int:
        """Listeners of ``listener_type``, or of all types when omitted."""
        ...

    def listener_type_count(self) -> int:
        """Number of listener types with at least one listener."""
        ...

    def listener_types(self) -> tuple[Hashable, ...]:
        """Snapshot of the registered listener types."""
        ...

    def has_listener(self, listener_type: Hashable, listener: Any) -> bool:
        """True if ``listener`` is registered under ``listener_type``."""
        ...

    def max_calls_for(self, listener_type: Hashable, listener: Any) -> int:
        """Budget of a listener, 0 if not registered."""
        ...

    def current_calls_for(self, listener_type: Hashable, listener: Any) -> int:
        """Calls recorded for a listener, 0 if not registered."""
        ...

    @overload
    def fire_event(
        self, listener_type: type[ListenerT], action: Optional[ListenerAction[ListenerT]]
    ) -> bool: ...

    @overload
    def fire_event(
        self, listener_type: Hashable, action: Optional[ListenerAction[Any]]
    ) -> bool: ...

    def fire_event(self, listener_type: Any, action: Any) -> bool:
        """Apply ``action`` to every listener of ``listener_type``.

        Returns:
            False if the type has no listeners or ``action`` is None,
            True otherwise.
        """
        ...
