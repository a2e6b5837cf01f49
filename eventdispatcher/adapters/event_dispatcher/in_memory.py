"""In-memory event dispatcher implementation.

Keeps one ListenerBucket per listener type and fans fired events out to the
listeners in-process, synchronously. Not thread-safe on its own; see
SynchronizedEventDispatcher for a locked wrapper.
"""

from typing import Any, Hashable, Optional, overload

from eventdispatcher.core.constants import (
    ARGUMENT_IS_NULL,
    ARGUMENT_LISTENER_TYPE,
    ARGUMENT_MAX_CALLS,
    INFINITE_CALLS,
    NOT_FOUND_CALLS,
)
from eventdispatcher.core.exceptions import InvalidArgumentError
from eventdispatcher.core.listeners import ListenerBucket
from eventdispatcher.core.logging import logger
from eventdispatcher.core.protocols.event_dispatcher import ListenerAction, ListenerT

dispatcher_logger = logger.with_prefix("EventDispatcher: ").with_context(
    component="event_dispatcher"
)


def _type_name(listener_type: Hashable) -> str:
    return getattr(listener_type, "__qualname__", repr(listener_type))


class InMemoryEventDispatcher:
    """In-memory implementation of the EventDispatcher protocol.

    Buckets are created on the first registration for a type and dropped as
    soon as they run empty, whether through removal or through listeners
    exhausting their call budget during a fire.

    Usage:
        dispatcher = InMemoryEventDispatcher()
        dispatcher.add_listener(SaveListener, autosave)
        dispatcher.add_listener(SaveListener, notifier, max_calls=1)
        dispatcher.fire_event(SaveListener, lambda listener: listener.on_save(doc))
    """

    def __init__(
        self,
        enforce_listener_types: bool = False,
        log_fire_events: bool = False,
    ) -> None:
        """Initialize an empty dispatcher.

        Args:
            enforce_listener_types: If True and the listener type is a class,
                reject listeners that are not instances of it.
            log_fire_events: If True, log every fire at DEBUG level.
        """
        self._buckets: dict[Hashable, ListenerBucket] = {}
        self._enforce_listener_types = enforce_listener_types
        self._log_fire_events = log_fire_events

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def add_listener(
        self, listener_type: Hashable, listener: Any, max_calls: int = INFINITE_CALLS
    ) -> bool:
        """Register ``listener`` under ``listener_type``.

        Args:
            listener_type: Key identifying the listener contract.
            listener: The listener object, compared by identity.
            max_calls: Positive number of calls before the listener is
                removed, or INFINITE_CALLS to keep it until removed explicitly.

        Returns:
            True if added, False if the listener was already registered
            under this type (its budget is left unchanged).

        Raises:
            InvalidArgumentError: If ``listener_type`` or ``listener`` is None,
                if ``max_calls`` is neither positive nor INFINITE_CALLS, or if
                listener type enforcement is on and the listener does not match.
        """
        if listener_type is None or listener is None:
            raise InvalidArgumentError(ARGUMENT_IS_NULL)
        if not _is_valid_max_calls(max_calls):
            raise InvalidArgumentError(ARGUMENT_MAX_CALLS)
        if self._enforce_listener_types:
            self._check_listener_type(listener_type, listener)

        bucket = self._buckets.get(listener_type)
        if bucket is None:
            bucket = self._buckets[listener_type] = ListenerBucket()

        added = bucket.add(listener, max_calls)
        if added:
            dispatcher_logger.debug(
                f"Registered listener for '{_type_name(listener_type)}' (max_calls={max_calls})"
            )
        return added

    def remove_listener(self, listener_type: Hashable, listener: Any) -> bool:
        """Remove one listener, dropping the type once it has no listeners left.

        Returns:
            True if the listener was registered under ``listener_type``.
        """
        bucket = self._buckets.get(listener_type)
        if bucket is None:
            return False

        removed = bucket.remove(listener)
        if removed:
            dispatcher_logger.debug(f"Removed listener for '{_type_name(listener_type)}'")
        self._drop_if_empty(listener_type, bucket)
        return removed

    def remove_listener_type(self, listener_type: Hashable) -> bool:
        """Remove every listener of ``listener_type``.

        Returns:
            True if the type had any listeners.
        """
        if self._buckets.pop(listener_type, None) is None:
            return False
        dispatcher_logger.debug(f"Removed listener type '{_type_name(listener_type)}'")
        return True

    def clear(self) -> None:
        """Remove all listeners of all types."""
        self._buckets.clear()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def listener_count(self, listener_type: Optional[Hashable] = None) -> int:
        """Count listeners of ``listener_type``, or of every type when omitted."""
        if listener_type is None:
            return sum(bucket.count() for bucket in self._buckets.values())
        bucket = self._buckets.get(listener_type)
        return 0 if bucket is None else bucket.count()

    def listener_type_count(self) -> int:
        """Number of listener types with at least one listener."""
        return len(self._buckets)

    def listener_types(self) -> tuple[Hashable, ...]:
        """Snapshot of the registered listener types."""
        return tuple(self._buckets)

    def has_listener(self, listener_type: Hashable, listener: Any) -> bool:
        """True if ``listener`` is registered under ``listener_type``."""
        bucket = self._buckets.get(listener_type)
        return bucket is not None and listener in bucket

    def max_calls_for(self, listener_type: Hashable, listener: Any) -> int:
        """Budget of a listener; NOT_FOUND_CALLS (0) if it is not registered."""
        bucket = self._buckets.get(listener_type)
        return NOT_FOUND_CALLS if bucket is None else bucket.max_calls_of(listener)

    def current_calls_for(self, listener_type: Hashable, listener: Any) -> int:
        """Calls recorded for a listener; NOT_FOUND_CALLS (0) if not registered.

        Unlimited listeners always report 0.
        """
        bucket = self._buckets.get(listener_type)
        return NOT_FOUND_CALLS if bucket is None else bucket.current_calls_of(listener)

    # ------------------------------------------------------------------
    # Firing
    # ------------------------------------------------------------------

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

        Each listener is invoked once, then its call is recorded. Listeners
        whose budget is used up are removed after the pass, and the type is
        dropped if none remain.

        If ``action`` raises, the exception propagates to the caller.
        Listeners visited before the failure keep their recorded call; the
        remaining listeners are not invoked.

        Returns:
            False if the type has no listeners or ``action`` is None
            (nothing happens), True otherwise.
        """
        bucket = self._buckets.get(listener_type)
        if bucket is None or action is None:
            return False

        try:
            invoked = bucket.fire(action)
        except Exception as e:
            dispatcher_logger.warning(
                f"Listener action failed for '{_type_name(listener_type)}': "
                f"{type(e).__name__}: {e}"
            )
            raise
        finally:
            self._drop_if_empty(listener_type, bucket)

        if self._log_fire_events:
            dispatcher_logger.debug(
                f"Fired '{_type_name(listener_type)}' to {invoked} listeners, "
                f"{bucket.count()} remaining"
            )
        return True

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _drop_if_empty(self, listener_type: Hashable, bucket: ListenerBucket) -> None:
        # A re-entrant action may already have replaced the bucket for this type
        if bucket.is_empty() and self._buckets.get(listener_type) is bucket:
            del self._buckets[listener_type]
            dispatcher_logger.debug(f"Dropped empty listener type '{_type_name(listener_type)}'")

    @staticmethod
    def _check_listener_type(listener_type: Hashable, listener: Any) -> None:
        if not isinstance(listener_type, type):
            return
        try:
            matches = isinstance(listener, listener_type)
        except TypeError:
            # Protocols without @runtime_checkable cannot be checked at runtime
            return
        if not matches:
            raise InvalidArgumentError(ARGUMENT_LISTENER_TYPE)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, InMemoryEventDispatcher):
            return NotImplemented
        return self._buckets == other._buckets

    # Mutable container
    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"InMemoryEventDispatcher(listener_types={self.listener_type_count()}, "
            f"listeners={self.listener_count()})"
        )


def _is_valid_max_calls(max_calls: object) -> bool:
    if isinstance(max_calls, bool) or not isinstance(max_calls, int):
        return False
    return max_calls > 0 or max_calls == INFINITE_CALLS
