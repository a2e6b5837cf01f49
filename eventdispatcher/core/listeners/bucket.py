"""Listener bucket: the entries registered under a single listener type."""

from typing import Any, Callable, Iterator

from eventdispatcher.core.constants import NOT_FOUND_CALLS
from eventdispatcher.core.listeners.entry import ListenerEntry


class ListenerBucket:
    """Set of listener entries keyed on listener identity.

    Entries are stored in a dict keyed by ``id(listener)``. The entry holds a
    reference to its listener, so the id cannot be reused while it is stored.

    The bucket never removes itself when it runs empty; the dispatcher that
    owns it drops the type key.
    """

    def __init__(self) -> None:
        """Initialize with no entries."""
        self._entries: dict[int, ListenerEntry] = {}

    def add(self, listener: Any, max_calls: int) -> bool:
        """Register a listener.

        Returns:
            True if the listener was added, False if it was already present.
            An existing entry keeps its original budget and call count.
        """
        key = id(listener)
        if key in self._entries:
            return False
        self._entries[key] = ListenerEntry(listener, max_calls)
        return True

    def remove(self, listener: Any) -> bool:
        """Remove a listener. Returns True if it was registered."""
        return self._entries.pop(id(listener), None) is not None

    def get(self, listener: Any) -> ListenerEntry | None:
        """Return the entry for ``listener``, or None."""
        return self._entries.get(id(listener))

    def count(self) -> int:
        """Number of registered listeners."""
        return len(self._entries)

    def max_calls_of(self, listener: Any) -> int:
        """Budget of ``listener``, or NOT_FOUND_CALLS if it is not registered."""
        entry = self.get(listener)
        return NOT_FOUND_CALLS if entry is None else entry.max_calls

    def current_calls_of(self, listener: Any) -> int:
        """Calls recorded for ``listener``, or NOT_FOUND_CALLS if not registered."""
        entry = self.get(listener)
        return NOT_FOUND_CALLS if entry is None else entry.current_calls

    def is_empty(self) -> bool:
        """True when no listeners are registered."""
        return not self._entries

    def listeners(self) -> tuple[Any, ...]:
        """Snapshot of the registered listener objects."""
        return tuple(entry.listener for entry in self)

    def fire(self, action: Callable[[Any], object]) -> int:
        """Invoke ``action`` once per listener, then evict exhausted entries.

        Iterates over a snapshot taken before the first call. If ``action``
        raises, the exception propagates: listeners already visited keep
        their recorded call, the rest are skipped and nothing is evicted.

        Returns:
            The number of listeners the action was invoked with.
        """
        snapshot = list(self._entries.values())
        for entry in snapshot:
            action(entry.listener)
            entry.record_call()

        for entry in snapshot:
            key = id(entry.listener)
            # The action may have removed or replaced this entry re-entrantly
            if entry.is_exhausted() and self._entries.get(key) is entry:
                del self._entries[key]
        return len(snapshot)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[ListenerEntry]:
        return iter(list(self._entries.values()))

    def __contains__(self, listener: object) -> bool:
        return id(listener) in self._entries

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ListenerBucket):
            return NotImplemented
        return self._entries.keys() == other._entries.keys()

    # Mutable container
    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"ListenerBucket(count={len(self._entries)})"
