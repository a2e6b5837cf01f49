"""Listener entry: one registered listener plus its call budget."""

from typing import Any, Optional

from eventdispatcher.core.constants import INFINITE_CALLS


class ListenerEntry:
    """A listener with its max-call budget and the number of calls so far.

    Two entries are equal iff they wrap the very same listener object;
    ``max_calls`` and ``current_calls`` are ignored by ``==`` and ``hash``.
    """

    __slots__ = ("listener", "max_calls", "current_calls")

    def __init__(self, listener: Any, max_calls: int = INFINITE_CALLS) -> None:
        """Wrap a listener. ``max_calls`` is validated by the dispatcher."""
        self.listener = listener
        self.max_calls = max_calls
        self.current_calls = 0

    @property
    def is_unlimited(self) -> bool:
        """True when the listener has no call budget."""
        return self.max_calls == INFINITE_CALLS

    @property
    def remaining_calls(self) -> Optional[int]:
        """Calls left before eviction, or None for unlimited listeners."""
        if self.is_unlimited:
            return None
        return self.max_calls - self.current_calls

    def record_call(self) -> None:
        """Count one invocation. Unlimited listeners are not counted."""
        if not self.is_unlimited:
            self.current_calls += 1

    def is_exhausted(self) -> bool:
        """True once a finite budget has been used up."""
        return not self.is_unlimited and self.current_calls == self.max_calls

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ListenerEntry):
            return NotImplemented
        return self.listener is other.listener

    def __hash__(self) -> int:
        return id(self.listener)

    def __repr__(self) -> str:
        return (
            f"ListenerEntry(listener={self.listener!r}, max_calls={self.max_calls}, "
            f"current_calls={self.current_calls})"
        )
