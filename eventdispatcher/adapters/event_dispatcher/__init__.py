"""Event dispatcher adapter.

Implements the EventDispatcher protocol with in-memory, per-type listener
buckets, plus a locked wrapper and a recording fake.
"""

from eventdispatcher.adapters.event_dispatcher.fake import FakeEventDispatcher
from eventdispatcher.adapters.event_dispatcher.in_memory import InMemoryEventDispatcher
from eventdispatcher.adapters.event_dispatcher.synchronized import SynchronizedEventDispatcher

__all__ = ["InMemoryEventDispatcher", "SynchronizedEventDispatcher", "FakeEventDispatcher"]
