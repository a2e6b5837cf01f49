"""Listener bookkeeping: per-listener entries and per-type buckets."""

from eventdispatcher.core.listeners.bucket import ListenerBucket
from eventdispatcher.core.listeners.entry import ListenerEntry

__all__ = ["ListenerBucket", "ListenerEntry"]
