"""Factory for building a configured event dispatcher.

Usage:
    from eventdispatcher.core.factory import create_event_dispatcher

    dispatcher = create_event_dispatcher()            # from env settings
    dispatcher = create_event_dispatcher(Settings(THREAD_SAFE=True))
"""

from typing import Optional

from eventdispatcher.adapters.event_dispatcher.in_memory import InMemoryEventDispatcher
from eventdispatcher.adapters.event_dispatcher.synchronized import SynchronizedEventDispatcher
from eventdispatcher.core.config import Settings, settings as default_settings
from eventdispatcher.core.protocols.event_dispatcher import EventDispatcher


def create_event_dispatcher(settings: Optional[Settings] = None) -> EventDispatcher:
    """Create an event dispatcher wired from settings.

    The in-memory dispatcher is wrapped in a SynchronizedEventDispatcher
    when THREAD_SAFE is enabled.
    """
    settings = settings or default_settings

    dispatcher: EventDispatcher = InMemoryEventDispatcher(
        enforce_listener_types=settings.ENFORCE_LISTENER_TYPES,
        log_fire_events=settings.LOG_FIRE_EVENTS,
    )
    if settings.THREAD_SAFE:
        dispatcher = SynchronizedEventDispatcher(dispatcher)
    return dispatcher
