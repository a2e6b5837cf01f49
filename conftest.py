"""Root conftest for pytest configuration and shared fixtures.

Tests live next to the code they cover (``<package>/tests/test_*.py``);
fixtures defined here are available to all of them.
"""

import os

import pytest

# ---------------------------------------------------------------------------
# Environment variables: must be set before any eventdispatcher import
# Uses setdefault so real env vars (CI) are never overridden.
# ---------------------------------------------------------------------------
os.environ.setdefault("EVENT_DISPATCHER_LOG_LEVEL", "DEBUG")


# ---------------------------------------------------------------------------
# Dispatcher fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def dispatcher():
    """Real InMemoryEventDispatcher with default settings."""
    from eventdispatcher.adapters.event_dispatcher.in_memory import InMemoryEventDispatcher

    return InMemoryEventDispatcher()


@pytest.fixture
def fake_event_dispatcher():
    """Fake EventDispatcher that records fires without calling listeners."""
    from eventdispatcher.adapters.event_dispatcher.fake import FakeEventDispatcher

    return FakeEventDispatcher()
