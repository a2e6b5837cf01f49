"""Contextual logging for the event dispatcher.

Usage:
    from eventdispatcher.core.logging import logger

    registry_logger = logger.with_prefix("EventDispatcher: ").with_context(
        component="event_dispatcher"
    )
    registry_logger.debug("Registered listener")

Context dimensions are attached to each record as ``extra`` fields so
handlers installed by the embedding application can pick them up.
"""

import logging
from typing import Any, MutableMapping, Optional

from eventdispatcher.core.config import settings

_LOGGER_NAME = "eventdispatcher"


class ContextualLogger(logging.LoggerAdapter):
    """LoggerAdapter carrying a message prefix and structured dimensions."""

    def __init__(
        self,
        logger: logging.Logger,
        prefix: str = "",
        dimensions: Optional[dict[str, Any]] = None,
    ) -> None:
        """Wrap a stdlib logger.

        Args:
            logger: The underlying stdlib logger.
            prefix: Text prepended to every message.
            dimensions: Key/value context merged into each record's extras.
        """
        self.prefix = prefix
        self.dimensions: dict[str, Any] = dict(dimensions or {})
        super().__init__(logger, self.dimensions)

    def process(
        self, msg: Any, kwargs: MutableMapping[str, Any]
    ) -> tuple[Any, MutableMapping[str, Any]]:
        """Prefix the message and merge dimensions into ``extra``."""
        kwargs["extra"] = {**self.dimensions, **kwargs.get("extra", {})}
        return f"{self.prefix}{msg}", kwargs

    def with_prefix(self, prefix: str) -> "ContextualLogger":
        """Return a new logger with ``prefix`` appended to the current prefix."""
        return ContextualLogger(self.logger, self.prefix + prefix, self.dimensions)

    def with_context(self, **dimensions: Any) -> "ContextualLogger":
        """Return a new logger with extra context dimensions."""
        return ContextualLogger(self.logger, self.prefix, {**self.dimensions, **dimensions})


_base_logger = logging.getLogger(_LOGGER_NAME)
_base_logger.setLevel(settings.LOG_LEVEL.value)
# Library logger: output is up to the embedding application's handlers
_base_logger.addHandler(logging.NullHandler())

logger = ContextualLogger(_base_logger)
