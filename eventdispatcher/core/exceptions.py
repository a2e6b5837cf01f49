"""Shared exceptions module."""

from typing import Optional


class EventDispatcherException(Exception):
    """Base exception for the event dispatcher."""

    pass


class InvalidArgumentError(EventDispatcherException, ValueError):
    """Exception raised when a registration argument violates its contract.

    Raised before any state is touched, so a failed call leaves the
    dispatcher exactly as it was.
    """

    def __init__(self, message: Optional[str] = "Invalid argument"):
        """Create a new InvalidArgumentError instance.

        Args:
        ----
            message (str, optional): The error message. Has default message.

        """
        self.message = message
        super().__init__(self.message)
