"""
EventMaker — Exceptions
Typed errors raised for programming mistakes. Listener and middleware
failures are never wrapped: they propagate out of emit() as raised.
"""


class EventMakerError(Exception):
    """Base error class for EventMaker."""


class InvalidHandlerError(EventMakerError, TypeError):
    """A listener handler or middleware function is not callable."""


class InvalidListenerError(EventMakerError, TypeError):
    """Something other than a Listener was passed where one is required."""


class TimerUnavailableError(EventMakerError, RuntimeError):
    """No event loop is available to run a scheduled callback."""
