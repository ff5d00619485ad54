"""
EventMaker — Listener
A registered (event name, handler) pair with its own identity.
"""

from __future__ import annotations

from collections.abc import Hashable
from typing import Any, Callable

from .errors import InvalidHandlerError

Handler = Callable[..., Any]


class Listener:
    """
    Two listeners for the same event and handler are still distinct:
    identity comes from a token created with the listener, never from
    its contents.
    """

    __slots__ = ("event", "_handler", "_token")

    def __init__(self, event: Hashable, handler: Handler) -> None:
        if not callable(handler):
            raise InvalidHandlerError(f"Listener handler for {event!r} must be callable")
        self.event = event
        self._handler = handler
        self._token = object()

    def same_identity_as(self, other: Listener) -> bool:
        """True when `other` is this very listener (same token)."""
        return isinstance(other, Listener) and self._token is other._token

    def has_event_name(self, event: Hashable) -> bool:
        """True when this listener was registered for `event`."""
        return self.event == event

    def invoke(self, *args: Any) -> None:
        # Handler errors propagate to the caller of emit()
        self._handler(*args)

    __call__ = invoke

    def describe(self) -> str:
        return f"L({self.event})"

    __str__ = describe

    def __repr__(self) -> str:
        return f"<Listener event={self.event!r} handler={getattr(self._handler, '__qualname__', self._handler)!r}>"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Listener):
            return NotImplemented
        return self.same_identity_as(other)

    def __hash__(self) -> int:
        return id(self._token)
