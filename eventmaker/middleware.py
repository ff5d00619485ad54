"""
EventMaker — Middleware pipeline
emit --> middleware --> listener

Every middleware sees the event name and the ActionRecord of the current
emission. Returning STOP (False) aborts the emission; any other return
value, None included, lets the pipeline continue.
"""

from __future__ import annotations

from collections.abc import Hashable
from typing import Any, Callable

from .cooldown import CooldownRegistry, get_registry
from .errors import InvalidHandlerError
from .models import ActionRecord

MiddlewareFunction = Callable[[Hashable, ActionRecord], Any]

STOP = False


class Middleware:
    """
    Wraps one pipeline function.
    Create middlewares with EventMaker.middleware(), not directly.
    """

    __slots__ = ("_fn",)

    def __init__(self, fn: MiddlewareFunction) -> None:
        if not callable(fn):
            raise InvalidHandlerError("Middleware function must be callable")
        self._fn = fn

    def invoke(self, event: Hashable, action: ActionRecord) -> Any:
        return self._fn(event, action)

    __call__ = invoke

    def __repr__(self) -> str:
        return f"<Middleware {getattr(self._fn, '__qualname__', self._fn)!r}>"

    # ── Helpers for middleware authors ───────────────────────────────────────

    @staticmethod
    def cooldown(key: str, duration_ms: float, registry: CooldownRegistry | None = None) -> bool:
        """
        Returns True while `key` is cooling down. Otherwise starts a cooldown
        of `duration_ms` and returns False.

        Example — allow one "ping" every 3 seconds:
            @bus.middleware
            def throttle(event, action):
                if Middleware.cooldown(event, 3000):
                    return STOP
        """
        reg = registry if registry is not None else get_registry()
        if key in reg:
            return True
        reg.add(key, duration_ms)
        return False

    @staticmethod
    def filter_payload(action: ActionRecord, predicate: Callable[[Any, int], bool]) -> None:
        """Keep only the payload elements for which predicate(value, index) is true."""
        action.payload = [v for i, v in enumerate(action.payload) if predicate(v, i)]

    @staticmethod
    def map_payload(action: ActionRecord, transform: Callable[[Any, int], Any]) -> None:
        """Replace every payload element with transform(value, index)."""
        action.payload = [transform(v, i) for i, v in enumerate(action.payload)]
