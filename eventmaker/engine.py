"""
EventMaker — Dispatch engine
Listener registry, middleware pipeline, emission and the idle-disconnect
state machine.

Everything runs synchronously inside emit(). The only deferred work is the
idle timer and the delayed connect()/disconnect() forms, scheduled on a
TimerService (asyncio loop by default).
"""

from __future__ import annotations

import logging
from collections.abc import Hashable
from typing import Any

from . import config
from .errors import InvalidListenerError
from .listener import Handler, Listener
from .logs import install_console_handler, write
from .middleware import STOP, Middleware, MiddlewareFunction
from .models import ActionRecord, EventMakerOptions, EventStatus
from .timers import LoopTimers, TimerService

logger = logging.getLogger("eventmaker.engine")


def _is_duration(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class EventMaker:
    """
    In-process event bus.

    Usage:
        bus = EventMaker(logs=True, name="bus")
        bus.on("ping", lambda *args: print(args))
        bus.emit("ping", 1, 2)

    The reserved events "connect" and "disconnect" are emitted by the engine
    itself with the engine as sole argument.
    """

    def __init__(
        self,
        *,
        logs: bool | None = None,
        name: str | None = None,
        timers: TimerService | None = None,
    ) -> None:
        options = EventMakerOptions(logs=logs, name=name)
        self.name = options.name
        self._logs = options.logs
        self._status = EventStatus.IDLE
        self._idle_after: float | None = None
        self._idle_timer: Any = None
        self._timers: TimerService = timers if timers is not None else LoopTimers()
        self._listeners: list[Listener] = []
        self._listeners_once: list[Listener] = []
        self._middlewares: list[Middleware] = []
        if self._logs:
            install_console_handler()

    # ── Listeners ────────────────────────────────────────────────────────────

    @property
    def listeners(self) -> list[Listener]:
        """Snapshot: persistent listeners first, then one-shot listeners."""
        return [*self._listeners, *self._listeners_once]

    def create_listener(self, event: Hashable, handler: Handler) -> Listener:
        """Build a listener without registering it."""
        return Listener(event, handler)

    def add_listener(self, listener: Listener, once: bool = False) -> Listener:
        """Register a pre-built listener. Returns the same object."""
        if not isinstance(listener, Listener):
            raise InvalidListenerError(f"Expected a Listener, got {type(listener).__name__}")
        (self._listeners_once if once else self._listeners).append(listener)
        self._log(f"Listener for {listener.event} was registered")
        return listener

    def on(self, event: Hashable, handler: Handler) -> Listener:
        """Register a persistent listener and return it (keep it to remove it later)."""
        return self.add_listener(self.create_listener(event, handler))

    def once(self, event: Hashable, handler: Handler) -> Listener:
        """Register a listener that is removed after its first invocation."""
        return self.add_listener(self.create_listener(event, handler), once=True)

    def remove_listener(self, listener: Listener) -> None:
        self._listeners = [lst for lst in self._listeners if not lst.same_identity_as(listener)]
        self._listeners_once = [lst for lst in self._listeners_once if not lst.same_identity_as(listener)]
        self._log(f'Listener "{listener}" was removed')

    def remove_listeners_by_event(self, event: Hashable) -> int:
        """Remove every listener registered for `event`. Returns how many were removed."""
        old_count = len(self._listeners) + len(self._listeners_once)
        self._listeners = [lst for lst in self._listeners if not lst.has_event_name(event)]
        self._listeners_once = [lst for lst in self._listeners_once if not lst.has_event_name(event)]
        removed = old_count - len(self._listeners) - len(self._listeners_once)
        self._log(f'{removed} Listeners for "{event}" were removed')
        return removed

    def remove_all_listeners(self) -> None:
        self._listeners = []
        self._listeners_once = []
        self._log("All listeners were removed")

    # ── Middlewares ──────────────────────────────────────────────────────────

    def middleware(self, fn: MiddlewareFunction) -> Middleware:
        """Append a pipeline function run before listeners on every emission."""
        mid = Middleware(fn)
        self._middlewares.append(mid)
        self._log("Middleware function was registered")
        return mid

    # ── Emission ─────────────────────────────────────────────────────────────

    def emit(self, event: Hashable, *args: Any) -> int:
        """
        Dispatch `event` with `args`. Returns the number of listeners invoked.

        While disconnected, emissions are suppressed only if at least one
        listener is registered (on any event).
        Listener and middleware exceptions propagate to the caller.
        """
        if self.is_disconnected() and (self._listeners or self._listeners_once):
            self._log("Emit failed (disconnected)", "red")
            return 0

        self._log(f'Accepted data for "{event}": {args}')
        action = ActionRecord(payload=list(args))

        for mid in self._middlewares:
            if mid.invoke(event, action) is STOP:
                self._log("Middleware Function stopped the process", "red")
                return 0

        self._status = EventStatus.PROCESSING

        # Snapshots: handlers may register, remove or emit reentrantly
        matching = [lst for lst in self._listeners if lst.has_event_name(event)]
        for lst in matching:
            lst.invoke(*action.payload)

        matching_once = [lst for lst in self._listeners_once if lst.has_event_name(event)]
        fired = set(matching_once)
        try:
            for lst in matching_once:
                lst.invoke(*action.payload)
        finally:
            # One-shot listeners are dropped even when a handler raised
            self._listeners_once = [lst for lst in self._listeners_once if lst not in fired]

        count = len(matching) + len(matching_once)
        if not self.is_disconnected():
            self._status = EventStatus.IDLE
        if count > 0:
            self._rearm_idle_timer()
        self._log(f"Processed for {count} listeners")
        return count

    # ── Status ───────────────────────────────────────────────────────────────

    @property
    def status(self) -> EventStatus:
        return self._status

    def is_processing(self) -> bool:
        return self._status is EventStatus.PROCESSING

    def is_idling(self) -> bool:
        return self._status is EventStatus.IDLE

    def is_disconnected(self) -> bool:
        return self._status is EventStatus.DISCONNECTED

    # ── Connection lifecycle ─────────────────────────────────────────────────

    def set_idle_disconnect_after(self, duration_ms: float) -> EventMaker:
        """
        Disconnect automatically after `duration_ms` without a dispatch that
        reached at least one listener. Non-numeric values are ignored, the
        timer is re-armed either way.
        """
        if _is_duration(duration_ms):
            self._idle_after = duration_ms
            self._log(f"Idling time was set: {duration_ms} ms")
        self._rearm_idle_timer()
        return self

    def disconnect(self, delay_ms: float | None = None) -> None:
        """Disconnect now, or after `delay_ms` milliseconds."""
        if _is_duration(delay_ms):
            self._timers.schedule(self.disconnect, delay_ms)
            return
        self._idle_timer = None
        self.emit(config.DISCONNECT, self)
        self._status = EventStatus.DISCONNECTED
        self._log("Disconnected", "gray")

    def connect(self, delay_ms: float | None = None) -> None:
        """Reconnect now, or after `delay_ms` milliseconds."""
        if _is_duration(delay_ms):
            self._timers.schedule(self.connect, delay_ms)
            return
        self.emit(config.CONNECT, self)
        self._status = EventStatus.IDLE
        self._log("Connected", "gray")
        self._rearm_idle_timer()

    def _rearm_idle_timer(self) -> None:
        if self._idle_after is None:
            return
        self._timers.cancel(self._idle_timer)
        self._idle_timer = self._timers.schedule(self._on_idle, self._idle_after)

    def _on_idle(self) -> None:
        self.disconnect()
        self._log(f"No data processed for the last {self._idle_after} ms", "red")

    # ── Output ───────────────────────────────────────────────────────────────

    def _log(self, msg: str, color: str = "green") -> None:
        if self._logs:
            write(f"{self} | {msg}", color, logger)

    def __str__(self) -> str:
        return f"EventMaker({self.name})" if self.name else "EventMaker"

    def __repr__(self) -> str:
        return f"<{self} status={self._status.value} listeners={len(self._listeners) + len(self._listeners_once)}>"
