# EventMaker package

from .config import CONNECT, DISCONNECT
from .config import VERSION as __version__
from .cooldown import CooldownRegistry
from .engine import EventMaker
from .errors import (
    EventMakerError,
    InvalidHandlerError,
    InvalidListenerError,
    TimerUnavailableError,
)
from .listener import Handler, Listener
from .middleware import STOP, Middleware, MiddlewareFunction
from .models import ActionRecord, EventMakerOptions, EventStatus
from .timers import LoopTimers, TimerService

__all__ = [
    "__version__",
    "EventMaker",
    "EventMakerOptions",
    "EventStatus",
    "ActionRecord",
    "Listener",
    "Handler",
    "Middleware",
    "MiddlewareFunction",
    "STOP",
    "CooldownRegistry",
    "TimerService",
    "LoopTimers",
    "CONNECT",
    "DISCONNECT",
    "EventMakerError",
    "InvalidHandlerError",
    "InvalidListenerError",
    "TimerUnavailableError",
]
