"""
EventMaker — Timer service
Schedule-after-delay and cancel, the only two timer operations the engine needs.
Delays are in milliseconds.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable, Protocol

from .errors import TimerUnavailableError

logger = logging.getLogger("eventmaker.timers")


class TimerService(Protocol):
    def schedule(self, callback: Callable[[], None], delay_ms: float) -> Any:
        """Run `callback` once after `delay_ms`. Returns a handle for cancel()."""
        ...

    def cancel(self, handle: Any) -> None:
        """Cancel a pending handle. Unknown, fired or None handles are ignored."""
        ...


class LoopTimers:
    """
    Timer service backed by an asyncio event loop.

    Uses the loop given at construction, otherwise the loop running at the
    time of the call. Callbacks run on that loop's thread, so the engine
    stays single-threaded.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop

    def _resolve_loop(self) -> asyncio.AbstractEventLoop:
        if self._loop is not None:
            return self._loop
        try:
            return asyncio.get_running_loop()
        except RuntimeError as exc:
            raise TimerUnavailableError(
                "No running event loop: pass a loop to LoopTimers or schedule from inside one"
            ) from exc

    def schedule(self, callback: Callable[[], None], delay_ms: float) -> asyncio.TimerHandle:
        delay = max(0.0, float(delay_ms)) / 1000
        handle = self._resolve_loop().call_later(delay, callback)
        logger.debug("Timer scheduled in %.1f ms", delay * 1000)
        return handle

    def cancel(self, handle: Any) -> None:
        if handle is not None:
            handle.cancel()
