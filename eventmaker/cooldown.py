"""
EventMaker — Cooldown registry
Keys that stay "busy" for a fixed duration after being added.
Used by Middleware.cooldown() to rate-limit emissions.

Expiry is lazy: stale keys are dropped whenever the registry is touched,
so no timer or event loop is needed.
"""

from __future__ import annotations

import logging
import time
from typing import Callable

logger = logging.getLogger("eventmaker.cooldown")


class CooldownRegistry:
    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._expires: dict[str, float] = {}

    def _purge(self) -> None:
        now = self._clock()
        stale = [k for k, deadline in self._expires.items() if now >= deadline]
        for k in stale:
            del self._expires[k]

    def add(self, key: str, duration_ms: float) -> None:
        """Mark `key` busy for `duration_ms` milliseconds (replaces any previous expiry)."""
        self._expires[key] = self._clock() + max(0.0, float(duration_ms)) / 1000
        logger.debug("Cooldown started for %r (%s ms)", key, duration_ms)

    def contains(self, key: str) -> bool:
        self._purge()
        return key in self._expires

    __contains__ = contains

    def remove(self, key: str) -> bool:
        """Drop `key` early. Returns True if it was cooling down."""
        self._purge()
        return self._expires.pop(key, None) is not None

    def clear(self) -> None:
        """Remove all keys (for testing)."""
        self._expires.clear()

    def __len__(self) -> int:
        self._purge()
        return len(self._expires)


# Process-wide default shared by every engine
_default_registry = CooldownRegistry()


def get_registry() -> CooldownRegistry:
    return _default_registry


def clear() -> None:
    """Reset the process-wide registry (for testing)."""
    _default_registry.clear()
