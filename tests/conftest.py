"""
Shared fixtures: a manual timer service and cooldown registry reset.
"""

import pytest

from eventmaker import cooldown


class ManualTimers:
    """TimerService driven by advance(); no event loop involved."""

    def __init__(self) -> None:
        self.now = 0.0
        self._pending: dict[int, tuple[float, object]] = {}
        self._next_id = 0

    def schedule(self, callback, delay_ms):
        self._next_id += 1
        self._pending[self._next_id] = (self.now + max(0.0, delay_ms), callback)
        return self._next_id

    def cancel(self, handle) -> None:
        self._pending.pop(handle, None)

    @property
    def pending(self) -> int:
        return len(self._pending)

    def advance(self, ms: float) -> None:
        """Move the clock forward, firing due callbacks in deadline order."""
        target = self.now + ms
        while True:
            due = [(at, hid) for hid, (at, _) in self._pending.items() if at <= target]
            if not due:
                break
            at, hid = min(due)
            _, callback = self._pending.pop(hid)
            self.now = at
            callback()
        self.now = target


@pytest.fixture
def timers():
    return ManualTimers()


@pytest.fixture(autouse=True)
def _reset_cooldowns():
    """Reset the process-wide cooldown registry between tests."""
    cooldown.clear()
    yield
    cooldown.clear()


@pytest.fixture
def anyio_backend():
    return "asyncio"
