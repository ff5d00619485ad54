"""
EventMaker — Logging and options tests
Diagnostic lines only when logs are on, colour tags, option validation.
"""

import logging

import pytest
from pydantic import ValidationError

from eventmaker import EventMaker, EventMakerOptions, STOP
from eventmaker import config, logs


@pytest.fixture
def captured(caplog):
    caplog.set_level(logging.DEBUG, logger="eventmaker")
    return caplog


def _lines(caplog):
    return [r.getMessage() for r in caplog.records if r.name.startswith("eventmaker.engine")]


# ── Engine output ────────────────────────────────────────────────────────────


class TestEngineLogs:
    def test_silent_when_logs_off(self, captured, timers):
        bus = EventMaker(logs=False, timers=timers)
        bus.on("ping", lambda *a: None)
        bus.emit("ping", 1)
        bus.disconnect()
        assert _lines(captured) == []

    def test_lines_prefixed_with_name(self, captured, timers):
        bus = EventMaker(logs=True, name="bus", timers=timers)
        bus.on("ping", lambda *a: None)
        bus.emit("ping", 1, 2)
        lines = _lines(captured)
        assert "EventMaker(bus) | Listener for ping was registered" in lines
        assert "EventMaker(bus) | Accepted data for \"ping\": (1, 2)" in lines
        assert "EventMaker(bus) | Processed for 1 listeners" in lines

    def test_removal_count_logged(self, captured, timers):
        bus = EventMaker(logs=True, timers=timers)
        bus.on("ping", lambda *a: None)
        bus.once("ping", lambda *a: None)
        bus.remove_listeners_by_event("ping")
        assert 'EventMaker | 2 Listeners for "ping" were removed' in _lines(captured)

    def test_alerts_are_warnings(self, captured, timers):
        bus = EventMaker(logs=True, timers=timers)
        bus.middleware(lambda ev, action: STOP)
        bus.emit("ping")
        stopped = [r for r in captured.records if "stopped the process" in r.getMessage()]
        assert stopped[0].levelno == logging.WARNING
        assert stopped[0].color == "red"

    def test_disconnect_is_muted(self, captured, timers):
        bus = EventMaker(logs=True, timers=timers)
        bus.disconnect()
        muted = [r for r in captured.records if r.getMessage().endswith("| Disconnected")]
        assert muted[0].levelno == logging.DEBUG

    def test_idle_timeout_logged(self, captured, timers):
        bus = EventMaker(logs=True, timers=timers)
        bus.set_idle_disconnect_after(25)
        timers.advance(25)
        assert "EventMaker | No data processed for the last 25 ms" in _lines(captured)


# ── Formatter / writer ───────────────────────────────────────────────────────


class TestColorOutput:
    def _record(self, color):
        record = logging.LogRecord("eventmaker", logging.INFO, __file__, 1, "hello", None, None)
        record.color = color
        return record

    def test_formatter_wraps_in_ansi(self):
        line = logs.ColorFormatter().format(self._record("red"))
        assert line == "\033[31mhello\033[0m"

    def test_formatter_plain_when_disabled(self):
        assert logs.ColorFormatter(colors=False).format(self._record("green")) == "hello"

    def test_unknown_color_falls_back_to_green(self, captured):
        logs.write("odd tag", "purple")
        rec = [r for r in captured.records if r.getMessage() == "odd tag"][0]
        assert rec.color == "green"
        assert rec.levelno == logging.INFO

    def test_console_handler_installed_once(self, monkeypatch):
        monkeypatch.setattr(logs.logger, "handlers", [])
        monkeypatch.setattr(logs.logger, "level", logging.NOTSET)
        assert logs.install_console_handler() is True
        assert logs.install_console_handler() is False
        assert len(logs.logger.handlers) == 1
        assert isinstance(logs.logger.handlers[0].formatter, logs.ColorFormatter)


# ── Options ──────────────────────────────────────────────────────────────────


class TestOptions:
    def test_logs_default_from_config(self, monkeypatch):
        monkeypatch.setattr(config, "LOGS", True)
        assert EventMakerOptions().logs is True
        assert EventMakerOptions(logs=None).logs is True
        assert EventMakerOptions(logs=False).logs is False

    def test_name_stripped(self):
        assert EventMakerOptions(name="  bus ").name == "bus"
        assert EventMakerOptions(name="").name is None

    def test_name_too_long_rejected(self):
        with pytest.raises(ValidationError):
            EventMakerOptions(name="x" * 201)
