"""
EventMaker — Console logging
Colour-tagged diagnostic lines on top of the stdlib logging module.

Colour tags are display hints only:
  green  — default / success   (INFO)
  red    — alert               (WARNING)
  gray   — muted               (DEBUG)
"""

from __future__ import annotations

import logging
import sys

from . import config

logger = logging.getLogger(config.LOGGER_NAME)

LEVELS: dict[str, int] = {
    "green": logging.INFO,
    "red": logging.WARNING,
    "gray": logging.DEBUG,
}

ANSI: dict[str, str] = {
    "green": "\033[32m",
    "red": "\033[31m",
    "gray": "\033[90m",
}
RESET = "\033[0m"


class ColorFormatter(logging.Formatter):
    """Wraps the formatted line in the ANSI colour carried by the record."""

    def __init__(self, fmt: str = "%(message)s", colors: bool = True) -> None:
        super().__init__(fmt)
        self.colors = colors

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        color = getattr(record, "color", None)
        if not self.colors or color not in ANSI:
            return line
        return f"{ANSI[color]}{line}{RESET}"


def write(message: str, color: str = "green", log: logging.Logger | None = None) -> None:
    """Emit one diagnostic line. Unknown colour tags fall back to green."""
    if color not in LEVELS:
        color = "green"
    (log or logger).log(LEVELS[color], message, extra={"color": color})


def install_console_handler() -> bool:
    """
    Attach a coloured stderr handler to the package logger, once.
    Returns False when the logger already has handlers (the application
    configured logging itself).
    """
    if logger.handlers:
        return False
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(ColorFormatter(colors=config.LOG_COLORS))
    handler.setLevel(config.LOG_LEVEL)
    logger.addHandler(handler)
    if logger.level == logging.NOTSET:
        logger.setLevel(config.LOG_LEVEL)
    return True
