"""
EventMaker — Centralized configuration
All environment variables and constants in a single place.
"""

import os

# ── Logging ───────────────────────────────────────────────────────────────────

LOGGER_NAME = "eventmaker"

# Default for EventMaker(logs=None)
LOGS = os.getenv("EVENTMAKER_LOGS", "0") == "1"

# ANSI colours on the console handler
LOG_COLORS = os.getenv("EVENTMAKER_LOG_COLORS", "1") == "1"

# Level of the console handler installed by the first engine with logs on
LOG_LEVEL = os.getenv("EVENTMAKER_LOG_LEVEL", "DEBUG").upper()

# ── Reserved events ───────────────────────────────────────────────────────────

CONNECT = "connect"
DISCONNECT = "disconnect"

# ── Version ───────────────────────────────────────────────────────────────────

VERSION = "1.0.0"
