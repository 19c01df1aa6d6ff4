"""Logging setup for the process and formatting of the periodic status line."""

import logging
import sys
from datetime import datetime, timedelta

from pulse_logger.core.durations import format_duration, truncate_to_seconds

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

# ANSI color codes
_RESET = "\033[0m"
_BOLD = "\033[1m"
_GRAY = "\033[90m"
_YELLOW = "\033[33m"
_RED = "\033[31m"
_CYAN = "\033[36m"

_LEVEL_COLORS = {
    logging.DEBUG: _GRAY,
    logging.INFO: _CYAN,
    logging.WARNING: _YELLOW,
    logging.ERROR: _RED + _BOLD,
    logging.CRITICAL: _RED + _BOLD,
}


class ColoredFormatter(logging.Formatter):
    """Formatter that adds colors per log level."""

    def format(self, record: logging.LogRecord) -> str:
        color = _LEVEL_COLORS.get(record.levelno, _RESET)
        # Copy so other handlers still see the plain level name
        record = logging.makeLogRecord(record.__dict__)
        record.levelname = f"{color}[{record.levelname}]{_RESET}"
        return super().format(record)


def setup_logging(debug: bool = False) -> None:
    """Configure colorful stdout logging with distinct styles per level."""
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        ColoredFormatter(
            fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
            datefmt=TIMESTAMP_FORMAT,
        )
    )
    logging.root.handlers.clear()
    logging.root.addHandler(handler)
    logging.root.setLevel(logging.DEBUG if debug else logging.INFO)
    # Request lines are noise next to the tick output
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


def format_tick_line(now: datetime, message: str, count: int, uptime: timedelta, hostname: str) -> str:
    """Status line for one tick: timestamp, message, counter, whole-second uptime, host."""
    return "[{ts}] {msg} | count: {count} | uptime: {up} | host: {host}".format(
        ts=now.strftime(TIMESTAMP_FORMAT),
        msg=message,
        count=count,
        up=format_duration(truncate_to_seconds(uptime)),
        host=hostname,
    )
