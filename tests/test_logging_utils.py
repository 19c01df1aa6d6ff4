"""Tests for logging setup and the tick line format."""

import logging
from datetime import datetime, timedelta

from pulse_logger.core.logging_utils import ColoredFormatter, format_tick_line, setup_logging


def test_format_tick_line():
    line = format_tick_line(
        now=datetime(2024, 5, 1, 12, 30, 45),
        message="Logger is running",
        count=7,
        uptime=timedelta(seconds=125.7),
        hostname="box1",
    )
    assert line == "[2024-05-01 12:30:45] Logger is running | count: 7 | uptime: 2m5s | host: box1"


def test_colored_formatter_keeps_record_unchanged():
    record = logging.LogRecord("x", logging.WARNING, __file__, 1, "hello %s", ("world",), None)
    out = ColoredFormatter(fmt="%(levelname)s %(message)s").format(record)
    assert "[WARNING]" in out
    assert out.endswith("hello world")
    assert record.levelname == "WARNING"


def test_setup_logging_levels():
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    try:
        setup_logging(debug=True)
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, ColoredFormatter)
        setup_logging(debug=False)
        assert root.level == logging.INFO
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)
