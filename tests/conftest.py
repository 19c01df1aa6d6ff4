"""Pytest fixtures for Pulse Logger tests."""

import socket
import sys
import time
from datetime import datetime
from pathlib import Path

import pytest

# Ensure project root is in path for pulse_logger imports
_project_root = Path(__file__).resolve().parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

from pulse_logger.config.settings import LoggerConfig  # noqa: E402


def make_config(**overrides) -> LoggerConfig:
    """Snapshot with test-friendly values; keyword args replace individual fields."""
    fields = {
        "log_interval": 1,
        "server_port": 8080,
        "log_message": "Logger is running",
        "include_http": True,
        "hostname": "box1",
        "start_time": datetime.now().astimezone(),
        "start_monotonic": time.monotonic(),
    }
    fields.update(overrides)
    return LoggerConfig(**fields)


@pytest.fixture
def config() -> LoggerConfig:
    return make_config()


@pytest.fixture
def free_port() -> int:
    """A TCP port that nothing listens on right now."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.bind(("127.0.0.1", 0))
        return s.getsockname()[1]
