"""Tests for the process runner: exit codes, banner, signal-driven stop."""

import logging
import os
import signal
import socket
import sys
import threading

import pytest

from pulse_logger.app import runner
from conftest import make_config


@pytest.fixture(autouse=True)
def _keep_pytest_logging(monkeypatch):
    # setup_logging replaces root handlers, which would detach caplog
    monkeypatch.setattr(runner, "setup_logging", lambda debug=False: None)


def test_main_returns_1_on_config_error(monkeypatch):
    monkeypatch.setenv("LOG_INTERVAL", "0")
    assert runner.main([]) == 1


def test_main_returns_1_on_oversized_interval(monkeypatch):
    monkeypatch.setenv("LOG_INTERVAL", "9" * 400)
    assert runner.main([]) == 1


def test_main_returns_1_when_port_busy(monkeypatch):
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as busy:
        busy.bind(("0.0.0.0", 0))
        busy.listen()
        monkeypatch.setenv("SERVER_PORT", str(busy.getsockname()[1]))
        monkeypatch.setenv("INCLUDE_HTTP", "true")
        monkeypatch.setenv("LOG_INTERVAL", "1")
        assert runner.main([]) == 1


def test_banner_lists_configuration(caplog):
    caplog.set_level(logging.INFO, logger="pulse_logger.app.runner")
    runner.log_banner(make_config(hostname="box1", log_interval=2))
    text = "\n".join(r.getMessage() for r in caplog.records)
    assert "log interval: 2s" in text
    assert "hostname: box1" in text
    assert "Press Ctrl+C to stop" in text


@pytest.mark.skipif(sys.platform == "win32", reason="loop signal handlers are Unix only")
def test_run_stops_on_sigterm():
    timer = threading.Timer(1.5, os.kill, args=(os.getpid(), signal.SIGTERM))
    timer.start()
    try:
        count = runner.run({"LOG_INTERVAL": "1", "INCLUDE_HTTP": "false", "HOSTNAME": "box1"})
    finally:
        timer.cancel()
    assert count >= 1
