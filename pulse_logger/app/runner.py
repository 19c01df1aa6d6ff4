"""Process runner: load config, print the startup banner, start the status server, run the periodic logger."""

import argparse
import asyncio
import logging
import signal
from typing import Any, Mapping, Optional, Sequence

from pulse_logger.config.settings import LoggerConfig, load_config
from pulse_logger.core.logging_utils import setup_logging
from pulse_logger.engine.ticker import PeriodicLogger
from pulse_logger.errors import PulseLoggerError
from pulse_logger.status_server.app import StatusServerHandle, start_status_server

logger = logging.getLogger(__name__)


def log_banner(config: LoggerConfig) -> None:
    logger.info("Pulse Logger starting...")
    logger.info("Configuration:")
    logger.info("  - log interval: %ss", config.log_interval)
    logger.info("  - log message: %s", config.log_message)
    logger.info("  - HTTP port: %s", config.server_port)
    logger.info("  - HTTP server enabled: %s", config.include_http)
    logger.info("  - hostname: %s", config.hostname)
    logger.info("Press Ctrl+C to stop")


def _register_stop_signals(loop: asyncio.AbstractEventLoop, periodic: PeriodicLogger) -> None:
    def _on_stop_signal(*_args: Any) -> None:
        logger.info("Received SIGTERM/SIGINT; stopping periodic logger")
        loop.call_soon_threadsafe(periodic.stop)

    for sig in (signal.SIGTERM, signal.SIGINT):
        try:
            loop.add_signal_handler(sig, _on_stop_signal)
        except (NotImplementedError, OSError, RuntimeError):
            pass  # add_signal_handler not supported on Windows or off the main thread


async def _run_main(config: LoggerConfig, server: Optional[StatusServerHandle]) -> int:
    """Run the logger until a stop signal; then shut the status server down."""
    periodic = PeriodicLogger(config)
    _register_stop_signals(asyncio.get_running_loop(), periodic)
    try:
        await periodic.run()
    finally:
        if server is not None:
            try:
                server.stop()
            except Exception as e:
                logger.exception("Status server shutdown failed: %s", e)
    return periodic.count


def run(environ: Optional[Mapping[str, str]] = None) -> int:
    """Entry: run the logger (and status server if enabled) until SIGTERM/SIGINT. Returns tick count."""
    config = load_config(environ)
    log_banner(config)
    server = start_status_server(config)
    return asyncio.run(_run_main(config, server))


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="pulse-logger",
        description="Periodic status logger with an optional HTTP status server.",
    )
    parser.add_argument("--debug", action="store_true", help="enable DEBUG logging")
    args = parser.parse_args(argv)
    setup_logging(debug=args.debug)

    try:
        run()
    except PulseLoggerError as e:
        logger.critical("Pulse Logger failed to start: %s", e)
        return 1
    return 0
