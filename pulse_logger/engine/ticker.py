"""Periodic logger: one status line per tick plus every-10th / every-50th annotations."""

import asyncio
import logging
from datetime import datetime

from pulse_logger.config.settings import LoggerConfig
from pulse_logger.core.logging_utils import format_tick_line

logger = logging.getLogger(__name__)

INFO_EVERY = 10
WARN_EVERY = 50


class PeriodicLogger:
    """Fixed-rate status logger. The tick counter belongs to this object alone.

    Single running state: run() ticks until stop() is requested; a stopped logger never restarts.
    """

    def __init__(self, config: LoggerConfig):
        self.config = config
        self._count = 0
        self._running = False
        self._stop_event = asyncio.Event()

    @property
    def count(self) -> int:
        return self._count

    @property
    def running(self) -> bool:
        return self._running

    def tick(self) -> int:
        """Advance the counter and emit the status line (and annotations). Returns the new count."""
        self._count += 1
        count = self._count
        logger.info(
            format_tick_line(
                now=datetime.now().astimezone(),
                message=self.config.log_message,
                count=count,
                uptime=self.config.uptime(),
                hostname=self.config.hostname,
            )
        )
        if count % INFO_EVERY == 0:
            logger.info("INFO: %d log messages recorded", count)
        if count % WARN_EVERY == 0:
            logger.warning("WARN: this is a sample warning-level log line")
        return count

    async def _sleep_or_stop(self, delay: float) -> bool:
        """Wait up to delay seconds. True if stop was requested meanwhile."""
        try:
            await asyncio.wait_for(self._stop_event.wait(), timeout=delay)
        except asyncio.TimeoutError:
            return False
        return True

    async def run(self) -> None:
        """Tick every interval until stop(). First tick fires one interval after start."""
        if self._stop_event.is_set():
            return
        loop = asyncio.get_running_loop()
        interval = float(self.config.log_interval)
        next_deadline = loop.time() + interval
        self._running = True
        logger.info(
            "Periodic logger running (interval=%ss, host=%s)",
            self.config.log_interval,
            self.config.hostname,
        )
        try:
            while not self._stop_event.is_set():
                delay = next_deadline - loop.time()
                if delay > 0 and await self._sleep_or_stop(delay):
                    break
                self.tick()
                next_deadline += interval
                now = loop.time()
                if now >= next_deadline:
                    # Slow sink: drop the missed deadlines instead of bursting
                    skipped = int((now - next_deadline) // interval) + 1
                    next_deadline += skipped * interval
                    logger.debug("Tick loop behind schedule; skipped %d tick(s)", skipped)
        finally:
            self._running = False
            logger.info("Periodic logger stopped after %d tick(s)", self._count)

    def stop(self) -> None:
        self._stop_event.set()
