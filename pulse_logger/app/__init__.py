"""Process entry: startup banner, status server, periodic logger."""

from pulse_logger.app.runner import main, run

__all__ = ["main", "run"]
