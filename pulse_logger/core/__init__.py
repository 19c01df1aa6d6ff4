"""Shared helpers: duration text and logging setup."""

from pulse_logger.core.durations import format_duration, truncate_to_seconds

__all__ = ["format_duration", "truncate_to_seconds"]
