"""Pulse Logger: periodic status logger with an optional read-only HTTP status server."""

__version__ = "0.1.0"
