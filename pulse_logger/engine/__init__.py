"""Periodic logger loop."""

from .ticker import PeriodicLogger

__all__ = ["PeriodicLogger"]
