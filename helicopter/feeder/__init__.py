"""
Periodic synthetic-event feeder.

Delivers empty ticks on a fixed cadence so time-based result producers are
evaluated even when no real event source is active.
"""

from .timer import FeederHandle, TimerFeeder

__all__ = [
    "FeederHandle",
    "TimerFeeder",
]
