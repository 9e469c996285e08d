"""
Self-rescheduling timer feeder.

Each tick runs on a daemon threading.Timer and schedules the next one after
the callback returns, so drift accumulates across ticks.
"""

from __future__ import annotations

import threading
from typing import Callable, Optional

from ..core.errors import ContractViolationError
from ..logging_config import get_logger

logger = get_logger(__name__)


class FeederHandle:
    """Cancellation handle for a running feeder."""

    def __init__(self, interval_ms: int, on_tick: Callable[[], None]) -> None:
        self.interval_ms = interval_ms
        self._on_tick = on_tick
        self._lock = threading.Lock()
        self._timer: Optional[threading.Timer] = None
        self._cancelled = False
        self.ticks = 0

    @property
    def active(self) -> bool:
        return not self._cancelled

    def cancel(self) -> None:
        """Stop the feeder. No tick starts after this returns. Idempotent."""
        with self._lock:
            if self._cancelled:
                return
            self._cancelled = True
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None
        logger.info(f"Timer feeder stopped after {self.ticks} tick(s)")

    def _schedule(self) -> None:
        with self._lock:
            if self._cancelled:
                return
            timer = threading.Timer(self.interval_ms / 1000.0, self._fire)
            timer.daemon = True
            self._timer = timer
            timer.start()

    def _fire(self) -> None:
        with self._lock:
            if self._cancelled:
                return
            self.ticks += 1
        try:
            self._on_tick()
        except ContractViolationError:
            # Fatal: a result producer broke the terminal callback contract
            logger.critical("Timer feeder tick violated the action contract, stopping feeder")
            self.cancel()
            return
        except Exception:
            logger.exception("Timer feeder tick failed")
        self._schedule()


class TimerFeeder:
    """
    Periodic trigger for synthetic events.

    Usage:
        handle = TimerFeeder.start(100, lambda: registry.process_event(None))
        ...
        handle.cancel()
    """

    @staticmethod
    def start(interval_ms: int, on_tick: Callable[[], None]) -> Optional[FeederHandle]:
        """
        Start ticking every interval_ms milliseconds.

        Args:
            interval_ms: Tick interval; <= 0 disables the feeder
            on_tick: Zero-argument callback invoked on every tick

        Returns:
            FeederHandle, or None when disabled
        """
        if interval_ms <= 0:
            return None
        handle = FeederHandle(interval_ms, on_tick)
        handle._schedule()
        logger.info(f"Timer feeder started with interval {interval_ms}ms")
        return handle
