"""
Tests for the timer feeder.
"""

import threading
import time

from helicopter.core.errors import ContractViolationError
from helicopter.feeder import FeederHandle, TimerFeeder


def test_non_positive_interval_disables_feeder():
    calls = []

    assert TimerFeeder.start(0, lambda: calls.append(1)) is None
    assert TimerFeeder.start(-10, lambda: calls.append(1)) is None

    time.sleep(0.05)
    assert calls == []


def test_feeder_ticks_repeatedly():
    ticked = threading.Event()
    count = []

    def on_tick():
        count.append(1)
        if len(count) >= 3:
            ticked.set()

    handle = TimerFeeder.start(10, on_tick)
    try:
        assert isinstance(handle, FeederHandle)
        assert ticked.wait(timeout=5)
        assert handle.ticks >= 3
    finally:
        handle.cancel()


def test_cancel_stops_ticking():
    count = []
    handle = TimerFeeder.start(10, lambda: count.append(1))

    time.sleep(0.05)
    handle.cancel()
    assert not handle.active

    # Let any tick already in flight finish
    time.sleep(0.05)
    settled = len(count)
    time.sleep(0.1)
    assert len(count) == settled


def test_cancel_is_idempotent():
    handle = TimerFeeder.start(1000, lambda: None)
    handle.cancel()
    handle.cancel()
    assert not handle.active
    assert handle.ticks == 0


def test_failing_tick_does_not_stop_feeder():
    recovered = threading.Event()
    calls = []

    def on_tick():
        calls.append(1)
        if len(calls) == 1:
            raise RuntimeError("tick failed")
        recovered.set()

    handle = TimerFeeder.start(10, on_tick)
    try:
        assert recovered.wait(timeout=5)
    finally:
        handle.cancel()


def test_contract_violation_stops_feeder():
    """A tick breaking the terminal callback contract is fatal to the feeder."""
    count = []

    def on_tick():
        count.append(1)
        raise ContractViolationError("Tried to resolve a non-active action")

    handle = TimerFeeder.start(10, on_tick)
    try:
        time.sleep(0.2)
        assert not handle.active
        assert len(count) == 1
        assert handle.ticks == 1
    finally:
        handle.cancel()
