"""
Tests for the engine facade and its factory.
"""

import time

import pytest

from helicopter import (
    ActionRejectedError,
    ConfigurationError,
    Engine,
    EngineConfig,
    OutcomeKind,
    create_engine,
)


def _never(action, state, callbacks):
    return None


def test_engine_without_timer_has_no_feeder():
    with create_engine() as engine:
        assert engine.feeder_handle is None
        assert engine.config.timeout_ms == 0
        outcome = engine.submit("action", "state").result(timeout=0)
        assert outcome.to_dict() == {"type": "SUCCESS", "action": "action", "state": "state"}


def test_timer_ticks_fail_action_after_elapsed_time():
    """Synthetic ticks alone drive a time-based rejection."""
    error_after_ms = 150

    def result_producer(action, state, callbacks):
        if state.get("elapsed", 0) > error_after_ms:
            callbacks.reject()

    def event_reducer(action, state, event):
        assert event is None
        state["elapsed"] = (time.monotonic() - state["start"]) * 1000
        return state

    with create_engine({"timeout": 20}) as engine:
        future = engine.submit("action", {"start": time.monotonic()}, result_producer, event_reducer)
        error = future.exception(timeout=5)

    assert isinstance(error, ActionRejectedError)
    assert error.outcome.kind is OutcomeKind.ERROR
    assert error.action == "action"
    assert error.state["elapsed"] > error_after_ms


def test_close_stops_feeder_and_leaves_actions_pending():
    engine = create_engine({"timeout": 10})
    future = engine.submit("open", None, _never)

    engine.close()
    engine.close()

    assert not engine.feeder_handle.active
    assert not future.done()
    assert engine.list_pending() == ["open"]


def test_engines_do_not_share_pending_actions():
    first = create_engine()
    second = create_engine()

    first.submit("only-first", None, _never)

    assert first.list_pending() == ["only-first"]
    assert second.list_pending() == []

    second.process_event("event")
    assert first.list_pending() == ["only-first"]


def test_process_event_reaches_registry():
    engine = Engine()

    def result_producer(action, state, callbacks):
        if state == 42:
            callbacks.resolve()

    future = engine.submit("a", 0, result_producer, lambda action, state, event: event["value"])
    for value in (10, 16, 100, 42, 19):
        engine.process_event({"value": value})

    assert future.result(timeout=0).state == 42
    assert engine.registry.list_pending() == []


def test_create_engine_accepts_config_object():
    config = EngineConfig(timeout_ms=0)
    with create_engine(config) as engine:
        assert engine.config is config


def test_create_engine_rejects_bad_timeout():
    with pytest.raises(ConfigurationError):
        create_engine({"timeout": -1})
    with pytest.raises(ConfigurationError):
        create_engine({"timeout": "100"})
    with pytest.raises(ConfigurationError):
        create_engine(["timeout", 100])
