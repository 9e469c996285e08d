"""
Tests for engine configuration.
"""

import pytest

from helicopter.config import EngineConfig
from helicopter.core.errors import ConfigurationError


def test_defaults():
    config = EngineConfig.from_mapping(None)
    assert config == EngineConfig(timeout_ms=0, metrics_enabled=False, metrics_port=8080)


def test_from_mapping_reads_timeout_and_alias():
    assert EngineConfig.from_mapping({"timeout": 100}).timeout_ms == 100
    assert EngineConfig.from_mapping({"timeout_ms": 250}).timeout_ms == 250
    assert EngineConfig.from_mapping({"timeout": 0}).timeout_ms == 0


def test_from_mapping_ignores_unknown_keys():
    assert EngineConfig.from_mapping({"retries": 3}).timeout_ms == 0


@pytest.mark.parametrize("timeout", [-1, 1.5, "100", True])
def test_invalid_timeout_rejected(timeout):
    with pytest.raises(ConfigurationError):
        EngineConfig.from_mapping({"timeout": timeout})


def test_configuration_error_is_value_error():
    with pytest.raises(ValueError):
        EngineConfig(timeout_ms=-5)


def test_from_env(monkeypatch):
    monkeypatch.setenv("HELICOPTER_TIMEOUT_MS", "50")
    monkeypatch.setenv("HELICOPTER_METRICS_ENABLED", "true")
    monkeypatch.setenv("HELICOPTER_METRICS_PORT", "9100")

    config = EngineConfig.from_env()

    assert config.timeout_ms == 50
    assert config.metrics_enabled is True
    assert config.metrics_port == 9100


def test_from_env_defaults(monkeypatch):
    monkeypatch.delenv("HELICOPTER_TIMEOUT_MS", raising=False)
    monkeypatch.delenv("HELICOPTER_METRICS_ENABLED", raising=False)
    monkeypatch.delenv("HELICOPTER_METRICS_PORT", raising=False)

    assert EngineConfig.from_env() == EngineConfig()


def test_from_env_rejects_garbage(monkeypatch):
    monkeypatch.setenv("HELICOPTER_TIMEOUT_MS", "soon")
    with pytest.raises(ConfigurationError):
        EngineConfig.from_env()


@pytest.mark.parametrize("raw, expected", [("false", False), ("true", True), ("0", False), (True, True)])
def test_metrics_enabled_parsed_from_strings(raw, expected):
    assert EngineConfig.from_mapping({"metrics_enabled": raw}).metrics_enabled is expected


def test_metrics_enabled_rejects_garbage():
    with pytest.raises(ConfigurationError):
        EngineConfig.from_mapping({"metrics_enabled": "maybe"})


@pytest.mark.parametrize("port", ["http", -1, 70000, 80.5, True])
def test_invalid_metrics_port_rejected(port):
    with pytest.raises(ConfigurationError):
        EngineConfig.from_mapping({"metrics_port": port})


def test_metrics_port_accepts_digit_string():
    assert EngineConfig.from_mapping({"metrics_port": "9100"}).metrics_port == 9100


def test_from_env_rejects_bad_metrics_settings(monkeypatch):
    monkeypatch.setenv("HELICOPTER_TIMEOUT_MS", "0")
    monkeypatch.setenv("HELICOPTER_METRICS_ENABLED", "sometimes")
    with pytest.raises(ConfigurationError):
        EngineConfig.from_env()

    monkeypatch.setenv("HELICOPTER_METRICS_ENABLED", "false")
    monkeypatch.setenv("HELICOPTER_METRICS_PORT", "ninety")
    with pytest.raises(ConfigurationError):
        EngineConfig.from_env()
