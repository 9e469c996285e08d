"""
Engine configuration.

Options can come from a mapping (the create_engine() argument) or from the
environment.

Environment Variables:
    HELICOPTER_TIMEOUT_MS: Timer feeder interval in ms, 0 disables - default: 0
    HELICOPTER_METRICS_ENABLED: Start the metrics server (true/false) - default: false
    HELICOPTER_METRICS_PORT: HTTP port for /metrics - default: 8080
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from .core.errors import ConfigurationError


def _validate_timeout(value: Any) -> int:
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"timeout must be an integer number of milliseconds, got {value!r}")
    if value < 0:
        raise ConfigurationError(f"timeout must be non-negative, got {value}")
    return value


_TRUE = ("1", "true", "yes", "on")
_FALSE = ("0", "false", "no", "off", "")


def _validate_bool(value: Any, name: str) -> bool:
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE:
            return True
        if lowered in _FALSE:
            return False
    raise ConfigurationError(f"{name} must be a boolean, got {value!r}")


def _validate_port(value: Any, name: str) -> int:
    if value is None:
        return 8080
    if isinstance(value, str) and value.strip().isdigit():
        value = int(value)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"{name} must be an integer port, got {value!r}")
    if not 0 <= value <= 65535:
        raise ConfigurationError(f"{name} must be within 0-65535, got {value}")
    return value


@dataclass(frozen=True)
class EngineConfig:
    """
    Engine options.

    Fields:
        timeout_ms: Timer feeder interval in milliseconds (0 = no ticking)
        metrics_enabled: Start the Prometheus metrics server on creation
        metrics_port: Port for the metrics server
    """
    timeout_ms: int = 0
    metrics_enabled: bool = False
    metrics_port: int = 8080

    def __post_init__(self) -> None:
        _validate_timeout(self.timeout_ms)
        if not isinstance(self.metrics_enabled, bool):
            raise ConfigurationError(f"metrics_enabled must be a boolean, got {self.metrics_enabled!r}")
        _validate_port(self.metrics_port, "metrics_port")

    @staticmethod
    def from_mapping(options: Optional[Mapping[str, Any]] = None) -> "EngineConfig":
        """
        Build config from an options mapping.

        Recognized keys: timeout (alias timeout_ms), metrics_enabled,
        metrics_port. Unknown keys are ignored.
        """
        options = options or {}
        timeout = options.get("timeout", options.get("timeout_ms"))
        return EngineConfig(
            timeout_ms=_validate_timeout(timeout),
            metrics_enabled=_validate_bool(options.get("metrics_enabled"), "metrics_enabled"),
            metrics_port=_validate_port(options.get("metrics_port"), "metrics_port"),
        )

    @staticmethod
    def from_env() -> "EngineConfig":
        raw_timeout = os.getenv("HELICOPTER_TIMEOUT_MS", "0")
        try:
            timeout_ms = int(raw_timeout)
        except ValueError:
            raise ConfigurationError(f"HELICOPTER_TIMEOUT_MS must be an integer, got {raw_timeout!r}")
        return EngineConfig(
            timeout_ms=_validate_timeout(timeout_ms),
            metrics_enabled=_validate_bool(
                os.getenv("HELICOPTER_METRICS_ENABLED", "false"), "HELICOPTER_METRICS_ENABLED"
            ),
            metrics_port=_validate_port(
                os.getenv("HELICOPTER_METRICS_PORT", "8080"), "HELICOPTER_METRICS_PORT"
            ),
        )

    @staticmethod
    def coerce(config: Any = None) -> "EngineConfig":
        """Accept None, a mapping, or an EngineConfig."""
        if isinstance(config, EngineConfig):
            return config
        if config is None or isinstance(config, Mapping):
            return EngineConfig.from_mapping(config)
        raise ConfigurationError(f"Unsupported engine config: {config!r}")
