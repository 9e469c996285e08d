"""
Helicopter

Reconciles concurrently outstanding actions against a single ordered stream of
events. Each action evolves its own state through injected reducers and
decides after every change whether it succeeded, was interrupted or failed.
"""

from .core import (
    ActionRegistry,
    ActionRejectedError,
    ConfigurationError,
    ContractViolationError,
    HelicopterError,
    Outcome,
    OutcomeKind,
)
from .config import EngineConfig
from .engine import Engine, create_engine

__version__ = "0.1.0"

__all__ = [
    "ActionRegistry",
    "ActionRejectedError",
    "ConfigurationError",
    "ContractViolationError",
    "HelicopterError",
    "Outcome",
    "OutcomeKind",
    "EngineConfig",
    "Engine",
    "create_engine",
]
