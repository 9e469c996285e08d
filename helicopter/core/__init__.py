"""
Core reconciliation primitives.

This module provides the building blocks of the engine:
- ActionRegistry: Pending actions folded against actions and events
- PendingAction: One outstanding action and its derived state
- Terminator: resolve / interrupt / reject callbacks for result producers
- Outcome: Terminal record delivered through a result handle
- Reducers: Default action/event reducers and result producer
"""

from .errors import (
    HelicopterError,
    ContractViolationError,
    ActionRejectedError,
    ConfigurationError,
)
from .outcome import Outcome, OutcomeKind
from .reducers import (
    ActionReducer,
    EventReducer,
    ResultProducer,
    identity_reducer,
    resolve_immediately,
)
from .pending import PendingAction, Terminator
from .registry import ActionRegistry
from .canonical import canonicalize, canonical_json_str, describe, lazy_describe

__all__ = [
    "HelicopterError",
    "ContractViolationError",
    "ActionRejectedError",
    "ConfigurationError",
    "Outcome",
    "OutcomeKind",
    "ActionReducer",
    "EventReducer",
    "ResultProducer",
    "identity_reducer",
    "resolve_immediately",
    "PendingAction",
    "Terminator",
    "ActionRegistry",
    "canonicalize",
    "canonical_json_str",
    "describe",
    "lazy_describe",
]
