"""
Outcome model for terminated actions.

An Outcome is the record delivered through an action's result handle.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict


class OutcomeKind(str, Enum):
    SUCCESS = "SUCCESS"
    INTERRUPTED = "INTERRUPTED"
    ERROR = "ERROR"


@dataclass(frozen=True)
class Outcome:
    """
    Immutable terminal outcome.

    Fields:
        kind: SUCCESS, INTERRUPTED or ERROR
        action: Echo of the submitted action payload
        state: Action state at the moment of termination
    """
    kind: OutcomeKind
    action: Any = None
    state: Any = None

    @property
    def is_failure(self) -> bool:
        return self.kind is OutcomeKind.ERROR

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.kind.value,
            "action": self.action,
            "state": self.state,
        }
