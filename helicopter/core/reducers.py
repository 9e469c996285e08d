"""
Reducer and result-producer strategies.

Every pending action carries three injected functions:
- ActionReducer: (action, state, incoming_action) -> new_state
- EventReducer: (action, state, incoming_event) -> new_state
- ResultProducer: (action, state, callbacks) -> None

Reducers must be pure and must not raise. A result producer decides
termination by calling exactly one of callbacks.resolve(), callbacks.interrupt()
or callbacks.reject(), or nothing to stay pending.
"""

from typing import Any, Callable

ActionReducer = Callable[[Any, Any, Any], Any]
EventReducer = Callable[[Any, Any, Any], Any]
ResultProducer = Callable[[Any, Any, Any], Any]


def identity_reducer(action: Any, state: Any, incoming: Any) -> Any:
    """Leave state unchanged."""
    return state


def resolve_immediately(action: Any, state: Any, callbacks: Any) -> Any:
    """Terminate with SUCCESS on the first sweep."""
    return callbacks.resolve()
