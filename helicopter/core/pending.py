"""
Pending action record and its terminal callbacks.
"""

from concurrent.futures import Future
from dataclasses import dataclass, field
from typing import Any

from .. import metrics
from ..logging_config import get_logger
from .canonical import lazy_describe
from .errors import ActionRejectedError, ContractViolationError
from .outcome import Outcome, OutcomeKind
from .reducers import ActionReducer, EventReducer, ResultProducer


@dataclass(eq=False)
class PendingAction:
    """
    One outstanding unit of work, owned by a registry until it terminates.

    Fields:
        seq: Registration sequence number within the owning registry
        action: Opaque payload supplied by the submitter
        state: Opaque derived progress, mutated only by this action's reducers
        action_reducer: Folds newly submitted sibling actions into state
        event_reducer: Folds incoming events into state
        result_producer: Decides termination after every state change
        future: Result handle held by the submitter
        inactive: False while pending, True once a terminal callback fired
    """
    seq: int
    action: Any
    state: Any
    action_reducer: ActionReducer
    event_reducer: EventReducer
    result_producer: ResultProducer
    future: "Future[Outcome]" = field(default_factory=Future)
    inactive: bool = False

    def __post_init__(self) -> None:
        self.logger = get_logger(__name__, trace_id=f"action-{self.seq}")
        self.callbacks = Terminator(self)
        # running futures cannot be cancelled by the submitter
        self.future.set_running_or_notify_cancel()

    def fold_action(self, incoming_action: Any) -> None:
        self.state = self.action_reducer(self.action, self.state, incoming_action)

    def fold_event(self, event: Any) -> None:
        self.state = self.event_reducer(self.action, self.state, event)

    def produce_result(self) -> None:
        self.result_producer(self.action, self.state, self.callbacks)

    def terminate(self, kind: OutcomeKind) -> Outcome:
        """
        Retire this action with the given outcome kind.

        Raises:
            ContractViolationError: If the action already terminated
        """
        verb, name = _VERBS[kind]
        if self.inactive:
            self.logger.critical("%s a non-active action %s", verb, lazy_describe(self.action))
            raise ContractViolationError(f"Tried to {name} a non-active action")

        self.inactive = True
        outcome = Outcome(kind=kind, action=self.action, state=self.state)
        if outcome.is_failure:
            self.future.set_exception(ActionRejectedError(outcome))
        else:
            self.future.set_result(outcome)
        metrics.track_terminated(kind.value)
        self.logger.debug(
            "%s action %s with state: %s", verb, lazy_describe(self.action), lazy_describe(self.state)
        )
        return outcome


_VERBS = {
    OutcomeKind.SUCCESS: ("Resolving", "resolve"),
    OutcomeKind.INTERRUPTED: ("Interrupting", "interrupt"),
    OutcomeKind.ERROR: ("Rejecting", "reject"),
}


class Terminator:
    """
    Terminal callbacks handed to a result producer.

    Exactly one of resolve(), interrupt() or reject() may fire per action;
    any further call raises ContractViolationError. Extra arguments are
    accepted and ignored.
    """

    __slots__ = ("_pending",)

    def __init__(self, pending: PendingAction) -> None:
        self._pending = pending

    @property
    def inactive(self) -> bool:
        return self._pending.inactive

    def resolve(self, *_: Any) -> bool:
        self._pending.terminate(OutcomeKind.SUCCESS)
        return True

    def interrupt(self, *_: Any) -> bool:
        self._pending.terminate(OutcomeKind.INTERRUPTED)
        return True

    def reject(self, *_: Any) -> bool:
        self._pending.terminate(OutcomeKind.ERROR)
        return True
