"""
Reconciliation registry: pending actions folded against an event stream.

The registry owns every PendingAction from submission until termination.
Each submission is first folded into the other pending actions' state, then
every action gets a chance to terminate (the termination sweep). Each event
is folded into every pending action's state and followed by a sweep.
"""

import itertools
import threading
from concurrent.futures import Future
from typing import Any, List, Optional

from .. import metrics
from ..logging_config import get_logger
from .canonical import lazy_describe
from .outcome import Outcome
from .pending import PendingAction
from .reducers import (
    ActionReducer,
    EventReducer,
    ResultProducer,
    identity_reducer,
    resolve_immediately,
)

logger = get_logger(__name__)


class ActionRegistry:
    """
    Ordered registry of pending actions.

    Usage:
        registry = ActionRegistry()
        future = registry.submit("a", 0, result_producer, event_reducer)
        registry.process_event({"value": 42})
        outcome = future.result()

    Registration order defines fold order. All public methods hold one
    re-entrant lock, so ticks from a timer thread are serialized with
    submissions and events from the caller's thread.
    """

    def __init__(self) -> None:
        self._pending: List[PendingAction] = []
        self._seq = itertools.count()
        self._lock = threading.RLock()

    def __len__(self) -> int:
        with self._lock:
            return sum(1 for pending in self._pending if not pending.inactive)

    def submit(
        self,
        action: Any = None,
        initial_state: Any = None,
        result_producer: Optional[ResultProducer] = None,
        event_reducer: Optional[EventReducer] = None,
        action_reducer: Optional[ActionReducer] = None,
    ) -> "Future[Outcome]":
        """
        Register a new action.

        Args:
            action: Opaque action payload
            initial_state: Starting state for this action
            result_producer: Termination decision (default: resolve immediately)
            event_reducer: Event fold (default: identity)
            action_reducer: Sibling-action fold (default: identity)

        Returns:
            Future completing with an Outcome (SUCCESS or INTERRUPTED), or
            failing with ActionRejectedError (ERROR)
        """
        with self._lock:
            for pending in self._pending:
                if not pending.inactive:
                    pending.fold_action(action)

            pending = PendingAction(
                seq=next(self._seq),
                action=action,
                state=initial_state,
                action_reducer=action_reducer or identity_reducer,
                event_reducer=event_reducer or identity_reducer,
                result_producer=result_producer or resolve_immediately,
            )
            pending.logger.debug("Submitted action %s", lazy_describe(action))
            self._pending.append(pending)
            metrics.track_submitted()
            metrics.track_pending_added()

            self._sweep()
            return pending.future

    def process_event(self, event: Any = None) -> None:
        """
        Fold an event into every pending action and run the termination sweep.

        Args:
            event: Opaque event payload (None for synthetic timer ticks)
        """
        with self._lock:
            metrics.track_event()
            for pending in self._pending:
                if not pending.inactive:
                    pending.fold_event(event)
            self._sweep()

    def list_pending(self) -> List[Any]:
        """Snapshot of pending action payloads, in registration order."""
        with self._lock:
            return [pending.action for pending in self._pending if not pending.inactive]

    def _sweep(self) -> None:
        """
        Evaluate every result producer, then drop retired actions.

        Retired actions are dropped even when a producer raises; the
        exception still propagates to the caller.
        """
        try:
            for pending in list(self._pending):
                if not pending.inactive:
                    pending.produce_result()
        finally:
            before = len(self._pending)
            self._pending = [pending for pending in self._pending if not pending.inactive]
            retired = before - len(self._pending)
            if retired:
                logger.debug("Retired %d action(s), %d pending", retired, len(self._pending))
                metrics.track_pending_retired(retired)
