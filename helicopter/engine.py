"""
Engine facade: one registry plus its optional timer feeder.

Usage:
    with create_engine({"timeout": 100}) as engine:
        future = engine.submit("a", 0, result_producer, event_reducer)
        engine.process_event({"value": 42})
        outcome = future.result(timeout=1)
"""

from concurrent.futures import Future
from typing import Any, List, Optional

from . import metrics
from .config import EngineConfig
from .core.outcome import Outcome
from .core.reducers import ActionReducer, EventReducer, ResultProducer
from .core.registry import ActionRegistry
from .feeder.timer import FeederHandle, TimerFeeder
from .logging_config import get_logger

logger = get_logger(__name__)


class Engine:
    """
    Independent reconciliation engine instance.

    Engines share no state; each owns its registry and feeder. close() stops
    the feeder but leaves pending actions unresolved.
    """

    def __init__(self, config: Optional[EngineConfig] = None) -> None:
        self.config = config or EngineConfig()
        self._registry = ActionRegistry()
        self._feeder_handle = TimerFeeder.start(self.config.timeout_ms, self._tick)

    @property
    def registry(self) -> ActionRegistry:
        return self._registry

    @property
    def feeder_handle(self) -> Optional[FeederHandle]:
        return self._feeder_handle

    def submit(
        self,
        action: Any = None,
        initial_state: Any = None,
        result_producer: Optional[ResultProducer] = None,
        event_reducer: Optional[EventReducer] = None,
        action_reducer: Optional[ActionReducer] = None,
    ) -> "Future[Outcome]":
        return self._registry.submit(
            action, initial_state, result_producer, event_reducer, action_reducer
        )

    def process_event(self, event: Any = None) -> None:
        self._registry.process_event(event)

    def list_pending(self) -> List[Any]:
        return self._registry.list_pending()

    def close(self) -> None:
        if self._feeder_handle is not None:
            self._feeder_handle.cancel()
        pending = len(self._registry)
        if pending:
            logger.info(f"Engine closed with {pending} action(s) still pending")

    def _tick(self) -> None:
        self._registry.process_event(None)

    def __enter__(self) -> "Engine":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()


def create_engine(config: Any = None) -> Engine:
    """
    Create an engine instance.

    Args:
        config: None, an options mapping ({"timeout": ms}) or EngineConfig

    Returns:
        Engine exposing submit, process_event and list_pending

    Raises:
        ConfigurationError: If options are invalid
    """
    engine_config = EngineConfig.coerce(config)
    metrics.start_metrics_server(
        enabled=engine_config.metrics_enabled, port=engine_config.metrics_port
    )
    return Engine(engine_config)
