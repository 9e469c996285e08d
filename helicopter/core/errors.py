"""
Exception types for the reconciliation engine.
"""


class HelicopterError(Exception):
    """Base class for engine errors."""
    pass


class ContractViolationError(HelicopterError):
    """Raised when a terminal callback fires on an action that already terminated."""
    pass


class ConfigurationError(HelicopterError, ValueError):
    """Raised when engine options are invalid."""
    pass


class ActionRejectedError(HelicopterError):
    """
    ERROR outcome delivered as the failure of a result handle.

    This is a defined outcome kind, not a system fault: a result producer
    called reject() on its action.
    """

    def __init__(self, outcome) -> None:
        super().__init__(f"Action rejected: {outcome.action!r}")
        self.outcome = outcome

    @property
    def action(self):
        return self.outcome.action

    @property
    def state(self):
        return self.outcome.state
