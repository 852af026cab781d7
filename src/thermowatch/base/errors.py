"""Exception hierarchy for temperature monitoring."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .events import Subscription, TransitionEvent


class MonitorError(Exception):
    """Base class for all thermowatch errors."""


class InvalidThresholdsError(MonitorError):
    """Raised when the warning level is not strictly below emergency."""

    def __init__(self, warning_level: float, emergency_level: float) -> None:
        super().__init__(
            f"warning level {warning_level} must be below "
            f"emergency level {emergency_level}"
        )
        self.warning_level = warning_level
        self.emergency_level = emergency_level


class SourceReadError(MonitorError):
    """Raised when a temperature source fails in the middle of a run."""


class SubscriberError(MonitorError):
    """Raised when a handler fails and the monitor aborts the run.

    The original exception is available as ``__cause__``.
    """

    def __init__(
        self, event: "TransitionEvent", subscription: "Subscription"
    ) -> None:
        super().__init__(
            f"handler for {event.kind.value} failed on "
            f"temperature {event.value}"
        )
        self.event = event
        self.subscription = subscription
