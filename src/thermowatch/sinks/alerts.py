"""Human-readable alert messages."""

import logging
from typing import ClassVar

from pydantic import Field

from thermowatch.base.events import EventKind, TransitionEvent
from thermowatch.base.sample import Thresholds
from thermowatch.base.sink import Sink


class AlertLog(Sink):
    """Informational sink that turns events into alert messages.

    Messages go to this sink's logger: warnings at WARNING, emergencies
    at CRITICAL and the all-clear at INFO. How they are shown (console,
    colors, journal) is up to the logging configuration.
    """

    event_kinds: ClassVar[tuple[EventKind, ...]] = (
        EventKind.REACHED_WARNING,
        EventKind.REACHED_EMERGENCY,
        EventKind.FELL_BELOW_WARNING,
    )

    thresholds: Thresholds = Field(
        description="Levels quoted in the alert text"
    )

    def format(self, event: TransitionEvent) -> str:
        """Return the alert text for an event."""
        warning = self.thresholds.warning_level
        emergency = self.thresholds.emergency_level
        if event.kind is EventKind.REACHED_EMERGENCY:
            return (
                f"Emergency alert: temperature {event.value} "
                f"(emergency level is {emergency} and above)"
            )
        if event.kind is EventKind.REACHED_WARNING:
            return (
                f"Warning alert: temperature {event.value} "
                f"(warning level is between {warning} and {emergency})"
            )
        return (
            f"Information alert: temperature {event.value} "
            f"fell below warning level {warning}"
        )

    def on_event(self, event: TransitionEvent) -> None:
        self._logger.log(_LEVELS[event.kind], self.format(event))


_LEVELS = {
    EventKind.REACHED_WARNING: logging.WARNING,
    EventKind.REACHED_EMERGENCY: logging.CRITICAL,
    EventKind.FELL_BELOW_WARNING: logging.INFO,
}
