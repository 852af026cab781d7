"""Emergency escalation and device shutdown."""

from typing import Callable, ClassVar

from pydantic import Field

from thermowatch.base.events import EventKind, TransitionEvent
from thermowatch.base.sink import Sink


class EmergencyShutdown(Sink):
    """Escalates emergencies and shuts the monitored device down.

    Every escalation sends an out-of-band notification, so repeated
    emergency samples keep the responders informed. The shutdown action
    runs at most once per instance; later escalations find the device
    already down and skip it.
    """

    event_kinds: ClassVar[tuple[EventKind, ...]] = (
        EventKind.REACHED_EMERGENCY,
    )

    escalation_count: int = Field(
        default=0, description="Number of escalations handled"
    )
    is_shut_down: bool = Field(
        default=False, description="Whether the shutdown action has run"
    )
    notifier: Callable[[TransitionEvent | None], None] | None = Field(
        default=None,
        exclude=True,
        description="Sends the out-of-band emergency notification",
    )
    shutdown_action: Callable[[], None] | None = Field(
        default=None,
        exclude=True,
        description="Performs the device shutdown sequence",
    )

    def escalate(self, event: TransitionEvent | None = None) -> None:
        """Notify emergency personnel and shut the device down once.

        Args:
            event: The emergency that triggered escalation, if known

        """
        self.escalation_count += 1
        self._logger.critical(
            "Sending out notifications to emergency services personnel"
        )
        if self.notifier is not None:
            self.notifier(event)

        if self.is_shut_down:
            self._logger.info("Device already shut down")
            return

        self._logger.critical("Shutting down device")
        if self.shutdown_action is not None:
            self.shutdown_action()
        self.is_shut_down = True

    def on_event(self, event: TransitionEvent) -> None:
        self.escalate(event)
