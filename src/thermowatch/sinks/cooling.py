"""On/off cooling actuator."""

from typing import Callable, ClassVar

from pydantic import Field

from thermowatch.base.events import EventKind, TransitionEvent
from thermowatch.base.sink import Sink


class CoolingMechanism(Sink):
    """A cooling device that is either running or not.

    Reaching the warning or emergency level switches cooling on;
    falling back below the warning level switches it off. Both
    operations are idempotent: the switch hook only runs when the state
    actually changes, so repeated warning samples do not hammer the
    hardware.
    """

    event_kinds: ClassVar[tuple[EventKind, ...]] = (
        EventKind.REACHED_WARNING,
        EventKind.REACHED_EMERGENCY,
        EventKind.FELL_BELOW_WARNING,
    )

    active: bool = Field(
        default=False, description="Whether cooling is currently on"
    )
    switch_count: int = Field(
        default=0, description="Number of real on/off changes"
    )
    switch: Callable[[bool], None] | None = Field(
        default=None,
        exclude=True,
        description="Hardware hook called with the new on/off state",
    )

    def activate(self) -> None:
        """Switch cooling on if it is off."""
        self._set_active(True)

    def deactivate(self) -> None:
        """Switch cooling off if it is on."""
        self._set_active(False)

    def on_event(self, event: TransitionEvent) -> None:
        if event.kind is EventKind.FELL_BELOW_WARNING:
            self.deactivate()
        else:
            self.activate()

    def _set_active(self, active: bool) -> None:
        if self.active == active:
            return
        self._logger.info(
            f"Switching cooling mechanism {'on' if active else 'off'}"
        )
        # Hook first: a failed switch leaves the recorded state untouched
        if self.switch is not None:
            self.switch(active)
        self.active = active
        self.switch_count += 1
