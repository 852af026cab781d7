"""Transition events and subscription handles."""

from enum import Enum
from typing import Callable
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field

from .sample import TemperatureSample


class EventKind(str, Enum):
    """Kinds of transition a monitor can publish."""

    REACHED_WARNING = "reached_warning"
    REACHED_EMERGENCY = "reached_emergency"
    FELL_BELOW_WARNING = "fell_below_warning"


class TransitionEvent(BaseModel):
    """A classification change published to subscribers.

    Events are created once per qualifying sample and handed to every
    subscriber of their kind. They are immutable so one handler cannot
    alter what the next handler sees.
    """

    model_config = ConfigDict(frozen=True)

    kind: EventKind = Field(description="Which boundary was crossed")
    value: float = Field(description="Temperature of the triggering sample")
    timestamp: int = Field(
        description="Timestamp of the triggering sample in nanoseconds"
    )

    @classmethod
    def from_sample(
        cls, kind: EventKind, sample: TemperatureSample
    ) -> "TransitionEvent":
        """Build an event carrying the value and time of a sample."""
        return cls(kind=kind, value=sample.value, timestamp=sample.timestamp)


Handler = Callable[[TransitionEvent], None]


class Subscription(BaseModel):
    """Handle returned by SensorMonitor.subscribe().

    Pass it back to SensorMonitor.unsubscribe() to remove the handler.
    Each call to subscribe() returns a distinct handle, even for the
    same handler, so duplicate registrations can be removed one at a
    time.
    """

    model_config = ConfigDict(frozen=True)

    kind: EventKind = Field(description="Event kind the handler receives")
    handler: Handler = Field(description="Callback invoked on dispatch")
    token: UUID = Field(
        default_factory=uuid4,
        description="Distinguishes repeated subscriptions of one handler",
    )
