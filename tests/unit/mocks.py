"""Fakes for testing monitors, sources and sinks.

Sources here use a deterministic clock so event timestamps can be
asserted exactly.
"""

from typing import ClassVar, Iterator

from pydantic import Field

from thermowatch import (
    EventKind,
    SequenceSource,
    Sink,
    TemperatureSample,
    TemperatureSource,
    TransitionEvent,
)


class FixedClockSource(SequenceSource):
    """SequenceSource whose clock ticks by a fixed step per sample."""

    start_ns: int = Field(default=1_000, description="First timestamp")
    step_ns: int = Field(default=1_000, description="Tick per sample")
    ticks: int = Field(default=0, description="Samples stamped so far")

    def get_time(self) -> int:
        timestamp = self.start_ns + self.ticks * self.step_ns
        self.ticks += 1
        return timestamp


class FailingSource(TemperatureSource):
    """Yields its values, then fails like a broken sensor read."""

    values: list[float] = Field(default_factory=list)
    closed: bool = Field(default=False)

    def samples(self) -> Iterator[TemperatureSample]:
        try:
            for value in self.values:
                yield self.make_sample(value)
            msg = "sensor disconnected"
            raise OSError(msg)
        finally:
            self.closed = True


class EndlessSource(TemperatureSource):
    """Repeats one value forever."""

    value: float = Field(default=20.0)

    def samples(self) -> Iterator[TemperatureSample]:
        while True:
            yield self.make_sample(self.value)


class Recorder:
    """Handler that remembers every event it receives."""

    def __init__(self) -> None:
        self.events: list[TransitionEvent] = []

    def __call__(self, event: TransitionEvent) -> None:
        self.events.append(event)

    @property
    def kinds(self) -> list[EventKind]:
        return [event.kind for event in self.events]

    @property
    def values(self) -> list[float]:
        return [event.value for event in self.events]


class RecordingSink(Sink):
    """Sink listening to every kind and recording what it saw."""

    event_kinds: ClassVar[tuple[EventKind, ...]] = tuple(EventKind)

    received: list[TransitionEvent] = Field(default_factory=list)

    def on_event(self, event: TransitionEvent) -> None:
        self.received.append(event)


def failing_handler(event: TransitionEvent) -> None:
    """Handler that always raises."""
    msg = f"handler broke on {event.value}"
    raise RuntimeError(msg)
