"""Temperature source backed by a polled reader."""

from typing import Callable, Iterator

from pydantic import Field

from thermowatch.base.sample import TemperatureSample
from thermowatch.base.source import TemperatureSource


class PollingSource(TemperatureSource):
    """Source that calls a reader function once per sample.

    The reader is typically a thin wrapper around a hardware read, such
    as parsing a hwmon temp*_input file. Without max_samples the source
    never ends on its own; stop the monitor to end the run. An exception
    raised by the reader propagates out of samples() and ends the run.
    """

    read: Callable[[], float] = Field(
        exclude=True,
        description="Returns the current temperature",
    )
    interval_ns: int = Field(
        default=1_000_000_000,  # 1 second in nanoseconds
        ge=0,
        description="Pause between consecutive reads in nanoseconds",
    )
    max_samples: int | None = Field(
        default=None,
        ge=1,
        description="Stop after this many samples; None polls forever",
    )

    def samples(self) -> Iterator[TemperatureSample]:
        count = 0
        while self.max_samples is None or count < self.max_samples:
            if count:
                self.pause()
            yield self.make_sample(self.read())
            count += 1
