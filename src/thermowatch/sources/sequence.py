"""Fixed, in-memory temperature sequence."""

from typing import Iterator

from pydantic import Field

from thermowatch.base.sample import TemperatureSample
from thermowatch.base.source import TemperatureSource


class SequenceSource(TemperatureSource):
    """Source that replays a fixed list of temperatures.

    Each value is stamped with the source clock as it is handed out.
    With a nonzero interval_ns the source pauses between values, but
    never after the last one.
    """

    values: list[float] = Field(
        default_factory=list,
        description="Temperatures to replay, in order",
    )

    def samples(self) -> Iterator[TemperatureSample]:
        for index, value in enumerate(self.values):
            if index:
                self.pause()
            yield self.make_sample(value)
