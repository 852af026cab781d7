"""Abstract temperature source."""

import logging
import time
from abc import ABC, abstractmethod
from typing import Any, Iterator

from pydantic import ConfigDict, Field

from .entity import Entity
from .sample import TemperatureSample


class TemperatureSource(Entity, ABC):
    """Producer of an ordered stream of temperature samples.

    A source may be finite (a recorded list) or unbounded (a polled
    sensor). Pacing between readings belongs to the source, through
    interval_ns and pause(); the monitor pulls samples as fast as the
    source hands them out.

    Subclasses implement samples(). Exceptions raised while iterating
    are treated by the monitor as a failed read and end the run.
    """

    model_config = ConfigDict(frozen=False)

    interval_ns: int = Field(
        default=0,
        ge=0,
        description="Pause between consecutive samples in nanoseconds",
    )

    def __init__(self, **data: Any) -> None:
        super().__init__(**data)
        self._logger = logging.getLogger(
            f"{self.__class__.__module__}."
            f"{self.__class__.__name__}."
            f"{self.name}"
        )

    @abstractmethod
    def samples(self) -> Iterator[TemperatureSample]:
        """Yield samples in order until the source is exhausted."""

    def get_time(self) -> int:
        """Get the timestamp for a new sample in nanoseconds.

        Override to use a different clock, for example a fixed clock in
        tests or a timestamp reported by the hardware itself.

        Returns:
            Current wall-clock time in nanoseconds since epoch

        """
        return time.time_ns()

    def make_sample(self, value: float) -> TemperatureSample:
        """Stamp a raw value with the current time."""
        return TemperatureSample(value=value, timestamp=self.get_time())

    def pause(self) -> None:
        """Wait out the pacing interval before the next sample."""
        if self.interval_ns > 0:
            self._logger.debug(f"Pausing {self.interval_ns} ns")
            time.sleep(self.interval_ns / 1_000_000_000)
