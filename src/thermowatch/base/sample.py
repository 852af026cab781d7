"""Temperature samples and threshold configuration."""

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .errors import InvalidThresholdsError


class TemperatureSample(BaseModel):
    """A single temperature reading.

    The value is taken as-is; no unit conversion happens anywhere in
    thermowatch. NaN and infinite readings are rejected, so a garbage
    read from a source ends the run instead of being classified.
    Timestamps are nanoseconds since the epoch.
    """

    model_config = ConfigDict(frozen=True)

    value: float = Field(
        allow_inf_nan=False, description="Sensed temperature"
    )
    timestamp: int = Field(
        ge=0, description="Time of the reading in nanoseconds"
    )


class Thresholds(BaseModel):
    """Warning and emergency boundaries for a monitor.

    Both bounds are inclusive: a sample equal to a level counts as
    having reached it.
    """

    model_config = ConfigDict(frozen=True)

    warning_level: float = Field(
        description="Temperature at or above which a warning is raised"
    )
    emergency_level: float = Field(
        description="Temperature at or above which an emergency is raised"
    )

    @model_validator(mode="after")
    def _check_order(self) -> "Thresholds":
        # Propagates as-is: pydantic only wraps ValueError and AssertionError
        # NaN on either side fails "<"
        if not self.warning_level < self.emergency_level:
            raise InvalidThresholdsError(
                self.warning_level, self.emergency_level
            )
        return self
