"""Components that connect monitors to sinks."""

from .thermostat import Thermostat

__all__ = [
    "Thermostat",
]
