"""Actuation, escalation and display sinks."""

from .alerts import AlertLog
from .cooling import CoolingMechanism
from .emergency import EmergencyShutdown

__all__ = [
    "AlertLog",
    "CoolingMechanism",
    "EmergencyShutdown",
]
