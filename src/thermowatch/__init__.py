"""Threshold-based temperature monitoring with hysteresis."""

# Core monitoring classes
from .base import (
    Classification,
    Entity,
    EventKind,
    FailurePolicy,
    Handler,
    InvalidThresholdsError,
    MonitorError,
    MonitorRunner,
    SensorMonitor,
    Sink,
    SourceReadError,
    SubscriberError,
    Subscription,
    TemperatureSample,
    TemperatureSource,
    Thresholds,
    TransitionEvent,
    classify,
)

# Wiring
from .controllers import Thermostat

# Sinks
from .sinks import AlertLog, CoolingMechanism, EmergencyShutdown

# Sources
from .sources import PollingSource, SequenceSource

__all__ = [
    "AlertLog",
    "Classification",
    "CoolingMechanism",
    "EmergencyShutdown",
    "Entity",
    "EventKind",
    "FailurePolicy",
    "Handler",
    "InvalidThresholdsError",
    "MonitorError",
    "MonitorRunner",
    "PollingSource",
    "SensorMonitor",
    "SequenceSource",
    "Sink",
    "SourceReadError",
    "SubscriberError",
    "Subscription",
    "TemperatureSample",
    "TemperatureSource",
    "Thermostat",
    "Thresholds",
    "TransitionEvent",
    "classify",
]
