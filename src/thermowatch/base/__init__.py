"""Base classes for the thermowatch temperature monitor."""

from thermowatch.base.classifier import Classification, classify
from thermowatch.base.entity import Entity
from thermowatch.base.errors import (
    InvalidThresholdsError,
    MonitorError,
    SourceReadError,
    SubscriberError,
)
from thermowatch.base.events import (
    EventKind,
    Handler,
    Subscription,
    TransitionEvent,
)
from thermowatch.base.monitor import FailurePolicy, SensorMonitor
from thermowatch.base.runner import MonitorRunner
from thermowatch.base.sample import TemperatureSample, Thresholds
from thermowatch.base.sink import Sink
from thermowatch.base.source import TemperatureSource

__all__ = [
    "Classification",
    "Entity",
    "EventKind",
    "FailurePolicy",
    "Handler",
    "InvalidThresholdsError",
    "MonitorError",
    "MonitorRunner",
    "SensorMonitor",
    "Sink",
    "SourceReadError",
    "Subscription",
    "SubscriberError",
    "TemperatureSample",
    "TemperatureSource",
    "Thresholds",
    "TransitionEvent",
    "classify",
]
