"""Base class for event subscribers."""

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, ClassVar

from pydantic import ConfigDict

from .entity import Entity
from .events import EventKind, Subscription, TransitionEvent

if TYPE_CHECKING:
    from .monitor import SensorMonitor


class Sink(Entity, ABC):
    """A subscriber that reacts to transition events with a side effect.

    Sinks are the actuators, escalation paths and displays hanging off
    a monitor. Each sink declares the event kinds it cares about in
    event_kinds and receives them through on_event(). The monitor does
    not own sinks; attaching one only registers its callback.
    """

    model_config = ConfigDict(frozen=False)

    event_kinds: ClassVar[tuple[EventKind, ...]] = ()

    def __init__(self, **data: Any) -> None:
        super().__init__(**data)
        self._logger = logging.getLogger(
            f"{self.__class__.__module__}."
            f"{self.__class__.__name__}."
            f"{self.name}"
        )

    @abstractmethod
    def on_event(self, event: TransitionEvent) -> None:
        """React to one event of a kind listed in event_kinds."""

    def attach(self, monitor: "SensorMonitor") -> list[Subscription]:
        """Subscribe on_event() to every kind in event_kinds.

        Returns:
            The subscription handles, in event_kinds order

        """
        return [
            monitor.subscribe(kind, self.on_event) for kind in self.event_kinds
        ]
