"""Thermostat wiring a monitor to its sinks."""

import logging
from typing import Any, Callable

from pydantic import ConfigDict, Field

from thermowatch.base.entity import Entity
from thermowatch.base.events import Subscription, TransitionEvent
from thermowatch.base.monitor import FailurePolicy, SensorMonitor
from thermowatch.base.sample import Thresholds
from thermowatch.base.sink import Sink
from thermowatch.base.source import TemperatureSource
from thermowatch.sinks import AlertLog, CoolingMechanism, EmergencyShutdown


class Thermostat(Entity):
    """Connects one SensorMonitor to the sinks that act on its events.

    The thermostat owns the wiring, not the sinks' behaviour: wire()
    subscribes every sink to the event kinds it declares, unwire()
    removes exactly those subscriptions again, and run() wires (if
    needed) and drains the monitor's source.

    for_device() assembles the usual arrangement: an alert log, a
    cooling mechanism and an emergency shutdown path.
    """

    model_config = ConfigDict(frozen=False)

    monitor: SensorMonitor = Field(
        description="Monitor whose events drive the sinks"
    )
    sinks: list[Sink] = Field(
        default_factory=list,
        description="Sinks subscribed in list order",
    )

    def __init__(self, **data: Any) -> None:
        super().__init__(**data)
        self._logger = logging.getLogger(
            f"{self.__class__.__module__}."
            f"{self.__class__.__name__}."
            f"{self.name}"
        )
        self._subscriptions: list[Subscription] = []

    @classmethod
    def for_device(
        cls,
        name: str,
        thresholds: Thresholds,
        source: TemperatureSource,
        *,
        switch: Callable[[bool], None] | None = None,
        notifier: Callable[[TransitionEvent | None], None] | None = None,
        shutdown_action: Callable[[], None] | None = None,
        failure_policy: FailurePolicy = FailurePolicy.ISOLATE,
    ) -> "Thermostat":
        """Build a thermostat with alert, cooling and emergency sinks.

        Args:
            name: Base name; the monitor and sinks derive theirs from it
            thresholds: Warning and emergency levels
            source: Where temperatures come from
            switch: Hardware hook for the cooling mechanism
            notifier: Out-of-band emergency notification
            shutdown_action: Device shutdown sequence
            failure_policy: Policy for failing sinks

        Returns:
            An unwired Thermostat

        """
        monitor = SensorMonitor(
            name=f"{name}.monitor",
            thresholds=thresholds,
            source=source,
            failure_policy=failure_policy,
        )
        sinks: list[Sink] = [
            AlertLog(name=f"{name}.alerts", thresholds=thresholds),
            CoolingMechanism(name=f"{name}.cooling", switch=switch),
            EmergencyShutdown(
                name=f"{name}.emergency",
                notifier=notifier,
                shutdown_action=shutdown_action,
            ),
        ]
        return cls(name=name, monitor=monitor, sinks=sinks)

    def get_sink(self, name: str) -> Sink | None:
        """Get a sink by name, returning None if not found."""
        for sink in self.sinks:
            if sink.name == name:
                return sink
        return None

    def is_wired(self) -> bool:
        """Check whether the sinks are currently subscribed."""
        return bool(self._subscriptions)

    def wire(self) -> None:
        """Subscribe every sink to the monitor. Does nothing if wired."""
        if self.is_wired():
            return
        for sink in self.sinks:
            self._subscriptions.extend(sink.attach(self.monitor))
        self._logger.debug(
            f"Wired {len(self.sinks)} sinks with "
            f"{len(self._subscriptions)} subscriptions"
        )

    def unwire(self) -> None:
        """Remove the subscriptions made by wire()."""
        for subscription in self._subscriptions:
            self.monitor.unsubscribe(subscription)
        self._subscriptions = []

    def run(self) -> None:
        """Wire the sinks and run the monitor to completion."""
        self._logger.info(f"Thermostat {self.name} is running")
        self.wire()
        self.monitor.run()
